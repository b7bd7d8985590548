# yoda/services/user_store.py
"""
In-memory identity store
"""

import threading
import uuid
from typing import Dict, List, Optional

from yoda.errors import DuplicateHandleError
from yoda.models import User


class UserStore:
    def __init__(self):
        self._users: List[User] = []
        self._by_email: Dict[str, User] = {}
        self._lock = threading.Lock()

    @staticmethod
    def normalize_email(email: str) -> str:
        return email.strip().lower()

    def create(self, name: str, email: str, password_hash: str, user_id: str = None) -> User:
        """Append a user; the email (login handle) must be unused."""
        key = self.normalize_email(email)
        user = User(
            id=user_id or f"user-{uuid.uuid4().hex}",
            name=name,
            email=key,
            password_hash=password_hash,
        )
        with self._lock:
            if key in self._by_email:
                raise DuplicateHandleError()
            self._users.append(user)
            self._by_email[key] = user
        return user.model_copy()

    def find_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            user = self._by_email.get(self.normalize_email(email))
        return user.model_copy() if user else None

    def get(self, user_id: str) -> Optional[User]:
        with self._lock:
            for user in self._users:
                if user.id == user_id:
                    return user.model_copy()
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
