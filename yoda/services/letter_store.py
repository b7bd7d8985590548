# yoda/services/letter_store.py
"""
In-memory letter store

Every operation runs under one lock, so the letter job and request handlers
never observe a half-applied insert or read mark.
"""

import threading
import uuid
from datetime import datetime
from typing import List, Optional

from yoda.errors import LetterNotFoundError
from yoda.models import Letter
from yoda.utils.time_utils import Clock, system_clock


class LetterStore:
    def __init__(self, clock: Clock = None):
        self._letters: List[Letter] = []
        self._schedule_ids = set()
        self._lock = threading.Lock()
        self._clock = clock or system_clock()

    def _build(
        self,
        user_id: str,
        schedule_id: str,
        sender_type: str,
        sender_name: Optional[str],
        content: str,
        created_at: Optional[datetime],
        read_at: Optional[datetime],
        letter_id: Optional[str],
    ) -> Letter:
        return Letter(
            id=letter_id or f"letter-{uuid.uuid4().hex}",
            user_id=user_id,
            schedule_id=schedule_id,
            sender_type=sender_type,
            sender_name=sender_name,
            content=content,
            created_at=created_at or self._clock(),
            read_at=read_at,
        )

    def _append(self, letter: Letter) -> None:
        self._letters.append(letter)
        self._schedule_ids.add(letter.schedule_id)

    def create(
        self,
        user_id: str,
        schedule_id: str,
        sender_type: str,
        sender_name: Optional[str],
        content: str,
        created_at: Optional[datetime] = None,
        read_at: Optional[datetime] = None,
        letter_id: Optional[str] = None,
    ) -> Letter:
        letter = self._build(
            user_id, schedule_id, sender_type, sender_name, content,
            created_at, read_at, letter_id,
        )
        with self._lock:
            self._append(letter)
        return letter.model_copy()

    def create_for_schedule(
        self,
        user_id: str,
        schedule_id: str,
        sender_type: str,
        sender_name: Optional[str],
        content: str,
        created_at: Optional[datetime] = None,
    ) -> Optional[Letter]:
        """Insert a letter unless one already exists for ``schedule_id``.

        The existence check and the append happen under the same lock.
        Returns None when the schedule already has a letter.
        """
        letter = self._build(
            user_id, schedule_id, sender_type, sender_name, content,
            created_at, None, None,
        )
        with self._lock:
            if schedule_id in self._schedule_ids:
                return None
            self._append(letter)
        return letter.model_copy()

    def exists_for_schedule(self, schedule_id: str) -> bool:
        with self._lock:
            return schedule_id in self._schedule_ids

    def list_by_owner(self, user_id: str) -> List[Letter]:
        with self._lock:
            return [letter.model_copy() for letter in self._letters if letter.user_id == user_id]

    def get(self, letter_id: str, user_id: str) -> Letter:
        with self._lock:
            letter = self._find(letter_id, user_id)
            return letter.model_copy()

    def mark_read(self, letter_id: str, user_id: str) -> datetime:
        """Set ``read_at`` on first read; later calls return the stored value."""
        with self._lock:
            letter = self._find(letter_id, user_id)
            if letter.read_at is None:
                letter.read_at = self._clock()
            return letter.read_at

    def _find(self, letter_id: str, user_id: str) -> Letter:
        for letter in self._letters:
            if letter.id == letter_id and letter.user_id == user_id:
                return letter
        raise LetterNotFoundError()

    def __len__(self) -> int:
        with self._lock:
            return len(self._letters)
