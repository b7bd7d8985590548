# yoda/services/auth_service.py
"""
Authentication service
Password hashing (bcrypt), JWT issue/verify (python-jose), register/login
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

import bcrypt
from fastapi.concurrency import run_in_threadpool
from jose import JWTError, jwt
from pydantic import BaseModel

from yoda.config import Settings, settings as default_settings
from yoda.errors import DuplicateHandleError, InvalidCredentialsError, InvalidOrExpiredCredentialError
from yoda.models import User, UserPublic
from yoda.services.user_store import UserStore
from yoda.utils.logger import logger


class AuthenticatedIdentity(BaseModel):
    user_id: str
    email: str


# bcrypt only reads the first 72 bytes; newer releases raise instead of truncating
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 10) -> str:
    """Hash a password using bcrypt."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return bcrypt.checkpw(_password_bytes(plain_password), hashed_password.encode("utf-8"))


class AuthService:
    def __init__(self, users: UserStore, settings: Optional[Settings] = None):
        self.users = users
        self.settings = settings or default_settings

    # ---- credentials ----

    def create_access_token(self, user: User) -> str:
        """Create a signed token carrying the user id and email."""
        now = datetime.now(timezone.utc)
        claims = {
            "sub": user.id,
            "email": user.email,
            "iat": now,
            "exp": now + timedelta(days=self.settings.access_token_expire_days),
        }
        return jwt.encode(claims, self.settings.jwt_secret_key, algorithm=self.settings.jwt_algorithm)

    def verify(self, token: str) -> AuthenticatedIdentity:
        """Decode and validate a token. Expiry is checked by jose."""
        try:
            payload = jwt.decode(token, self.settings.jwt_secret_key, algorithms=[self.settings.jwt_algorithm])
        except JWTError as e:
            logger.debug(f"Token rejected: {e}")
            raise InvalidOrExpiredCredentialError()

        user_id = payload.get("sub")
        email = payload.get("email")
        if not user_id or not email:
            raise InvalidOrExpiredCredentialError()
        return AuthenticatedIdentity(user_id=user_id, email=email)

    # ---- accounts ----

    async def register(self, name: str, email: str, password: str) -> Tuple[UserPublic, str]:
        if self.users.find_by_email(email) is not None:
            raise DuplicateHandleError()

        password_hash = await run_in_threadpool(hash_password, password, self.settings.bcrypt_rounds)
        # create() re-checks the email under the store lock
        user = self.users.create(name=name, email=email, password_hash=password_hash)
        logger.info(f"Registered user {user.id}")
        return user.public(), self.create_access_token(user)

    async def authenticate(self, email: str, password: str) -> Tuple[UserPublic, str]:
        user = self.users.find_by_email(email)
        if user is None:
            raise InvalidCredentialsError()

        if not await run_in_threadpool(verify_password, password, user.password_hash):
            raise InvalidCredentialsError()

        return user.public(), self.create_access_token(user)

    def current_user(self, identity: AuthenticatedIdentity) -> UserPublic:
        user = self.users.get(identity.user_id)
        if user is None:
            raise InvalidOrExpiredCredentialError()
        return user.public()
