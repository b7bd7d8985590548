# yoda/models/user.py
"""
User model
"""

from .base import Base


class User(Base):
    id: str
    name: str
    email: str
    password_hash: str

    def public(self) -> "UserPublic":
        return UserPublic(id=self.id, name=self.name, email=self.email)


class UserPublic(Base):
    id: str
    name: str
    email: str
