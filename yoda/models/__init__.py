# yoda/models/__init__.py
"""
Models package
In-memory records and the persona/emotion enumerations
"""

from .base import Base
from .persona import PersonaKind, EmotionTag
from .user import User, UserPublic
from .schedule import Schedule
from .letter import Letter

__all__ = [
    "Base",
    "PersonaKind",
    "EmotionTag",
    "User",
    "UserPublic",
    "Schedule",
    "Letter",
]
