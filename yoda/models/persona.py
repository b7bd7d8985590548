# yoda/models/persona.py
"""
Persona kinds and emotion tags.

Both are closed enumerations with an explicit default arm for values written
by older clients: unknown persona kinds resolve to FUTURE_SELF and unknown
emotion tags to UNKNOWN.
"""

from enum import Enum
from typing import Union


class PersonaKind(str, Enum):
    FUTURE_SELF = "future-self"
    CELEBRITY = "celebrity"
    MENTOR = "mentor"
    LOVED_ONE = "loved-one"

    @classmethod
    def _missing_(cls, value):
        # deprecated alias used by the first demo data set
        if isinstance(value, str) and value.strip().lower() == "famous":
            return cls.CELEBRITY
        return None

    @classmethod
    def parse(cls, value: Union[str, "PersonaKind", None]) -> "PersonaKind":
        """Resolve ``value`` to a member, defaulting to FUTURE_SELF."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.FUTURE_SELF

    @property
    def needs_name(self) -> bool:
        return self is not PersonaKind.FUTURE_SELF


class EmotionTag(str, Enum):
    EXCITED = "excited"
    TENSE = "tense"
    ANXIOUS = "anxious"
    CONFIDENT = "confident"
    TIRED = "tired"
    MOTIVATED = "motivated"
    CALM = "calm"
    OVERWHELMED = "overwhelmed"
    HOPEFUL = "hopeful"
    WORRIED = "worried"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Union[str, "EmotionTag"]) -> "EmotionTag":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.UNKNOWN
