# yoda/schemas/schedule_schemas.py

from datetime import date as Date
from typing import List, Optional

from pydantic import field_validator, model_validator

from yoda.models import Base, PersonaKind


# Request schema (camelCase on the wire: senderType, senderName)
class ScheduleCreateRequest(Base):
    content: str
    date: Date
    emotions: List[str]
    sender_type: str
    sender_name: Optional[str] = None
    detail: Optional[str] = None

    @field_validator("content")
    @classmethod
    def validate_content(cls, v):
        if not v.strip():
            raise ValueError("content must not be empty")
        return v.strip()

    @field_validator("emotions")
    @classmethod
    def validate_emotions(cls, v):
        tags = [e.strip().lower() for e in v if e and e.strip()]
        if not tags:
            raise ValueError("select at least one emotion")
        return list(dict.fromkeys(tags))

    @field_validator("sender_type")
    @classmethod
    def validate_sender_type(cls, v):
        # strict here; PersonaKind.parse's silent fallback is for stored legacy values
        try:
            return PersonaKind(v).value
        except ValueError:
            valid = ", ".join(k.value for k in PersonaKind)
            raise ValueError(f"Invalid senderType. Must be one of: {valid}")

    @field_validator("sender_name", "detail")
    @classmethod
    def blank_to_none(cls, v):
        if v is not None and not v.strip():
            return None
        return v.strip() if v is not None else v

    @model_validator(mode="after")
    def require_sender_name(self):
        if PersonaKind(self.sender_type).needs_name and not self.sender_name:
            raise ValueError("senderName is required for this senderType")
        return self
