# yoda/models/letter.py
"""
Letter model (generated by the letter job, read-tracked by the owner)
"""

from datetime import datetime
from typing import Optional

from .base import Base


class Letter(Base):
    id: str
    user_id: str
    schedule_id: str
    sender_type: str
    sender_name: Optional[str] = None
    content: str
    created_at: datetime
    read_at: Optional[datetime] = None
