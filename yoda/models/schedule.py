# yoda/models/schedule.py
"""
Schedule model: a user's plan and emotions for a target date
"""

from datetime import datetime
from typing import List, Optional

from .base import Base


class Schedule(Base):
    id: str
    user_id: str
    content: str
    date: str  # YYYY-MM-DD, compared as a string against "today"
    emotions: List[str]
    sender_type: str
    sender_name: Optional[str] = None
    detail: Optional[str] = None
    created_at: datetime
