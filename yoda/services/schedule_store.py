# yoda/services/schedule_store.py
"""
In-memory schedule store

No validation happens here; the API schemas check emotions and persona kind
before anything reaches the store.
"""

import threading
import uuid
from datetime import datetime
from typing import Iterable, List, Optional

from yoda.models import Schedule
from yoda.utils.time_utils import Clock, system_clock


class ScheduleStore:
    def __init__(self, clock: Clock = None):
        self._schedules: List[Schedule] = []
        self._lock = threading.Lock()
        self._clock = clock or system_clock()

    def create(
        self,
        user_id: str,
        content: str,
        date: str,
        emotions: Iterable[str],
        sender_type: str,
        sender_name: Optional[str] = None,
        detail: Optional[str] = None,
        created_at: Optional[datetime] = None,
        schedule_id: Optional[str] = None,
    ) -> Schedule:
        schedule = Schedule(
            id=schedule_id or f"schedule-{uuid.uuid4().hex}",
            user_id=user_id,
            content=content,
            date=date,
            # unordered set of tags; keep first-seen order for display
            emotions=list(dict.fromkeys(emotions)),
            sender_type=sender_type,
            sender_name=sender_name,
            detail=detail,
            created_at=created_at or self._clock(),
        )
        with self._lock:
            self._schedules.append(schedule)
        return schedule.model_copy(deep=True)

    def list_by_owner(self, user_id: str) -> List[Schedule]:
        with self._lock:
            return [s.model_copy(deep=True) for s in self._schedules if s.user_id == user_id]

    def list_due(self, date: str) -> List[Schedule]:
        """All schedules targeting ``date``, in insertion order."""
        with self._lock:
            return [s.model_copy(deep=True) for s in self._schedules if s.date == date]

    def get(self, schedule_id: str) -> Optional[Schedule]:
        with self._lock:
            for schedule in self._schedules:
                if schedule.id == schedule_id:
                    return schedule.model_copy(deep=True)
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._schedules)
