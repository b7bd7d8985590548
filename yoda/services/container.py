# yoda/services/container.py
"""
Service container

Owns one instance of every store and service. The app factory keeps it on
``app.state.container``; handlers and the letter job receive it instead of
reaching for module globals.
"""

import random
from typing import Optional

from yoda.chains.letter_chain import LetterChain
from yoda.config import Settings, settings as default_settings
from yoda.services.auth_service import AuthService
from yoda.services.letter_store import LetterStore
from yoda.services.schedule_store import ScheduleStore
from yoda.services.scheduler_service import LetterGenerationJob
from yoda.services.user_store import UserStore
from yoda.utils.time_utils import Clock, system_clock


class ServiceContainer:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        clock: Optional[Clock] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings or default_settings
        self.clock = clock or system_clock(self.settings.timezone)

        self.users = UserStore()
        self.schedules = ScheduleStore(clock=self.clock)
        self.letters = LetterStore(clock=self.clock)

        self.auth = AuthService(self.users, self.settings)
        self.letter_chain = LetterChain(rng=rng)
        self.letter_job = LetterGenerationJob(
            users=self.users,
            schedules=self.schedules,
            letters=self.letters,
            chain=self.letter_chain,
            clock=self.clock,
            interval_seconds=self.settings.letter_job_interval_seconds,
        )
