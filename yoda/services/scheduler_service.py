from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from enum import Enum
from typing import List, Optional

from yoda.chains.letter_chain import LetterChain
from yoda.models import Letter, Schedule
from yoda.services.letter_store import LetterStore
from yoda.services.schedule_store import ScheduleStore
from yoda.services.user_store import UserStore
from yoda.utils.logger import logger
from yoda.utils.time_utils import Clock, system_clock, today_str


class JobState(str, Enum):
    IDLE = "idle"
    SCANNING = "scanning"


class LetterGenerationJob:
    """Turns schedules dated today into letters, once per schedule.

    ``run_once`` is a single tick; ``start`` runs it on an interval until
    ``stop``. Only this job creates letters after startup, and it inserts
    through ``LetterStore.create_for_schedule`` so a schedule never gets two.
    """

    JOB_ID = "letter_generation"

    def __init__(
        self,
        users: UserStore,
        schedules: ScheduleStore,
        letters: LetterStore,
        chain: LetterChain,
        clock: Optional[Clock] = None,
        interval_seconds: int = 60,
    ):
        self.users = users
        self.schedules = schedules
        self.letters = letters
        self.chain = chain
        self.clock = clock or system_clock()
        self.interval_seconds = interval_seconds
        self.state = JobState.IDLE
        self.scheduler: Optional[AsyncIOScheduler] = None

    @property
    def running(self) -> bool:
        return self.scheduler is not None and self.scheduler.running

    def start(self):
        try:
            self.scheduler = AsyncIOScheduler()
            self.scheduler.add_job(
                func=self.tick,
                trigger=IntervalTrigger(seconds=self.interval_seconds),
                id=self.JOB_ID,
                max_instances=1,
                coalesce=True,
            )
            self.scheduler.start()
            logger.info(f"Letter job started (every {self.interval_seconds}s)")
        except Exception as e:
            logger.error(f"Letter job failed to start: {e}")
            raise

    def stop(self):
        if not self.running:
            return
        try:
            self.scheduler.shutdown(wait=False)
            logger.info("Letter job stopped")
        except Exception as e:
            logger.error(f"Letter job failed to stop: {e}")
        finally:
            self.scheduler = None

    async def tick(self):
        self.run_once()

    def run_once(self) -> List[Letter]:
        """Scan today's schedules and create the missing letters."""
        self.state = JobState.SCANNING
        created: List[Letter] = []
        skipped = failed = 0
        try:
            today = today_str(self.clock)
            logger.debug(f"Letter job scanning schedules for {today}")

            for schedule in self.schedules.list_due(today):
                if self.letters.exists_for_schedule(schedule.id):
                    skipped += 1
                    continue
                try:
                    letter = self._generate(schedule)
                except Exception:
                    failed += 1
                    logger.exception(f"Letter generation failed for schedule {schedule.id}")
                    continue
                if letter is None:
                    skipped += 1
                else:
                    created.append(letter)

            if created or failed:
                logger.info(f"Letter job {today}: created={len(created)} skipped={skipped} failed={failed}")
        finally:
            self.state = JobState.IDLE
        return created

    def _generate(self, schedule: Schedule) -> Optional[Letter]:
        user = self.users.get(schedule.user_id)
        if user is None:
            logger.warning(f"Skipping orphaned schedule {schedule.id} (user {schedule.user_id} not found)")
            return None

        content = self.chain.render(
            user_name=user.name,
            content=schedule.content,
            emotions=schedule.emotions,
            sender_type=schedule.sender_type,
            sender_name=schedule.sender_name,
            randomize=True,
        )
        letter = self.letters.create_for_schedule(
            user_id=schedule.user_id,
            schedule_id=schedule.id,
            sender_type=schedule.sender_type,
            sender_name=schedule.sender_name,
            content=content,
            created_at=self.clock(),
        )
        if letter is not None:
            logger.info(f"Generated letter for user {user.name}, schedule {schedule.id}")
        return letter
