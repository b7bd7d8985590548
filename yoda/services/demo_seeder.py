# yoda/services/demo_seeder.py
"""
First-run demo data: one user, two schedules, one unread letter
"""

from datetime import timedelta

from fastapi.concurrency import run_in_threadpool

from yoda.models import PersonaKind
from yoda.services.auth_service import hash_password
from yoda.services.container import ServiceContainer
from yoda.utils.logger import logger
from yoda.utils.time_utils import date_str


async def seed_demo_data(container: ServiceContainer) -> bool:
    """Populate the stores once. Returns False if the demo user already exists."""
    settings = container.settings

    if container.users.find_by_email(settings.demo_user_email) is not None:
        logger.info("Demo data already present")
        return False

    password_hash = await run_in_threadpool(hash_password, settings.demo_user_password, settings.bcrypt_rounds)
    user = container.users.create(
        name=settings.demo_user_name,
        email=settings.demo_user_email,
        password_hash=password_hash,
        user_id="user-demo",
    )

    now = container.clock()
    yesterday = now - timedelta(days=1)

    container.schedules.create(
        user_id=user.id,
        content="Important presentation to the client team",
        date=date_str(now, days=1),
        emotions=["excited", "tense", "hopeful"],
        sender_type=PersonaKind.CELEBRITY.value,
        sender_name="Trump",
        detail="Feeling a mix of excitement and nerves about this presentation",
        created_at=now,
    )
    meeting = container.schedules.create(
        user_id=user.id,
        content="Meeting with my team to discuss the next phase of the project",
        date=date_str(now),
        emotions=["confident", "motivated"],
        sender_type=PersonaKind.MENTOR.value,
        sender_name="Tanaka Sensei",
        detail="Looking forward to sharing new ideas with the team",
        created_at=yesterday,
    )

    # Letter for the schedule submitted yesterday, as the job would have left it
    container.letters.create_for_schedule(
        user_id=user.id,
        schedule_id=meeting.id,
        sender_type=meeting.sender_type,
        sender_name=meeting.sender_name,
        content=container.letter_chain.render(
            user_name=user.name,
            content=meeting.content,
            emotions=meeting.emotions,
            sender_type=meeting.sender_type,
            sender_name=meeting.sender_name,
            randomize=False,
        ),
        created_at=now,
    )

    logger.info(f"Added demo data for {user.email}")
    return True
