"""Tests for first-run demo data."""

import pytest

from yoda.services.demo_seeder import seed_demo_data

from conftest import TODAY, TOMORROW


@pytest.mark.asyncio
async def test_seed_creates_demo_records(container):
    assert await seed_demo_data(container) is True

    user = container.users.find_by_email("mina@gmail.com")
    assert user.name == "Mina"

    schedules = container.schedules.list_by_owner(user.id)
    assert [(s.date, s.sender_type, s.sender_name) for s in schedules] == [
        (TOMORROW, "celebrity", "Trump"),
        (TODAY, "mentor", "Tanaka Sensei"),
    ]

    [letter] = container.letters.list_by_owner(user.id)
    meeting = schedules[1]
    assert letter.schedule_id == meeting.id
    assert letter.read_at is None
    assert letter.content == container.letter_chain.render(
        user_name="Mina",
        content=meeting.content,
        emotions=meeting.emotions,
        sender_type="mentor",
        sender_name="Tanaka Sensei",
        randomize=False,
    )


@pytest.mark.asyncio
async def test_seed_is_idempotent(container):
    await seed_demo_data(container)

    assert await seed_demo_data(container) is False
    assert len(container.users) == 1
    assert len(container.schedules) == 2
    assert len(container.letters) == 1


@pytest.mark.asyncio
async def test_demo_user_can_log_in(container):
    await seed_demo_data(container)

    user, token = await container.auth.authenticate("mina@gmail.com", "password123")

    assert user.id == "user-demo"
    assert token


@pytest.mark.asyncio
async def test_job_picks_up_seeded_schedule_on_its_date(container, clock):
    await seed_demo_data(container)

    # today's schedule already has its letter
    assert container.letter_job.run_once() == []

    clock.advance(days=1)
    [letter] = container.letter_job.run_once()
    assert letter.sender_name == "Trump"
