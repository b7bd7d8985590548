"""Tests for the letter generation job."""

import pytest

from yoda.chains.letter_chain import LetterChain
from yoda.prompts.letter_prompt import LetterPrompts
from yoda.services.scheduler_service import JobState, LetterGenerationJob

from conftest import TOMORROW, make_schedule, make_user


class ExplodingChain(LetterChain):
    """Fails for one schedule content, renders normally otherwise."""

    def __init__(self, bad_content):
        super().__init__()
        self.bad_content = bad_content

    def render(self, *args, **kwargs):
        if kwargs.get("content") == self.bad_content:
            raise RuntimeError("template failure")
        return super().render(*args, **kwargs)


def test_creates_one_letter_per_due_schedule(container):
    user = make_user(container)
    first = make_schedule(container, user.id, content="Presentation")
    second = make_schedule(container, user.id, content="Dinner", sender_type="loved-one", sender_name="Mom")

    created = container.letter_job.run_once()

    assert len(created) == 2
    letters = container.letters.list_by_owner(user.id)
    assert [l.schedule_id for l in letters] == [first.id, second.id]
    for letter, schedule in zip(letters, [first, second]):
        assert letter.user_id == schedule.user_id
        assert letter.sender_type == schedule.sender_type
        assert letter.sender_name == schedule.sender_name
        assert letter.read_at is None


def test_running_twice_does_not_duplicate(container):
    user = make_user(container)
    make_schedule(container, user.id)

    container.letter_job.run_once()
    second = container.letter_job.run_once()

    assert second == []
    assert len(container.letters.list_by_owner(user.id)) == 1


def test_only_schedules_without_letters_are_processed(container):
    user = make_user(container)
    done = make_schedule(container, user.id, content="Already answered")
    pending = make_schedule(container, user.id, content="Still waiting")
    container.letters.create(user.id, done.id, done.sender_type, None, "existing letter")

    created = container.letter_job.run_once()

    assert [l.schedule_id for l in created] == [pending.id]
    assert len(container.letters.list_by_owner(user.id)) == 2


def test_future_schedules_wait_for_their_date(container, clock):
    user = make_user(container)
    schedule = make_schedule(container, user.id, date=TOMORROW)

    assert container.letter_job.run_once() == []

    clock.advance(days=1)
    [letter] = container.letter_job.run_once()
    assert letter.schedule_id == schedule.id


def test_trump_schedule_gets_trump_letter(container, clock):
    user = make_user(container, name="Mina")
    schedule = make_schedule(
        container,
        user.id,
        content="Important presentation",
        date=TOMORROW,
        emotions=["excited", "tense"],
        sender_type="celebrity",
        sender_name="Trump",
    )

    clock.advance(days=1)
    container.letter_job.run_once()

    [letter] = container.letters.list_by_owner(user.id)
    assert letter.schedule_id == schedule.id
    assert letter.content in container.letter_chain.variants(
        user_name="Mina",
        content=schedule.content,
        emotions=schedule.emotions,
        sender_type="celebrity",
        sender_name="Trump",
    )
    trump_bodies = [
        t.format(name="Mina", content=schedule.content, emotions="excited and tense")
        for t in LetterPrompts.POOLS[LetterPrompts.TRUMP_KEY]
    ]
    assert any(body in letter.content for body in trump_bodies)


def test_orphaned_schedule_is_skipped(container):
    make_schedule(container, "user-gone")

    assert container.letter_job.run_once() == []
    assert len(container.letters) == 0


def test_failure_on_one_schedule_does_not_stop_the_tick(container, clock):
    user = make_user(container)
    bad = make_schedule(container, user.id, content="boom")
    good = make_schedule(container, user.id, content="fine")
    job = LetterGenerationJob(
        users=container.users,
        schedules=container.schedules,
        letters=container.letters,
        chain=ExplodingChain("boom"),
        clock=clock,
    )

    created = job.run_once()

    assert [l.schedule_id for l in created] == [good.id]
    assert not container.letters.exists_for_schedule(bad.id)
    assert job.state is JobState.IDLE

    # a failed schedule has no letter, so the next tick tries it again
    job.chain = LetterChain()
    [retried] = job.run_once()
    assert retried.schedule_id == bad.id


@pytest.mark.asyncio
async def test_start_and_stop_lifecycle(container):
    job = container.letter_job
    assert not job.running

    job.start()
    try:
        assert job.running
        assert job.scheduler.get_job(LetterGenerationJob.JOB_ID) is not None
    finally:
        job.stop()

    assert not job.running


@pytest.mark.asyncio
async def test_tick_runs_one_scan(container):
    user = make_user(container)
    make_schedule(container, user.id)

    await container.letter_job.tick()

    assert len(container.letters.list_by_owner(user.id)) == 1
    assert container.letter_job.state is JobState.IDLE
