"""Pytest configuration for the Your Yoda test suite."""

import random
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from yoda.config import Settings
from yoda.main import create_app
from yoda.services.container import ServiceContainer

NOW = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)
TODAY = "2026-10-19"
TOMORROW = "2026-10-20"


class MutableClock:
    """Clock that tests can move forward."""

    def __init__(self, value: datetime):
        self.value = value

    def __call__(self) -> datetime:
        return self.value

    def advance(self, **kwargs) -> None:
        self.value = self.value + timedelta(**kwargs)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        jwt_secret_key="test-secret",
        bcrypt_rounds=4,
        letter_job_enabled=False,
        seed_demo_data=False,
    )


@pytest.fixture
def clock() -> MutableClock:
    return MutableClock(NOW)


@pytest.fixture
def container(settings, clock) -> ServiceContainer:
    return ServiceContainer(settings, clock=clock, rng=random.Random(7))


@pytest.fixture
def client(settings, container):
    app = create_app(settings, container)
    with TestClient(app) as test_client:
        yield test_client


def make_user(container: ServiceContainer, name: str = "Mina", email: str = "mina@gmail.com"):
    """Insert a user directly, skipping bcrypt."""
    return container.users.create(name=name, email=email, password_hash="not-a-real-hash")


def make_schedule(container: ServiceContainer, user_id: str, **overrides):
    fields = {
        "user_id": user_id,
        "content": "Important presentation",
        "date": TODAY,
        "emotions": ["excited", "tense"],
        "sender_type": "future-self",
        "sender_name": None,
    }
    fields.update(overrides)
    return container.schedules.create(**fields)
