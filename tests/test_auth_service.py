"""Tests for registration, login and token verification."""

import pytest
from jose import jwt

from yoda.errors import DuplicateHandleError, InvalidCredentialsError, InvalidOrExpiredCredentialError
from yoda.services.auth_service import AuthService, hash_password, verify_password
from yoda.services.user_store import UserStore


def test_password_hash_round_trip():
    hashed = hash_password("password123", rounds=4)

    assert hashed != "password123"
    assert verify_password("password123", hashed)
    assert not verify_password("wrong", hashed)


@pytest.mark.asyncio
async def test_register_returns_user_and_token(container):
    user, token = await container.auth.register("Mina", "mina@gmail.com", "password123")

    assert user.name == "Mina"
    assert user.email == "mina@gmail.com"
    identity = container.auth.verify(token)
    assert identity.user_id == user.id
    assert identity.email == "mina@gmail.com"

    stored = container.users.find_by_email("mina@gmail.com")
    assert stored.password_hash != "password123"


@pytest.mark.asyncio
async def test_register_rejects_taken_email(container):
    await container.auth.register("Mina", "mina@gmail.com", "password123")

    with pytest.raises(DuplicateHandleError):
        await container.auth.register("Mina again", "mina@gmail.com", "other")


@pytest.mark.asyncio
async def test_authenticate(container):
    registered, _ = await container.auth.register("Mina", "mina@gmail.com", "password123")

    user, token = await container.auth.authenticate("mina@gmail.com", "password123")

    assert user.id == registered.id
    assert container.auth.verify(token).user_id == registered.id


@pytest.mark.asyncio
@pytest.mark.parametrize("email, password", [("mina@gmail.com", "wrong"), ("nobody@gmail.com", "password123")])
async def test_authenticate_rejects_bad_credentials(container, email, password):
    await container.auth.register("Mina", "mina@gmail.com", "password123")

    with pytest.raises(InvalidCredentialsError):
        await container.auth.authenticate(email, password)


def test_verify_rejects_garbage(container):
    with pytest.raises(InvalidOrExpiredCredentialError):
        container.auth.verify("not-a-token")


@pytest.mark.asyncio
async def test_verify_rejects_expired_token(container, settings):
    user, _ = await container.auth.register("Mina", "mina@gmail.com", "password123")
    expired_settings = settings.model_copy(update={"access_token_expire_days": -1})
    stored = container.users.get(user.id)

    token = AuthService(container.users, expired_settings).create_access_token(stored)

    with pytest.raises(InvalidOrExpiredCredentialError):
        container.auth.verify(token)


def test_verify_rejects_foreign_signature(container):
    token = jwt.encode({"sub": "user-1", "email": "x@y.z"}, "some-other-secret", algorithm="HS256")

    with pytest.raises(InvalidOrExpiredCredentialError):
        container.auth.verify(token)


@pytest.mark.asyncio
async def test_current_user_requires_existing_account(container):
    user, token = await container.auth.register("Mina", "mina@gmail.com", "password123")

    assert container.auth.current_user(container.auth.verify(token)) == user

    other = AuthService(UserStore(), container.settings)
    with pytest.raises(InvalidOrExpiredCredentialError):
        other.current_user(container.auth.verify(token))
