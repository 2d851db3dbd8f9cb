"""Tests for SessionStore: sign in without a password check, reload, sign out."""

from uuid import uuid4

import pytest

from core.domain.constants import SESSION_KEY
from core.domain.errors import AuthenticationError
from core.domain.models import SessionState
from core.services.session_service import SessionStore
from tests.fakes import InMemorySessionStorage


def test_new_session_is_loading(session):
    assert session.state == SessionState.LOADING
    assert session.user is None
    assert not session.is_authenticated


@pytest.mark.parametrize("password", ["", "wrong", "correct horse battery staple"])
async def test_sign_in_active_player_ignores_password(session, storage, alice, password):
    player = await session.sign_in(alice.email, password)

    assert player.id == alice.id
    assert session.state == SessionState.AUTHENTICATED
    assert session.user.nickname == "alice"
    assert storage.get_item(SESSION_KEY) == str(alice.id)


@pytest.mark.parametrize("password", ["", "anything"])
async def test_sign_in_blocked_player_fails(session, storage, blocked_player, password):
    with pytest.raises(AuthenticationError):
        await session.sign_in(blocked_player.email, password)

    assert session.state == SessionState.UNAUTHENTICATED
    assert storage.get_item(SESSION_KEY) is None


async def test_sign_in_unknown_email_fails(session):
    with pytest.raises(AuthenticationError):
        await session.sign_in("nobody@example.com", "pw")


async def test_sign_in_read_failure_becomes_authentication_error(session, player_repo, alice):
    player_repo.fail_reads = True

    with pytest.raises(AuthenticationError):
        await session.sign_in(alice.email, "pw")
    assert session.state == SessionState.UNAUTHENTICATED


async def test_sign_in_strips_email_whitespace(session, alice):
    await session.sign_in(f"  {alice.email} ", "pw")
    assert session.user.id == alice.id


async def test_check_auth_without_stored_id(session):
    assert await session.check_auth() is None
    assert session.state == SessionState.UNAUTHENTICATED


async def test_check_auth_restores_player(player_repo, alice):
    storage = InMemorySessionStorage({SESSION_KEY: str(alice.id)})
    session = SessionStore(player_repo=player_repo, storage=storage)

    player = await session.check_auth()

    assert player.id == alice.id
    assert session.is_authenticated
    assert not session.is_admin


async def test_check_auth_after_sign_out_is_unauthenticated(session, storage, alice):
    await session.sign_in(alice.email, "pw")
    await session.sign_out()

    assert storage.get_item(SESSION_KEY) is None
    assert await session.check_auth() is None
    assert session.state == SessionState.UNAUTHENTICATED


async def test_check_auth_clears_session_of_blocked_player(player_repo, storage, alice):
    session = SessionStore(player_repo=player_repo, storage=storage)
    await session.sign_in(alice.email, "pw")

    await player_repo.set_active(alice.id, False)
    reloaded = SessionStore(player_repo=player_repo, storage=storage)

    assert await reloaded.check_auth() is None
    assert reloaded.state == SessionState.UNAUTHENTICATED
    assert storage.get_item(SESSION_KEY) is None


async def test_check_auth_clears_unknown_id(player_repo):
    storage = InMemorySessionStorage({SESSION_KEY: str(uuid4())})
    session = SessionStore(player_repo=player_repo, storage=storage)

    assert await session.check_auth() is None
    assert storage.get_item(SESSION_KEY) is None


async def test_check_auth_clears_malformed_id(player_repo):
    storage = InMemorySessionStorage({SESSION_KEY: "not-a-uuid"})
    session = SessionStore(player_repo=player_repo, storage=storage)

    assert await session.check_auth() is None
    assert storage.get_item(SESSION_KEY) is None


async def test_check_auth_read_failure_logs_out_but_keeps_id(player_repo, alice):
    storage = InMemorySessionStorage({SESSION_KEY: str(alice.id)})
    session = SessionStore(player_repo=player_repo, storage=storage)
    player_repo.fail_reads = True

    assert await session.check_auth() is None
    assert session.state == SessionState.UNAUTHENTICATED
    assert storage.get_item(SESSION_KEY) == str(alice.id)


async def test_admin_flag(session, admin_player):
    await session.sign_in(admin_player.email, "")
    assert session.is_admin
