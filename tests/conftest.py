from uuid import uuid4

import pytest

from core.domain.models import Utensil
from core.services.admin_service import AdminController
from core.services.event_service import EventSynchronizer
from core.services.rsvp_service import RsvpController
from core.services.session_service import SessionStore
from tests.fakes import (
    InMemoryEventRepository,
    InMemoryEventResponseRepository,
    InMemoryPlayerRepository,
    InMemorySessionStorage,
    InMemoryUtensilRepository,
    create_test_player,
)


@pytest.fixture
def alice():
    return create_test_player("alice")


@pytest.fixture
def admin_player():
    return create_test_player("coach", is_admin=True)


@pytest.fixture
def blocked_player():
    return create_test_player("bob", is_active=False)


@pytest.fixture
def player_repo(alice, admin_player, blocked_player):
    return InMemoryPlayerRepository([alice, admin_player, blocked_player])


@pytest.fixture
def event_repo():
    return InMemoryEventRepository()


@pytest.fixture
def response_repo():
    return InMemoryEventResponseRepository()


@pytest.fixture
def utensil_repo():
    return InMemoryUtensilRepository([
        Utensil(id=uuid4(), name="Ball", icon="⚽"),
        Utensil(id=uuid4(), name="Leibchen", icon=None),
    ])


@pytest.fixture
def storage():
    return InMemorySessionStorage()


@pytest.fixture
def session(player_repo, storage):
    return SessionStore(player_repo=player_repo, storage=storage)


@pytest.fixture
def synchronizer(event_repo, response_repo, utensil_repo):
    return EventSynchronizer(
        event_repo=event_repo,
        response_repo=response_repo,
        utensil_repo=utensil_repo,
    )


@pytest.fixture
def rsvp(response_repo):
    return RsvpController(response_repo=response_repo)


@pytest.fixture
def admin(player_repo, event_repo):
    return AdminController(player_repo=player_repo, event_repo=event_repo, lang="de")
