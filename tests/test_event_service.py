"""Tests for EventSynchronizer: snapshot building and failure isolation."""

import asyncio
from datetime import date
from uuid import uuid4

import pytest

from core.domain.errors import RemoteReadError
from core.domain.models import EventResponse, ResponseType
from tests.fakes import create_test_event


def _response(event_id, player_id, kind=ResponseType.ACCEPT):
    return EventResponse(id=uuid4(), event_id=event_id, player_id=player_id, response_type=kind)


async def test_load_all_orders_events_by_date(synchronizer, event_repo, alice):
    later = create_test_event("Later", event_date=date(2025, 7, 1))
    earlier = create_test_event("Earlier", event_date=date(2025, 5, 1))
    event_repo.events = [later, earlier]

    snapshot = await synchronizer.load_all(alice.id)

    assert [e.title for e in snapshot.events] == ["Earlier", "Later"]
    assert synchronizer.loaded


async def test_load_all_keeps_only_own_responses(synchronizer, event_repo, response_repo, alice, admin_player):
    event = create_test_event()
    other_event = create_test_event("Training")
    event_repo.events = [event, other_event]
    mine = _response(event.id, alice.id)
    theirs = _response(other_event.id, admin_player.id)
    response_repo.responses = {mine.id: mine, theirs.id: theirs}

    snapshot = await synchronizer.load_all(alice.id)

    assert list(snapshot.responses) == [event.id]
    assert synchronizer.my_response(event.id).id == mine.id
    assert synchronizer.my_response(other_event.id) is None


async def test_load_all_includes_utensils(synchronizer, alice):
    snapshot = await synchronizer.load_all(alice.id)
    assert [u.name for u in snapshot.utensils] == ["Ball", "Leibchen"]


async def test_response_count_is_per_viewer(synchronizer, event_repo, response_repo, alice, admin_player):
    event = create_test_event()
    event_repo.events = [event]
    for r in (_response(event.id, alice.id), _response(event.id, admin_player.id, ResponseType.DECLINE)):
        response_repo.responses[r.id] = r

    await synchronizer.load_all(alice.id)

    # Only the viewer's own response counts
    assert synchronizer.response_count_for(event.id) == 1
    assert synchronizer.response_count_for(uuid4()) == 0


async def test_response_count_without_response(synchronizer, event_repo, alice):
    event = create_test_event()
    event_repo.events = [event]

    await synchronizer.load_all(alice.id)

    assert synchronizer.response_count_for(event.id) == 0


@pytest.mark.parametrize("failing", ["event_repo", "response_repo", "utensil_repo"])
async def test_failed_read_keeps_previous_snapshot(request, synchronizer, event_repo, alice, failing):
    event_repo.events = [create_test_event()]
    before = await synchronizer.load_all(alice.id)

    event_repo.events.append(create_test_event("Another"))
    request.getfixturevalue(failing).fail_reads = True

    with pytest.raises(RemoteReadError):
        await synchronizer.load_all(alice.id)

    assert synchronizer.snapshot is before
    assert [e.title for e in synchronizer.events] == ["5-a-side"]


async def test_failed_first_load_leaves_empty_snapshot(synchronizer, utensil_repo, alice):
    utensil_repo.fail_reads = True

    with pytest.raises(RemoteReadError):
        await synchronizer.load_all(alice.id)

    assert not synchronizer.loaded
    assert synchronizer.events == []


async def test_stale_load_does_not_overwrite_newer_one(synchronizer, event_repo, alice):
    first_read_started = asyncio.Event()
    release_first_read = asyncio.Event()
    original = event_repo.list_by_date
    calls = 0

    async def slow_first_read():
        nonlocal calls
        calls += 1
        if calls == 1:
            first_read_started.set()
            await release_first_read.wait()
            return []
        return await original()

    event_repo.list_by_date = slow_first_read
    event_repo.events = [create_test_event()]

    stale = asyncio.create_task(synchronizer.load_all(alice.id))
    await first_read_started.wait()
    newer = await synchronizer.load_all(alice.id)
    release_first_read.set()
    result = await stale

    assert result is newer
    assert synchronizer.snapshot is newer
    assert len(synchronizer.events) == 1
