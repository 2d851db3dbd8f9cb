"""Tests for AdminController: player blocking and event creation."""

from datetime import date, time

import pytest

from core.domain.errors import EventFormError, RemoteWriteError
from core.domain.models import EventForm

VALID_FORM = {
    "title": "5-a-side",
    "location": "Park",
    "event_date": "2025-06-01",
    "time_from": "18:00",
    "time_to": "19:00",
}


async def test_load_players_orders_by_nickname(admin):
    players = await admin.load_players()
    assert [p.nickname for p in players] == ["alice", "bob", "coach"]
    assert admin.players == players


async def test_set_player_active_writes_and_reloads(admin, player_repo, alice):
    players = await admin.set_player_active(alice.id, False)

    assert player_repo.players[alice.id].is_active is False
    assert next(p for p in players if p.id == alice.id).is_active is False
    assert admin.players == players


async def test_toggle_player_active(admin, player_repo, blocked_player):
    await admin.toggle_player_active(blocked_player.id, current_status=False)
    assert player_repo.players[blocked_player.id].is_active is True


async def test_set_player_active_failure_propagates(admin, player_repo, alice):
    player_repo.fail_writes = True

    with pytest.raises(RemoteWriteError):
        await admin.set_player_active(alice.id, False)


def test_create_panel_toggle(admin):
    assert not admin.create_panel_open
    admin.toggle_create_panel()
    assert admin.create_panel_open
    admin.close_create_panel()
    assert not admin.create_panel_open


async def test_create_event_success_clears_form_and_closes_panel(admin, event_repo, admin_player):
    admin.open_create_panel()

    assert await admin.create_event(VALID_FORM, created_by=admin_player.id) is True

    assert len(event_repo.events) == 1
    event = event_repo.events[0]
    assert event.title == "5-a-side"
    assert event.event_date == date(2025, 6, 1)
    assert event.time_from == time(18, 0)
    assert event.created_by == admin_player.id
    assert admin.event_form == EventForm()
    assert not admin.create_panel_open
    assert admin.message == "Event erfolgreich erstellt!"
    assert admin.error is None


async def test_create_event_does_not_check_time_order(admin, event_repo):
    form = dict(VALID_FORM, time_from="20:00", time_to="19:00")
    assert await admin.create_event(form) is True
    assert len(event_repo.events) == 1


@pytest.mark.parametrize("field", list(VALID_FORM))
async def test_create_event_requires_every_field(admin, event_repo, field):
    form = dict(VALID_FORM, **{field: "  "})

    with pytest.raises(EventFormError) as exc_info:
        await admin.create_event(form)

    assert exc_info.value.fields == [field]
    assert event_repo.events == []


async def test_create_event_rejects_malformed_date(admin, event_repo):
    with pytest.raises(EventFormError) as exc_info:
        await admin.create_event(dict(VALID_FORM, event_date="next friday"))

    assert exc_info.value.fields == ["event_date"]
    assert event_repo.events == []


async def test_create_event_failure_keeps_form(admin, event_repo):
    event_repo.fail_writes = True
    admin.open_create_panel()

    assert await admin.create_event(VALID_FORM) is False

    assert admin.event_form == EventForm(**VALID_FORM)
    assert admin.create_panel_open
    assert admin.error == "Fehler beim Erstellen des Events"
    assert admin.message is None


async def test_created_event_shows_up_in_order(admin, event_repo, synchronizer, alice):
    await admin.create_event(dict(VALID_FORM, title="Later", event_date="2025-08-01"))
    await admin.create_event(VALID_FORM)

    await synchronizer.load_all(alice.id)

    assert [e.title for e in synchronizer.events] == ["5-a-side", "Later"]
