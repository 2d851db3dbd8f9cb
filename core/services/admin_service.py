"""
Admin service - player blocking and event creation.
"""

import logging
from typing import Optional, List, Mapping, Union
from uuid import UUID
from pydantic import ValidationError
from core.domain.errors import EventFormError, RemoteWriteError
from core.domain.models import Event, EventForm, Player
from core.interfaces.repositories import IEventRepository, IPlayerRepository
from locales import t

logger = logging.getLogger(__name__)


class AdminController:
    """State behind the admin page: player list and the create-event panel"""

    def __init__(
        self,
        player_repo: IPlayerRepository,
        event_repo: IEventRepository,
        lang: str = "de",
    ):
        self.player_repo = player_repo
        self.event_repo = event_repo
        self.lang = lang
        self.players: List[Player] = []
        self.event_form = EventForm()
        self.create_panel_open = False
        self.message: Optional[str] = None
        self.error: Optional[str] = None

    # === PLAYERS ===

    async def load_players(self) -> List[Player]:
        self.players = await self.player_repo.list_all()
        return self.players

    async def set_player_active(self, player_id: UUID, active: bool) -> List[Player]:
        """Write the flag, then reload the list. Write errors propagate."""
        logger.info(f"[ADMIN] Player {player_id} active={active}")
        await self.player_repo.set_active(player_id, active)
        return await self.load_players()

    async def toggle_player_active(self, player_id: UUID, current_status: bool) -> List[Player]:
        return await self.set_player_active(player_id, not current_status)

    # === CREATE EVENT ===

    def open_create_panel(self):
        self.create_panel_open = True

    def close_create_panel(self):
        self.create_panel_open = False

    def toggle_create_panel(self):
        self.create_panel_open = not self.create_panel_open

    async def create_event(
        self,
        fields: Union[EventForm, Mapping[str, str]],
        created_by: Optional[UUID] = None,
    ) -> bool:
        """
        Create an event from the five form fields.

        Only presence is validated. Raises EventFormError if a field is
        missing. On a remote failure the form stays filled in, `error` is
        set and False is returned.
        """
        if isinstance(fields, EventForm):
            form = fields
        else:
            form = EventForm(**{k: (v or "") for k, v in fields.items() if k in EventForm.model_fields})
        self.event_form = form
        self.message = None
        self.error = None

        missing = form.missing_fields()
        if missing:
            raise EventFormError(missing)

        try:
            event_data = form.to_create(created_by=created_by)
        except ValidationError as e:
            invalid = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
            raise EventFormError(invalid) from e

        try:
            event: Event = await self.event_repo.create(event_data)
        except RemoteWriteError as e:
            logger.error(f"[ADMIN] Error creating event: {e}")
            self.error = t("event_create_failed", self.lang)
            return False

        logger.info(f"[ADMIN] Created event {event.id} '{event.title}' on {event.event_date}")
        self.event_form = EventForm()
        self.close_create_panel()
        self.message = t("event_created", self.lang)
        return True
