"""
RSVP service - accept/decline for one player and one event.
"""

import logging
from typing import Union
from uuid import UUID
from core.domain.constants import DEFAULT_GUEST_COUNT
from core.domain.models import EventResponseCreate, EventSnapshot, ResponseType
from core.interfaces.repositories import IEventResponseRepository
from core.services.event_service import EventSynchronizer

logger = logging.getLogger(__name__)


class RsvpController:
    """Upserts a player's response. The caller reloads afterwards."""

    def __init__(self, response_repo: IEventResponseRepository):
        self.response_repo = response_repo

    async def set_response(
        self,
        event_id: UUID,
        player_id: UUID,
        kind: Union[ResponseType, str],
    ) -> bool:
        """
        Update the existing response for (event, player) or create one.
        Sending the same kind twice still writes. Raises RemoteWriteError.
        """
        if not isinstance(kind, ResponseType):
            kind = ResponseType.parse(kind)

        existing = await self.response_repo.get_for_player(event_id, player_id)
        if existing:
            logger.info(f"[RSVP] Update {existing.id}: {existing.response_type.value} -> {kind.value}")
            await self.response_repo.update_type(existing.id, kind)
        else:
            logger.info(f"[RSVP] New response event={event_id} player={player_id}: {kind.value}")
            await self.response_repo.create(EventResponseCreate(
                event_id=event_id,
                player_id=player_id,
                response_type=kind,
                comment=None,
                guest_count=DEFAULT_GUEST_COUNT,
            ))
        return True

    async def set_response_and_reload(
        self,
        synchronizer: EventSynchronizer,
        event_id: UUID,
        player_id: UUID,
        kind: Union[ResponseType, str],
    ) -> EventSnapshot:
        """set_response followed by a full reload of the player's view"""
        await self.set_response(event_id, player_id, kind)
        return await synchronizer.load_all(player_id)
