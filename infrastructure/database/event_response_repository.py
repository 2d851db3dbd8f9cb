"""
Supabase implementation of the RSVP repository.
"""

import logging
from typing import Optional, List
from uuid import UUID
from core.domain.constants import EVENT_RESPONSES_TABLE, EXPANDED_RESPONSE_SELECT
from core.domain.errors import RemoteReadError, RemoteWriteError
from core.domain.models import (
    EventResponse, EventResponseCreate, ResponseType, ResponseUtensil,
)
from core.interfaces.repositories import IEventResponseRepository
from infrastructure.database.supabase_client import supabase, run_sync
from infrastructure.database.player_repository import SupabasePlayerRepository
from infrastructure.database.utensil_repository import SupabaseUtensilRepository

logger = logging.getLogger(__name__)


class SupabaseEventResponseRepository(IEventResponseRepository):
    """Supabase implementation of event response repository"""

    def __init__(self):
        self._player_repo = SupabasePlayerRepository()
        self._utensil_repo = SupabaseUtensilRepository()

    def _to_model(self, data: dict) -> EventResponse:
        """Convert database row (optionally expanded) to EventResponse model"""
        player = data.get("player")
        utensil_rows = data.get("response_utensils") or []
        return EventResponse(
            id=data["id"],
            event_id=data["event_id"],
            player_id=data["player_id"],
            response_type=ResponseType(data["response_type"]),
            comment=data.get("comment"),
            guest_count=data.get("guest_count") or 0,
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
            player=self._player_repo._to_model(player) if player else None,
            response_utensils=[
                ResponseUtensil(
                    id=row["id"],
                    response_id=row["response_id"],
                    utensil_id=row["utensil_id"],
                    utensil=self._utensil_repo._to_model(row["utensil"]) if row.get("utensil") else None,
                    created_at=row.get("created_at"),
                )
                for row in utensil_rows
            ],
        )

    @run_sync
    def _list_expanded_sync(self) -> List[dict]:
        response = supabase.table(EVENT_RESPONSES_TABLE)\
            .select(EXPANDED_RESPONSE_SELECT)\
            .execute()
        return response.data or []

    async def list_expanded(self) -> List[EventResponse]:
        try:
            data = await self._list_expanded_sync()
        except Exception as e:
            logger.error(f"[RESPONSE_REPO] Listing responses failed: {e}")
            raise RemoteReadError(EVENT_RESPONSES_TABLE) from e
        return [self._to_model(d) for d in data]

    @run_sync
    def _get_for_player_sync(self, event_id: UUID, player_id: UUID) -> Optional[dict]:
        response = supabase.table(EVENT_RESPONSES_TABLE).select("*")\
            .eq("event_id", str(event_id))\
            .eq("player_id", str(player_id))\
            .limit(1)\
            .execute()
        return response.data[0] if response.data else None

    async def get_for_player(self, event_id: UUID, player_id: UUID) -> Optional[EventResponse]:
        try:
            data = await self._get_for_player_sync(event_id, player_id)
        except Exception as e:
            logger.error(f"[RESPONSE_REPO] Lookup event={event_id} player={player_id} failed: {e}")
            raise RemoteReadError(EVENT_RESPONSES_TABLE) from e
        return self._to_model(data) if data else None

    @run_sync
    def _create_sync(self, response_data: EventResponseCreate) -> dict:
        data = {
            "event_id": str(response_data.event_id),
            "player_id": str(response_data.player_id),
            "response_type": response_data.response_type.value,
            "comment": response_data.comment,
            "guest_count": response_data.guest_count,
        }
        response = supabase.table(EVENT_RESPONSES_TABLE).insert(data).execute()
        return response.data[0]

    async def create(self, response_data: EventResponseCreate) -> EventResponse:
        try:
            data = await self._create_sync(response_data)
        except Exception as e:
            logger.error(f"[RESPONSE_REPO] Creating response failed: {e}")
            raise RemoteWriteError(EVENT_RESPONSES_TABLE) from e
        return self._to_model(data)

    @run_sync
    def _update_type_sync(self, response_id: UUID, response_type: ResponseType) -> Optional[dict]:
        response = supabase.table(EVENT_RESPONSES_TABLE)\
            .update({"response_type": response_type.value})\
            .eq("id", str(response_id))\
            .execute()
        return response.data[0] if response.data else None

    async def update_type(self, response_id: UUID, response_type: ResponseType) -> Optional[EventResponse]:
        try:
            data = await self._update_type_sync(response_id, response_type)
        except Exception as e:
            logger.error(f"[RESPONSE_REPO] Updating response {response_id} failed: {e}")
            raise RemoteWriteError(EVENT_RESPONSES_TABLE) from e
        return self._to_model(data) if data else None
