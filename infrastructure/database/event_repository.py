"""
Supabase implementation of Event repository.
"""

import logging
from typing import List
from core.domain.constants import EVENTS_TABLE
from core.domain.errors import RemoteReadError, RemoteWriteError
from core.domain.models import Event, EventCreate
from core.interfaces.repositories import IEventRepository
from infrastructure.database.supabase_client import supabase, run_sync

logger = logging.getLogger(__name__)


class SupabaseEventRepository(IEventRepository):
    """Supabase implementation of event repository"""

    def _to_model(self, data: dict) -> Event:
        """Convert database row to Event model"""
        return Event(
            id=data["id"],
            title=data["title"],
            location=data["location"],
            event_date=data["event_date"],
            time_from=data["time_from"],
            time_to=data["time_to"],
            created_by=data.get("created_by"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    @run_sync
    def _list_by_date_sync(self) -> List[dict]:
        response = supabase.table(EVENTS_TABLE).select("*")\
            .order("event_date", desc=False)\
            .execute()
        return response.data or []

    async def list_by_date(self) -> List[Event]:
        try:
            data = await self._list_by_date_sync()
        except Exception as e:
            logger.error(f"[EVENT_REPO] Listing events failed: {e}")
            raise RemoteReadError(EVENTS_TABLE) from e
        return [self._to_model(d) for d in data]

    @run_sync
    def _create_sync(self, event_data: EventCreate) -> dict:
        data = {
            "title": event_data.title,
            "location": event_data.location,
            "event_date": event_data.event_date.isoformat(),
            "time_from": event_data.time_from.isoformat(timespec="minutes"),
            "time_to": event_data.time_to.isoformat(timespec="minutes"),
            "created_by": str(event_data.created_by) if event_data.created_by else None,
        }
        response = supabase.table(EVENTS_TABLE).insert(data).execute()
        return response.data[0]

    async def create(self, event_data: EventCreate) -> Event:
        try:
            data = await self._create_sync(event_data)
        except Exception as e:
            logger.error(f"[EVENT_REPO] Creating event '{event_data.title}' failed: {e}")
            raise RemoteWriteError(EVENTS_TABLE) from e
        return self._to_model(data)
