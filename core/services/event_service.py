"""
Event service - builds the event list view for one player.
"""

import asyncio
import itertools
import logging
from typing import Dict, Optional, List
from uuid import UUID
from core.domain.models import Event, EventResponse, EventSnapshot, Utensil
from core.interfaces.repositories import (
    IEventRepository,
    IEventResponseRepository,
    IUtensilRepository,
)

logger = logging.getLogger(__name__)


class EventSynchronizer:
    """
    Loads events, the viewer's responses and utensils into one snapshot.

    The snapshot is only ever replaced as a whole. A failed load keeps the
    previous snapshot, and a load that finishes after a newer one is dropped.
    """

    def __init__(
        self,
        event_repo: IEventRepository,
        response_repo: IEventResponseRepository,
        utensil_repo: IUtensilRepository,
    ):
        self.event_repo = event_repo
        self.response_repo = response_repo
        self.utensil_repo = utensil_repo
        self.snapshot = EventSnapshot()
        self._versions = itertools.count(1)

    @property
    def loaded(self) -> bool:
        return self.snapshot.version > 0

    @property
    def events(self) -> List[Event]:
        return self.snapshot.events

    @property
    def utensils(self) -> List[Utensil]:
        return self.snapshot.utensils

    async def load_all(self, for_player_id: Optional[UUID]) -> EventSnapshot:
        """
        Reload everything. Raises RemoteReadError if any of the three reads
        fails; the current snapshot is left as it was.
        """
        version = next(self._versions)
        events, responses, utensils = await asyncio.gather(
            self.event_repo.list_by_date(),
            self.response_repo.list_expanded(),
            self.utensil_repo.list_all(),
        )

        mine: Dict[UUID, EventResponse] = {}
        for response in responses:
            if response.player_id == for_player_id:
                mine[response.event_id] = response

        if version < self.snapshot.version:
            logger.debug(f"[SYNC] Dropping stale load v{version} (have v{self.snapshot.version})")
            return self.snapshot

        self.snapshot = EventSnapshot(
            events=events,
            responses=mine,
            utensils=utensils,
            version=version,
        )
        logger.debug(
            f"[SYNC] v{version}: {len(events)} events, {len(mine)} own responses, "
            f"{len(utensils)} utensils"
        )
        return self.snapshot

    def my_response(self, event_id: UUID) -> Optional[EventResponse]:
        return self.snapshot.responses.get(event_id)

    def response_count_for(self, event_id: UUID) -> int:
        """1 if the viewer responded to this event, else 0. Not an attendee count."""
        return 1 if event_id in self.snapshot.responses else 0
