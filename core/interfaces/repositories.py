"""
Repository interfaces - abstractions for data access.
This allows swapping implementations (Supabase -> PostgreSQL -> in-memory fakes, etc.)
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from uuid import UUID
from core.domain.models import (
    Player,
    Event, EventCreate,
    EventResponse, EventResponseCreate, ResponseType,
    Utensil,
)


class IPlayerRepository(ABC):
    """Interface for player data access"""

    @abstractmethod
    async def get_active_by_email(self, email: str) -> Optional[Player]:
        """Get the single active player with this email"""
        pass

    @abstractmethod
    async def get_active_by_id(self, player_id: UUID) -> Optional[Player]:
        """Get player by ID, only if still active"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Player]:
        """All players ordered by nickname"""
        pass

    @abstractmethod
    async def set_active(self, player_id: UUID, is_active: bool) -> Optional[Player]:
        """Write the active flag"""
        pass


class IEventRepository(ABC):
    """Interface for event data access"""

    @abstractmethod
    async def list_by_date(self) -> List[Event]:
        """All events, event_date ascending"""
        pass

    @abstractmethod
    async def create(self, event_data: EventCreate) -> Event:
        """Create a new event"""
        pass


class IEventResponseRepository(ABC):
    """Interface for RSVP data access"""

    @abstractmethod
    async def list_expanded(self) -> List[EventResponse]:
        """All responses with player and utensil join rows attached"""
        pass

    @abstractmethod
    async def get_for_player(self, event_id: UUID, player_id: UUID) -> Optional[EventResponse]:
        """Get the response of one player to one event"""
        pass

    @abstractmethod
    async def create(self, response_data: EventResponseCreate) -> EventResponse:
        """Create a new response"""
        pass

    @abstractmethod
    async def update_type(self, response_id: UUID, response_type: ResponseType) -> Optional[EventResponse]:
        """Change accept/decline of an existing response"""
        pass


class IUtensilRepository(ABC):
    """Interface for utensil reference data"""

    @abstractmethod
    async def list_all(self) -> List[Utensil]:
        """All utensils"""
        pass
