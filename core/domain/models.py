"""
Domain models - the core of business logic.
These models are transport-agnostic (work with the web app, scripts, tests, etc.)
"""

from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from datetime import date, datetime, time
from uuid import UUID
from enum import Enum


# === ENUMS ===

class ResponseType(str, Enum):
    """RSVP kind. Values are the ones stored in event_responses.response_type"""
    ACCEPT = "zusage"
    DECLINE = "absage"

    @classmethod
    def parse(cls, value: str) -> "ResponseType":
        """Accept both the english names and the stored values"""
        normalized = (value or "").strip().lower()
        aliases = {
            "accept": cls.ACCEPT,
            "decline": cls.DECLINE,
            cls.ACCEPT.value: cls.ACCEPT,
            cls.DECLINE.value: cls.DECLINE,
        }
        if normalized not in aliases:
            raise ValueError(f"Unknown response kind: {value!r}")
        return aliases[normalized]


class SessionState(str, Enum):
    LOADING = "loading"
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


# === PLAYER ===

class Player(BaseModel):
    """Member account. Created outside the app, only is_active changes here"""
    id: UUID
    email: str
    nickname: str
    is_active: bool = True
    is_admin: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# === EVENT ===

class EventCreate(BaseModel):
    """Data for creating an event"""
    title: str
    location: str
    event_date: date
    time_from: time
    time_to: time  # not checked against time_from
    created_by: Optional[UUID] = None


class Event(BaseModel):
    """Full event model"""
    id: UUID
    title: str
    location: str
    event_date: date
    time_from: time
    time_to: time
    created_by: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# === UTENSIL ===

class Utensil(BaseModel):
    """Reference item a player can bring along"""
    id: UUID
    name: str
    icon: Optional[str] = None
    created_at: Optional[datetime] = None


class ResponseUtensil(BaseModel):
    id: UUID
    response_id: UUID
    utensil_id: UUID
    utensil: Optional[Utensil] = None
    created_at: Optional[datetime] = None


# === RESPONSE ===

class EventResponseCreate(BaseModel):
    """Data for a first RSVP"""
    event_id: UUID
    player_id: UUID
    response_type: ResponseType
    comment: Optional[str] = None
    guest_count: int = 0


class EventResponse(BaseModel):
    """Full response model, optionally expanded with player and utensil rows"""
    id: UUID
    event_id: UUID
    player_id: UUID
    response_type: ResponseType
    comment: Optional[str] = None
    guest_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    player: Optional[Player] = None
    response_utensils: List[ResponseUtensil] = Field(default_factory=list)

    class Config:
        from_attributes = True


# === VIEW STATE ===

class EventSnapshot(BaseModel):
    """Everything the event list renders, replaced as a whole on every load"""
    events: List[Event] = Field(default_factory=list)
    responses: Dict[UUID, EventResponse] = Field(default_factory=dict)  # by event_id
    utensils: List[Utensil] = Field(default_factory=list)
    version: int = 0


class EventForm(BaseModel):
    """Raw create-event form input, kept as strings so it can be re-rendered"""
    title: str = ""
    location: str = ""
    event_date: str = ""
    time_from: str = ""
    time_to: str = ""

    def missing_fields(self) -> List[str]:
        return [name for name, value in self.model_dump().items() if not value.strip()]

    def to_create(self, created_by: Optional[UUID] = None) -> EventCreate:
        return EventCreate(
            title=self.title.strip(),
            location=self.location.strip(),
            event_date=self.event_date.strip(),
            time_from=self.time_from.strip(),
            time_to=self.time_to.strip(),
            created_by=created_by,
        )
