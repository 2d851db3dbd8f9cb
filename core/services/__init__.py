from core.services.session_service import SessionStore
from core.services.event_service import EventSynchronizer
from core.services.rsvp_service import RsvpController
from core.services.admin_service import AdminController

__all__ = [
    "SessionStore",
    "EventSynchronizer",
    "RsvpController",
    "AdminController",
]
