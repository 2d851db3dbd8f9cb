"""
Web loader - initializes repositories and services against Supabase.
"""

from config.settings import settings

# Infrastructure
from infrastructure.database import (
    SupabasePlayerRepository,
    SupabaseEventRepository,
    SupabaseEventResponseRepository,
    SupabaseUtensilRepository,
)

# Core services
from core.services import AdminController
from adapters.web.app import create_web_app


# === REPOSITORIES ===
player_repo = SupabasePlayerRepository()
event_repo = SupabaseEventRepository()
response_repo = SupabaseEventResponseRepository()
utensil_repo = SupabaseUtensilRepository()


def new_admin_controller(lang: str = "de") -> AdminController:
    return AdminController(player_repo=player_repo, event_repo=event_repo, lang=lang)


def create_app():
    return create_web_app(
        player_repo=player_repo,
        event_repo=event_repo,
        response_repo=response_repo,
        utensil_repo=utensil_repo,
        cookie_secure=settings.session_cookie_secure,
    )
