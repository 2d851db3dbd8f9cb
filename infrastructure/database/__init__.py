from infrastructure.database.player_repository import SupabasePlayerRepository
from infrastructure.database.event_repository import SupabaseEventRepository
from infrastructure.database.event_response_repository import SupabaseEventResponseRepository
from infrastructure.database.utensil_repository import SupabaseUtensilRepository

__all__ = [
    "SupabasePlayerRepository",
    "SupabaseEventRepository",
    "SupabaseEventResponseRepository",
    "SupabaseUtensilRepository",
]
