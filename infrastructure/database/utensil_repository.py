"""
Supabase implementation of Utensil repository (read-only reference data).
"""

import logging
from typing import List
from core.domain.constants import UTENSILS_TABLE
from core.domain.errors import RemoteReadError
from core.domain.models import Utensil
from core.interfaces.repositories import IUtensilRepository
from infrastructure.database.supabase_client import supabase, run_sync

logger = logging.getLogger(__name__)


class SupabaseUtensilRepository(IUtensilRepository):

    def _to_model(self, data: dict) -> Utensil:
        return Utensil(
            id=data["id"],
            name=data["name"],
            icon=data.get("icon"),
            created_at=data.get("created_at"),
        )

    @run_sync
    def _list_all_sync(self) -> List[dict]:
        response = supabase.table(UTENSILS_TABLE).select("*").execute()
        return response.data or []

    async def list_all(self) -> List[Utensil]:
        try:
            data = await self._list_all_sync()
        except Exception as e:
            logger.error(f"[UTENSIL_REPO] Listing utensils failed: {e}")
            raise RemoteReadError(UTENSILS_TABLE) from e
        return [self._to_model(d) for d in data]
