"""
Supabase implementation of Player repository.
"""

import logging
from typing import Optional, List
from uuid import UUID
from core.domain.constants import PLAYERS_TABLE
from core.domain.errors import RemoteReadError, RemoteWriteError
from core.domain.models import Player
from core.interfaces.repositories import IPlayerRepository
from infrastructure.database.supabase_client import supabase, run_sync

logger = logging.getLogger(__name__)


class SupabasePlayerRepository(IPlayerRepository):
    """Supabase implementation of player repository"""

    def _to_model(self, data: dict) -> Player:
        """Convert database row to Player model"""
        return Player(
            id=data["id"],
            email=data["email"],
            nickname=data.get("nickname") or data["email"],
            is_active=data.get("is_active", True),
            is_admin=data.get("is_admin", False),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    @run_sync
    def _get_active_by_email_sync(self, email: str) -> Optional[dict]:
        response = supabase.table(PLAYERS_TABLE).select("*")\
            .eq("email", email)\
            .eq("is_active", True)\
            .limit(1)\
            .execute()
        return response.data[0] if response.data else None

    async def get_active_by_email(self, email: str) -> Optional[Player]:
        try:
            data = await self._get_active_by_email_sync(email)
        except Exception as e:
            logger.error(f"[PLAYER_REPO] Lookup by email failed: {e}")
            raise RemoteReadError(PLAYERS_TABLE) from e
        return self._to_model(data) if data else None

    @run_sync
    def _get_active_by_id_sync(self, player_id: UUID) -> Optional[dict]:
        response = supabase.table(PLAYERS_TABLE).select("*")\
            .eq("id", str(player_id))\
            .eq("is_active", True)\
            .limit(1)\
            .execute()
        return response.data[0] if response.data else None

    async def get_active_by_id(self, player_id: UUID) -> Optional[Player]:
        try:
            data = await self._get_active_by_id_sync(player_id)
        except Exception as e:
            logger.error(f"[PLAYER_REPO] Lookup of {player_id} failed: {e}")
            raise RemoteReadError(PLAYERS_TABLE) from e
        return self._to_model(data) if data else None

    @run_sync
    def _list_all_sync(self) -> List[dict]:
        response = supabase.table(PLAYERS_TABLE).select("*")\
            .order("nickname")\
            .execute()
        return response.data or []

    async def list_all(self) -> List[Player]:
        try:
            data = await self._list_all_sync()
        except Exception as e:
            logger.error(f"[PLAYER_REPO] Listing players failed: {e}")
            raise RemoteReadError(PLAYERS_TABLE) from e
        return [self._to_model(d) for d in data]

    @run_sync
    def _set_active_sync(self, player_id: UUID, is_active: bool) -> Optional[dict]:
        response = supabase.table(PLAYERS_TABLE)\
            .update({"is_active": is_active})\
            .eq("id", str(player_id))\
            .execute()
        return response.data[0] if response.data else None

    async def set_active(self, player_id: UUID, is_active: bool) -> Optional[Player]:
        try:
            data = await self._set_active_sync(player_id, is_active)
        except Exception as e:
            logger.error(f"[PLAYER_REPO] Update of {player_id} failed: {e}")
            raise RemoteWriteError(PLAYERS_TABLE) from e
        return self._to_model(data) if data else None
