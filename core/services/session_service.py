"""
Session service - who is logged in.

There is no credential store: sign_in looks the player up by email and
accepts any password. The persisted player id is the only thing that
restores a session after a reload.
"""

import logging
from typing import Optional
from uuid import UUID
from core.domain.constants import SESSION_KEY
from core.domain.errors import AuthenticationError, RemoteReadError
from core.domain.models import Player, SessionState
from core.interfaces.repositories import IPlayerRepository
from core.interfaces.session import ISessionStorage

logger = logging.getLogger(__name__)


class SessionStore:
    """Holds the current player and mirrors its id into session storage"""

    def __init__(self, player_repo: IPlayerRepository, storage: ISessionStorage):
        self.player_repo = player_repo
        self.storage = storage
        self.user: Optional[Player] = None
        self.state = SessionState.LOADING

    @property
    def is_authenticated(self) -> bool:
        return self.state == SessionState.AUTHENTICATED and self.user is not None

    @property
    def is_admin(self) -> bool:
        return self.is_authenticated and self.user.is_admin

    def _set_user(self, user: Optional[Player]):
        self.user = user
        self.state = SessionState.AUTHENTICATED if user else SessionState.UNAUTHENTICATED

    async def sign_in(self, email: str, password: str) -> Player:
        """
        Log in as the active player with this email.
        The password is NOT checked against anything.
        """
        try:
            player = await self.player_repo.get_active_by_email(email.strip())
        except RemoteReadError as e:
            logger.error(f"[SESSION] Sign in error: {e}")
            self._set_user(None)
            raise AuthenticationError() from e

        if not player:
            logger.info(f"[SESSION] No active player for '{email}'")
            self._set_user(None)
            raise AuthenticationError()

        self._set_user(player)
        self.storage.set_item(SESSION_KEY, str(player.id))
        logger.info(f"[SESSION] Signed in {player.nickname} ({player.id})")
        return player

    async def sign_out(self):
        self.storage.remove_item(SESSION_KEY)
        self._set_user(None)

    async def check_auth(self) -> Optional[Player]:
        """Restore the session from the persisted id. Never raises."""
        raw_id = self.storage.get_item(SESSION_KEY)
        if not raw_id:
            self._set_user(None)
            return None

        try:
            player_id = UUID(raw_id)
        except ValueError:
            logger.warning(f"[SESSION] Dropping malformed session id '{raw_id}'")
            self.storage.remove_item(SESSION_KEY)
            self._set_user(None)
            return None

        try:
            player = await self.player_repo.get_active_by_id(player_id)
        except RemoteReadError as e:
            logger.error(f"[SESSION] Check auth error: {e}")
            self._set_user(None)
            return None

        if not player:
            # Deleted or blocked since the last visit
            self.storage.remove_item(SESSION_KEY)
            self._set_user(None)
            return None

        self._set_user(player)
        return player
