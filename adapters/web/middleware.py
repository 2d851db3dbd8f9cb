"""
Middleware for the web app.

- session middleware: restores the session from the cookie on every request
  and writes cookie changes back onto the response
"""

import logging
from aiohttp import web
from core.interfaces.repositories import IPlayerRepository
from core.services.session_service import SessionStore
from core.utils.language import detect_lang
from adapters.web.session_storage import CookieSessionStorage

logger = logging.getLogger(__name__)


def create_session_middleware(player_repo: IPlayerRepository, cookie_secure: bool = False):
    """Build the middleware around the player repository."""

    @web.middleware
    async def session_middleware(request: web.Request, handler):
        storage = CookieSessionStorage(request.cookies, secure=cookie_secure)
        session = SessionStore(player_repo=player_repo, storage=storage)
        await session.check_auth()

        request["session"] = session
        request["lang"] = detect_lang(request.headers.get("Accept-Language"))

        response = await handler(request)
        storage.apply(response)
        return response

    return session_middleware
