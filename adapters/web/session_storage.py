"""
Cookie-backed session storage.

The browser cookie plays the part of durable local storage: the player id
is read from the request and any change is written onto the response.
"""

from typing import Dict, Mapping, Optional
from aiohttp import web
from core.interfaces.session import ISessionStorage

# One year; the id never expires on its own
SESSION_COOKIE_MAX_AGE = 60 * 60 * 24 * 365


class CookieSessionStorage(ISessionStorage):
    """Reads request cookies, queues writes until the response exists"""

    def __init__(self, cookies: Mapping[str, str], secure: bool = False):
        self._values: Dict[str, str] = dict(cookies)
        self._pending: Dict[str, Optional[str]] = {}  # None = delete
        self.secure = secure

    def get_item(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._values[key] = value
        self._pending[key] = value

    def remove_item(self, key: str) -> None:
        self._values.pop(key, None)
        self._pending[key] = None

    def apply(self, response: web.StreamResponse) -> None:
        """Copy queued changes onto the response as Set-Cookie headers"""
        for key, value in self._pending.items():
            if value is None:
                response.del_cookie(key, path="/")
            else:
                response.set_cookie(
                    key, value,
                    path="/",
                    max_age=SESSION_COOKIE_MAX_AGE,
                    httponly=True,
                    samesite="Lax",
                    secure=self.secure,
                )
        self._pending.clear()
