"""
Web app: aiohttp application for the event list and the admin page.

Every mutation answers with a redirect; the next GET reloads everything
from the data service before rendering.
"""

import logging
from typing import Optional
from uuid import UUID
from aiohttp import web
from config.features import features
from core.domain.errors import (
    AuthenticationError,
    EventFormError,
    RemoteReadError,
    RemoteWriteError,
)
from core.domain.models import ResponseType
from core.interfaces.repositories import (
    IEventRepository,
    IEventResponseRepository,
    IPlayerRepository,
    IUtensilRepository,
)
from core.services.admin_service import AdminController
from core.services.event_service import EventSynchronizer
from core.services.rsvp_service import RsvpController
from core.services.session_service import SessionStore
from adapters.web.middleware import create_session_middleware
from adapters.web import views
from locales import t

logger = logging.getLogger(__name__)


def _html(text: str, status: int = 200) -> web.Response:
    return web.Response(text=text, status=status, content_type="text/html")


def _redirect(location: str) -> web.Response:
    # 303 so the browser follows with a GET
    return web.Response(status=303, headers={"Location": location})


def _parse_uuid(value: str) -> Optional[UUID]:
    try:
        return UUID(value)
    except ValueError:
        return None


def create_web_app(
    player_repo: IPlayerRepository,
    event_repo: IEventRepository,
    response_repo: IEventResponseRepository,
    utensil_repo: IUtensilRepository,
    cookie_secure: bool = False,
) -> web.Application:
    """Create aiohttp app wired to the given repositories."""

    rsvp = RsvpController(response_repo=response_repo)

    def new_synchronizer() -> EventSynchronizer:
        return EventSynchronizer(
            event_repo=event_repo,
            response_repo=response_repo,
            utensil_repo=utensil_repo,
        )

    async def render_events(request: web.Request, error: Optional[str] = None, status: int = 200) -> web.Response:
        session: SessionStore = request["session"]
        lang = request["lang"]
        sync = new_synchronizer()
        try:
            await sync.load_all(session.user.id)
        except RemoteReadError as e:
            logger.error(f"[WEB] Error loading data: {e}")
            error = error or t("load_failed", lang)
            status = 502
        return _html(views.render_event_list(session.user, sync, lang, error=error), status=status)

    async def render_admin(request: web.Request, admin: AdminController, error: Optional[str] = None,
                           status: int = 200) -> web.Response:
        session: SessionStore = request["session"]
        try:
            await admin.load_players()
        except RemoteReadError as e:
            logger.error(f"[WEB] Error loading players: {e}")
            error = error or t("players_load_failed", admin.lang)
            status = 502
        return _html(views.render_admin(session.user, admin, admin.lang, error=error), status=status)

    def admin_guard(request: web.Request) -> Optional[web.Response]:
        """Response to send instead of the admin page, or None if allowed."""
        session: SessionStore = request["session"]
        if not session.is_authenticated:
            return _redirect("/")
        if not (session.is_admin and features.ADMIN_PANEL_ENABLED):
            return web.Response(text=t("forbidden", request["lang"]), status=403)
        return None

    # === SESSION ===

    async def handle_index(request: web.Request) -> web.Response:
        session: SessionStore = request["session"]
        if not session.is_authenticated:
            return _html(views.render_login(request["lang"]))
        return await render_events(request)

    async def handle_login(request: web.Request) -> web.Response:
        session: SessionStore = request["session"]
        data = await request.post()
        email = str(data.get("email", ""))
        password = str(data.get("password", ""))
        try:
            await session.sign_in(email, password)
        except AuthenticationError:
            lang = request["lang"]
            return _html(views.render_login(lang, error=t("login_failed", lang), email=email), status=401)
        return _redirect("/")

    async def handle_logout(request: web.Request) -> web.Response:
        session: SessionStore = request["session"]
        await session.sign_out()
        return _redirect("/")

    # === RSVP ===

    async def handle_response(request: web.Request) -> web.Response:
        session: SessionStore = request["session"]
        if not session.is_authenticated:
            return _redirect("/")

        event_id = _parse_uuid(request.match_info["event_id"])
        data = await request.post()
        try:
            kind = ResponseType.parse(str(data.get("kind", "")))
        except ValueError:
            kind = None
        if event_id is None or kind is None:
            return web.Response(text="Bad request", status=400)

        try:
            await rsvp.set_response(event_id, session.user.id, kind)
        except (RemoteReadError, RemoteWriteError) as e:
            logger.error(f"[WEB] Error updating response: {e}")
            return await render_events(request, error=t("response_failed", request["lang"]), status=502)
        return _redirect("/")

    # === ADMIN ===

    async def handle_admin(request: web.Request) -> web.Response:
        denied = admin_guard(request)
        if denied is not None:
            return denied
        admin = AdminController(player_repo=player_repo, event_repo=event_repo, lang=request["lang"])
        if request.query.get("create") == "1":
            admin.open_create_panel()
        if request.query.get("created") == "1":
            admin.message = t("event_created", admin.lang)
        return await render_admin(request, admin)

    async def handle_player_active(request: web.Request) -> web.Response:
        denied = admin_guard(request)
        if denied is not None:
            return denied
        player_id = _parse_uuid(request.match_info["player_id"])
        if player_id is None:
            return web.Response(text="Bad request", status=400)
        data = await request.post()
        active = str(data.get("active", "")).lower() == "true"

        admin = AdminController(player_repo=player_repo, event_repo=event_repo, lang=request["lang"])
        try:
            await admin.set_player_active(player_id, active)
        except RemoteWriteError as e:
            logger.error(f"[WEB] Error updating player: {e}")
            return await render_admin(request, admin, error=t("player_update_failed", admin.lang), status=502)
        except RemoteReadError as e:
            logger.error(f"[WEB] Error reloading players: {e}")
        return _redirect("/admin")

    async def handle_create_event(request: web.Request) -> web.Response:
        denied = admin_guard(request)
        if denied is not None:
            return denied
        session: SessionStore = request["session"]
        data = await request.post()

        admin = AdminController(player_repo=player_repo, event_repo=event_repo, lang=request["lang"])
        admin.open_create_panel()
        try:
            created = await admin.create_event(
                {key: str(value) for key, value in data.items()},
                created_by=session.user.id,
            )
        except EventFormError as e:
            error = t("event_form_incomplete", admin.lang, fields=", ".join(e.fields))
            return await render_admin(request, admin, error=error, status=400)

        if created:
            return _redirect("/admin?created=1")
        return await render_admin(request, admin, status=502)

    # === MISC ===

    async def handle_healthz(request: web.Request) -> web.Response:
        return web.Response(text="ok")

    app = web.Application(middlewares=[create_session_middleware(player_repo, cookie_secure)])
    app.router.add_get("/", handle_index)
    app.router.add_post("/login", handle_login)
    app.router.add_post("/logout", handle_logout)
    app.router.add_post("/events/{event_id}/response", handle_response)
    app.router.add_get("/admin", handle_admin)
    app.router.add_post("/admin/players/{player_id}/active", handle_player_active)
    app.router.add_post("/admin/events", handle_create_event)
    app.router.add_get("/healthz", handle_healthz)
    return app
