"""
HTML rendering for the web app. Plain f-strings, everything user-supplied
goes through html.escape.
"""

from html import escape
from typing import Optional
from core.domain.constants import DATE_DISPLAY_FORMAT, EVENT_FORM_FIELDS, TIME_DISPLAY_FORMAT
from core.domain.models import Event, Player, ResponseType
from core.services.admin_service import AdminController
from core.services.event_service import EventSynchronizer
from config.features import features
from locales import t

_STYLE = """
  body { font-family: -apple-system, BlinkMacSystemFont, sans-serif; max-width: 760px; margin: 0 auto; padding: 16px; background: #f9fafb; color: #111827; }
  header { display: flex; justify-content: space-between; align-items: center; }
  h1 { font-size: 1.4em; margin-bottom: 0; }
  nav a { margin-right: 16px; color: #4b5563; text-decoration: none; }
  nav a.active { color: #2563eb; border-bottom: 2px solid #2563eb; }
  .card { background: #fff; border-radius: 8px; box-shadow: 0 1px 3px rgba(0,0,0,.1); padding: 16px; margin: 12px 0; }
  .row { display: flex; justify-content: space-between; align-items: flex-start; }
  .count { font-size: 1.6em; font-weight: bold; color: #2563eb; text-align: right; }
  .muted { color: #6b7280; font-size: 0.9em; }
  .buttons { display: flex; gap: 12px; margin-top: 12px; }
  .buttons form { flex: 1; }
  .buttons button { width: 100%; padding: 8px; border: 0; border-radius: 6px; background: #f3f4f6; cursor: pointer; }
  button.accept { background: #22c55e; color: #fff; }
  button.decline { background: #ef4444; color: #fff; }
  .chip { display: inline-block; padding: 2px 10px; background: #f3f4f6; border-radius: 999px; margin-right: 6px; }
  .error { background: #fee2e2; color: #991b1b; padding: 8px 12px; border-radius: 6px; }
  .message { background: #dcfce7; color: #166534; padding: 8px 12px; border-radius: 6px; }
  label { display: block; margin-top: 8px; font-size: 0.9em; }
  input { width: 100%; padding: 6px; box-sizing: border-box; }
"""


def _page(title: str, body: str, lang: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="{escape(lang)}"><head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{escape(title)}</title>
<style>{_STYLE}</style>
</head><body>
{body}
</body></html>"""


def _banner(text: Optional[str], css_class: str) -> str:
    return f'<p class="{css_class}">{escape(text)}</p>' if text else ""


def _header(user: Player, lang: str, active_tab: str) -> str:
    tabs = f'<a href="/" class="{"active" if active_tab == "events" else ""}">{t("tab_events", lang)}</a>'
    if user.is_admin and features.ADMIN_PANEL_ENABLED:
        tabs += f'<a href="/admin" class="{"active" if active_tab == "admin" else ""}">{t("tab_admin", lang)}</a>'
    return f"""<header>
  <div>
    <h1>{t("app_title", lang)}</h1>
    <p class="muted">{escape(t("welcome", lang, name=user.nickname))}</p>
  </div>
  <form method="post" action="/logout"><button type="submit">{t("sign_out", lang)}</button></form>
</header>
<nav>{tabs}</nav>"""


def render_login(lang: str, error: Optional[str] = None, email: str = "") -> str:
    body = f"""<div class="card">
  <h1>{t("login_title", lang)}</h1>
  {_banner(error, "error")}
  <form method="post" action="/login">
    <label>{t("login_email", lang)}<input type="email" name="email" value="{escape(email)}" required></label>
    <label>{t("login_password", lang)}<input type="password" name="password"></label>
    <div class="buttons"><button type="submit">{t("login_submit", lang)}</button></div>
  </form>
</div>"""
    return _page(t("app_title", lang), body, lang)


def _event_card(event: Event, sync: EventSynchronizer, lang: str) -> str:
    mine = sync.my_response(event.id)
    accepted = mine is not None and mine.response_type == ResponseType.ACCEPT
    declined = mine is not None and mine.response_type == ResponseType.DECLINE

    utensils = ""
    if mine and features.SHOW_UTENSILS and sync.utensils:
        chips = "".join(
            f'<span class="chip">{escape(u.icon or "")} {escape(u.name)}</span>'
            for u in sync.utensils
        )
        utensils = f'<div class="muted"><strong>{t("utensils", lang)}</strong><div>{chips}</div></div>'

    return f"""<div class="card">
  <div class="row">
    <div>
      <h3>{escape(event.title)}</h3>
      <div class="muted">📍 {escape(event.location)}</div>
      <div class="muted">📅 {event.event_date.strftime(DATE_DISPLAY_FORMAT)}</div>
      <div class="muted">🕐 {event.time_from.strftime(TIME_DISPLAY_FORMAT)} - {event.time_to.strftime(TIME_DISPLAY_FORMAT)}</div>
    </div>
    <div>
      <div class="count">{sync.response_count_for(event.id)}</div>
      <div class="muted">{t("participants", lang)}</div>
    </div>
  </div>
  <div class="buttons">
    <form method="post" action="/events/{event.id}/response">
      <input type="hidden" name="kind" value="accept">
      <button type="submit" class="{"accept" if accepted else ""}">{t("accept", lang)}</button>
    </form>
    <form method="post" action="/events/{event.id}/response">
      <input type="hidden" name="kind" value="decline">
      <button type="submit" class="{"decline" if declined else ""}">{t("decline", lang)}</button>
    </form>
  </div>
  {utensils}
</div>"""


def render_event_list(
    user: Player,
    sync: EventSynchronizer,
    lang: str,
    error: Optional[str] = None,
) -> str:
    cards = "\n".join(_event_card(event, sync, lang) for event in sync.events)
    if not sync.events and not error:
        cards = f'<p class="muted">{t("no_events", lang)}</p>'
    body = f"""{_header(user, lang, "events")}
<main>
{_banner(error, "error")}
{cards}
</main>"""
    return _page(t("app_title", lang), body, lang)


def _player_row(player: Player, lang: str) -> str:
    label = t("player_active", lang) if player.is_active else t("player_blocked", lang)
    return f"""<div class="card row">
  <div>
    <div><strong>{escape(player.nickname)}</strong></div>
    <div class="muted">{escape(player.email)}</div>
  </div>
  <form method="post" action="/admin/players/{player.id}/active">
    <input type="hidden" name="active" value="{"false" if player.is_active else "true"}">
    <button type="submit" class="{"accept" if player.is_active else ""}">{label}</button>
  </form>
</div>"""


def _create_event_form(admin: AdminController, lang: str) -> str:
    input_types = {"event_date": "date", "time_from": "time", "time_to": "time"}
    form = admin.event_form.model_dump()
    inputs = "\n".join(
        f'<label>{t("field_" + name, lang)}'
        f'<input type="{input_types.get(name, "text")}" name="{name}" value="{escape(form[name])}" required></label>'
        for name in EVENT_FORM_FIELDS
    )
    return f"""<form method="post" action="/admin/events">
  {inputs}
  <div class="buttons"><button type="submit" class="accept">{t("create_event_submit", lang)}</button></div>
</form>"""


def render_admin(
    user: Player,
    admin: AdminController,
    lang: str,
    error: Optional[str] = None,
) -> str:
    players = "\n".join(_player_row(p, lang) for p in admin.players)
    if admin.create_panel_open:
        toggle = f'<a href="/admin">{t("create_event_cancel", lang)}</a>'
        panel = _create_event_form(admin, lang)
    else:
        toggle = f'<a href="/admin?create=1">{t("create_event_open", lang)}</a>'
        panel = ""

    body = f"""{_header(user, lang, "admin")}
<main>
{_banner(admin.message, "message")}
{_banner(error or admin.error, "error")}
<section>
  <h2>{t("players_title", lang)}</h2>
  {players}
</section>
<section class="card">
  <div class="row"><h2>{t("create_event_title", lang)}</h2>{toggle}</div>
  {panel}
</section>
</main>"""
    return _page(t("app_title", lang), body, lang)
