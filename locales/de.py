"""German strings - the default UI language."""

DE_STRINGS = {
    # === APP ===
    "app_title": "Sport Event Manager",
    "welcome": "Willkommen, {name}!",
    "sign_out": "Abmelden",
    "tab_events": "Events",
    "tab_admin": "Admin",

    # === LOGIN ===
    "login_title": "Anmelden",
    "login_email": "E-Mail",
    "login_password": "Passwort",
    "login_submit": "Anmelden",
    "login_failed": "Login fehlgeschlagen",

    # === EVENT LIST ===
    "participants": "Teilnehmer",
    "accept": "✓ Zusage",
    "decline": "✗ Absage",
    "utensils": "Utensilien:",
    "no_events": "Noch keine Events vorhanden",
    "load_failed": "Events konnten nicht geladen werden",
    "response_failed": "Antwort konnte nicht gespeichert werden",

    # === ADMIN ===
    "players_title": "Spielerverwaltung",
    "player_active": "Aktiv",
    "player_blocked": "Blockiert",
    "players_load_failed": "Spieler konnten nicht geladen werden",
    "player_update_failed": "Spieler konnte nicht aktualisiert werden",
    "create_event_title": "Event erstellen",
    "create_event_open": "+ Neues Event",
    "create_event_cancel": "Abbrechen",
    "create_event_submit": "Event erstellen",
    "field_title": "Titel",
    "field_location": "Ort",
    "field_event_date": "Datum",
    "field_time_from": "Von",
    "field_time_to": "Bis",
    "event_created": "Event erfolgreich erstellt!",
    "event_create_failed": "Fehler beim Erstellen des Events",
    "event_form_incomplete": "Bitte alle Felder ausfüllen: {fields}",
    "forbidden": "Kein Zugriff",
}
