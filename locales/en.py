"""English strings."""

EN_STRINGS = {
    # === APP ===
    "app_title": "Sport Event Manager",
    "welcome": "Welcome, {name}!",
    "sign_out": "Sign out",
    "tab_events": "Events",
    "tab_admin": "Admin",

    # === LOGIN ===
    "login_title": "Sign in",
    "login_email": "Email",
    "login_password": "Password",
    "login_submit": "Sign in",
    "login_failed": "Login failed",

    # === EVENT LIST ===
    "participants": "Participants",
    "accept": "✓ Accept",
    "decline": "✗ Decline",
    "utensils": "Utensils:",
    "no_events": "No events yet",
    "load_failed": "Could not load events",
    "response_failed": "Could not save your response",

    # === ADMIN ===
    "players_title": "Players",
    "player_active": "Active",
    "player_blocked": "Blocked",
    "players_load_failed": "Could not load players",
    "player_update_failed": "Could not update player",
    "create_event_title": "Create event",
    "create_event_open": "+ New event",
    "create_event_cancel": "Cancel",
    "create_event_submit": "Create event",
    "field_title": "Title",
    "field_location": "Location",
    "field_event_date": "Date",
    "field_time_from": "From",
    "field_time_to": "To",
    "event_created": "Event created!",
    "event_create_failed": "Error while creating the event",
    "event_form_incomplete": "Please fill in all fields: {fields}",
    "forbidden": "Forbidden",
}
