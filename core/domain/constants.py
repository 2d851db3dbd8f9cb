"""
Domain constants - table names, session key and other static data.
Centralized here for easy modification.
"""

# Remote tables
PLAYERS_TABLE = "players"
EVENTS_TABLE = "events"
EVENT_RESPONSES_TABLE = "event_responses"
UTENSILS_TABLE = "utensils"
RESPONSE_UTENSILS_TABLE = "response_utensils"

# Response rows come back with the player and the utensil join rows attached
EXPANDED_RESPONSE_SELECT = "*, player:players(*), response_utensils(*, utensil:utensils(*))"

# Persisted session identifier (cookie name in the web app)
SESSION_KEY = "userId"

# New responses
DEFAULT_GUEST_COUNT = 0

# Create-event form fields, in display order
EVENT_FORM_FIELDS = ("title", "location", "event_date", "time_from", "time_to")

# Display formats
DATE_DISPLAY_FORMAT = "%d.%m.%Y"
TIME_DISPLAY_FORMAT = "%H:%M"
