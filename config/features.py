"""
Feature Flags - Easy on/off toggle for features.
Change values here to enable/disable functionality.
"""

import os


class Features:
    """Feature toggles - set via env vars or defaults"""

    # === ADMIN ===
    ADMIN_PANEL_ENABLED: bool = os.getenv("ADMIN_PANEL_ENABLED", "true").lower() == "true"

    # === EVENT LIST ===
    SHOW_UTENSILS: bool = os.getenv("SHOW_UTENSILS", "true").lower() == "true"

    # === LANGUAGE ===
    # Options: "de" (club default), "en"
    DEFAULT_LANGUAGE: str = os.getenv("DEFAULT_LANGUAGE", "de")

    # === DEBUG ===
    DEBUG_MODE: bool = os.getenv("DEBUG", "false").lower() == "true"

    @classmethod
    def to_dict(cls) -> dict:
        """Get all features as dict (useful for logging)"""
        return {
            "admin_panel_enabled": cls.ADMIN_PANEL_ENABLED,
            "show_utensils": cls.SHOW_UTENSILS,
            "default_language": cls.DEFAULT_LANGUAGE,
            "debug_mode": cls.DEBUG_MODE,
        }


# Shortcut
features = Features()
