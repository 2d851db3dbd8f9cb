from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path


class Settings(BaseSettings):
    """Application settings - reads from environment variables"""

    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_key: str = ""
    db_schema: str = "public"

    # Web
    web_host: str = "0.0.0.0"
    web_port: int = 8080
    session_cookie_secure: bool = False

    # Environment
    env: str = "development"
    debug: bool = False

    @property
    def supabase_api_key(self) -> str:
        """Service key wins over the anon key when both are set"""
        return self.supabase_service_key or self.supabase_key

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,  # SUPABASE_URL == supabase_url
    )


# Create settings instance
settings = Settings()
