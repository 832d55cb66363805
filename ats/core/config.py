"""Application configuration via pydantic-settings.

Loads all settings from environment variables with sensible defaults.
A global `settings` instance is available for import throughout the service.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Supabase
    SUPABASE_URL: str
    SUPABASE_KEY: str

    # n8n workflow automation
    N8N_BASE_URL: str = ""
    N8N_APPLICATION_PATH: str = "/form-test/automation-specialist-supabase"
    N8N_EMAIL_PATH: str = "/webhook/send-emails"
    N8N_TIMEOUT_SECONDS: float = 30.0

    # Invitations
    APPLICATION_BASE_URL: str = "http://localhost:5173"
    INVITATION_SENDER_NAME: str = "HR Team"

    # CORS
    ALLOWED_ORIGINS: str = "*"

    # Logging
    LOG_LEVEL: str = "INFO"


settings = Settings()  # type: ignore[call-arg]
