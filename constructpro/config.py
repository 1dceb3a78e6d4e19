"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    database_url: str

    # Redis
    redis_url: str

    # App
    log_level: str = "INFO"
    environment: str = "development"
    site_name: str = "ConstructPro"

    # Session
    session_cookie_name: str = "session_token"
    session_ttl_seconds: int = 86400  # 24 hours
    session_cookie_secure: bool = True

    # Public listings
    featured_projects_limit: int = 6
    featured_testimonials_limit: int = 6

    # Telegram (new inquiry notifications)
    inquiry_notify_telegram_bot_token: str = ""
    inquiry_notify_telegram_chat_id: str = ""

    # Seed script
    admin_email: str = "admin@constructpro.com"
    admin_password: str = ""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()  # type: ignore[call-arg]
