"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "altscore-gateway"
    log_level: str = "INFO"

    # Cosmetic delays shown by the client as "calculating" / "typing"
    score_delay_seconds: float = 2.0
    chat_reply_delay_min: float = 1.0
    chat_reply_delay_max: float = 2.0

    # Chat sessions are held in process memory only
    max_chat_sessions: int = 1000
    chat_session_ttl_seconds: float = 1800.0


settings = Settings()
