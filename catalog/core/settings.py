from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Material Archive"

    # Environment configuration
    environment: str = "development"  # development, staging, or production
    app_version: str = "1.0.0"

    # Archive limits
    archive_capacity: int = 100  # Max materials held by one archive
    max_text_length: int = 49  # Titles and creator names

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None

    # Audit Logging
    audit_log_enabled: bool = True

    model_config = SettingsConfigDict(env_file=".env", env_prefix="ARCHIVE_", extra="ignore")

settings = Settings()
