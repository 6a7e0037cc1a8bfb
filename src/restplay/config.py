"""Configuration management for restplay."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Extraction settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RESTPLAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    client_id_key: str = Field(
        default="client_id",
        min_length=1,
        description="Form/query key holding the client_id",
    )
    max_form_bytes: int = Field(
        default=10 * 1024 * 1024,
        ge=1,
        description="Largest url-encoded body that will be parsed for a client_id",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )


settings = Settings()
