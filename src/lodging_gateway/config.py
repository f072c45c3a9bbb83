"""
Configuration management for the lodging gateway
"""

from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Upstream REST services, one base URL per entity
    users_url: str | None = None
    roles_url: str | None = None
    locations_url: str | None = None
    lodgings_url: str | None = None
    lodging_images_url: str | None = None
    reservations_url: str | None = None

    # Upstream call behaviour
    upstream_timeout: float | None = None  # None disables the timeout
    upstream_errors_as_data: bool = False
    show_urls: bool = Field(
        default=False,
        validation_alias=AliasChoices("SHOW_URLS", "GATEWAY_SHOW_URLS"),
    )

    # API Settings
    api_host: str = "0.0.0.0"
    port: int = Field(
        default=5000,
        validation_alias=AliasChoices("PORT", "GATEWAY_PORT"),
    )
    cors_origins: list[str] = ["*"]

    # Environment
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="GATEWAY_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("show_urls", mode="before")
    @classmethod
    def _any_value_enables(cls, value: Any) -> bool:
        # Any non-empty value switches URL logging on, "0" and "false" included.
        if isinstance(value, str):
            return value != ""
        return bool(value)

    def service_urls(self) -> dict[str, str | None]:
        """Base URL per entity name, in schema order."""
        return {
            "users": self.users_url,
            "roles": self.roles_url,
            "locations": self.locations_url,
            "lodging_images": self.lodging_images_url,
            "lodgings": self.lodgings_url,
            "reservations": self.reservations_url,
        }


# Global settings instance
settings = Settings()
