"""Configuration consumed by the notification client."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Client values injected at build or deploy time."""

    model_config = SettingsConfigDict(
        env_prefix="JOBPORTAL_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    server_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the server hosting the push channel",
    )
    api_url: str | None = Field(
        default=None,
        description="Base URL of the HTTP API, defaults to the server URL",
    )
    toast_seconds: float = Field(default=4.0, gt=0)
    reconnect_delay_seconds: float = Field(default=2.0, ge=0)
    admin_room: str = Field(default="admin-room")
    admin_role_alias: str = Field(
        default="admin",
        description="Role alias that makes the session join the admin room",
    )

    @property
    def resolved_api_url(self) -> str:
        return (self.api_url or self.server_url).rstrip("/")


@lru_cache
def get_client_settings() -> ClientSettings:
    """Return cached client settings instance."""

    return ClientSettings()


__all__ = ["ClientSettings", "get_client_settings"]
