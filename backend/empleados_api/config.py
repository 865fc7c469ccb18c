"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Store credentials come from environment variables (never hardcoded)
    - Missing credentials are NOT a startup failure: they yield the error-config state
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Port resolved from PORT, then PORT_EMPLEADOS, then 3090 (hosting platforms set PORT)
    - Port variables kept as raw strings: a blank or non-numeric value falls through
      to the next source instead of failing at import
"""

import re
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = 3090

_PORT_DIGITS = re.compile(r"[0-9]+")


def _parse_port(raw: str | None) -> int | None:
    """A usable TCP port, or None when the value is blank, non-numeric or out of range."""
    if raw is None:
        return None
    value = raw.strip()
    if not _PORT_DIGITS.fullmatch(value):
        return None
    port = int(value)
    return port if 0 < port < 65536 else None


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Supabase
    supabase_url: str | None = None
    supabase_key: str | None = None
    supabase_table: str = "empleados"

    @field_validator("supabase_url", "supabase_key", mode="before")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        """An empty variable counts as missing."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # Server
    host: str = "0.0.0.0"
    port_env: str | None = Field(None, validation_alias="port")
    port_empleados: str | None = None
    shutdown_grace_seconds: int = 10

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def port(self) -> int:
        for raw in (self.port_env, self.port_empleados):
            port = _parse_port(raw)
            if port is not None:
                return port
        return DEFAULT_PORT

    @property
    def has_store_credentials(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)


@lru_cache
def get_settings() -> Settings:
    return Settings()
