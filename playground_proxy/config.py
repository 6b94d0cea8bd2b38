"""
Central proxy configuration.

Every tunable value lives here as a typed, documented field.
Any field can be overridden at runtime via an environment variable with the
GOPLAY_ prefix (case-insensitive), e.g.:

    GOPLAY_PORT=9090 python -m playground_proxy
    export GOPLAY_LOG_LEVEL=debug

A `.env` file at the project root is loaded automatically.

Settings are built once at startup and handed to `create_app()`; nothing
imports a shared instance.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("debug", "info", "warn", "error")
DEFAULT_LOG_LEVEL = "info"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GOPLAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,   # GOPLAY_PORT == goplay_port
        extra="ignore",         # silently drop unknown env vars
        frozen=True,
    )

    # ------------------------------------------------------------------ #
    # Server                                                              #
    # ------------------------------------------------------------------ #
    host: str = Field(
        "0.0.0.0", description="Interface the HTTP server binds to"
    )
    port: int = Field(
        8080, description="Listening port (':8080' is accepted too)"
    )
    log_level: str = Field(
        DEFAULT_LOG_LEVEL, description="One of debug / info / warn / error"
    )

    # ------------------------------------------------------------------ #
    # Upstream share service                                              #
    # ------------------------------------------------------------------ #
    playground_share_url: str = Field(
        "https://play.golang.org/share",
        description="Endpoint receiving the raw code as a form-urlencoded POST",
    )
    playground_base_url: str = Field(
        "https://play.golang.org/p/",
        description="Viewer prefix; the share ID is appended verbatim",
    )

    # ------------------------------------------------------------------ #
    # Inbound limits                                                      #
    # ------------------------------------------------------------------ #
    max_code_kb: int = Field(
        64, gt=0, description="Max decoded code size (KB), the upstream's own snippet cap"
    )

    @field_validator("port", mode="before")
    @classmethod
    def _strip_port_colon(cls, value):
        if isinstance(value, str):
            return value.strip().lstrip(":")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value):
        level = str(value or "").strip().lower()
        return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL

    # ------------------------------------------------------------------ #
    # Derived byte-level properties                                       #
    # ------------------------------------------------------------------ #
    @property
    def max_code_bytes(self) -> int:
        return self.max_code_kb * 1024
