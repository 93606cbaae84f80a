"""Library configuration powered by pydantic-settings."""

from __future__ import annotations

import codecs
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jsonld_request.schemas import OriginKind


DEFAULT_ACCEPT = (
    "application/ld+json;q=1.0, "
    "application/json;q=0.8, "
    "text/html;q=0.6, "
    "application/xhtml+xml;q=0.6"
)


class RequestSettings(BaseSettings):
    """Runtime defaults applied when a dispatch does not override them."""

    default_encoding: str = Field(
        default="utf-8",
        description="Text encoding for stdin/file reads",
    )
    allowed_origins: set[OriginKind] = Field(
        default_factory=lambda: set(OriginKind),
        description="Origins enabled when a request does not pass `allow`",
    )
    accept_header: str = Field(
        default=DEFAULT_ACCEPT,
        description="Accept header sent when the caller supplies none",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        description="Default httpx timeout; override per request via transport_options",
    )
    follow_redirects: bool = True
    stdin_base: str = Field(
        default="-",
        description="Base IRI used for documents read from stdin",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="JSONLD_REQUEST_",
        extra="ignore",
    )

    @field_validator("default_encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate the codec is known to Python."""
        try:
            codecs.lookup(v)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {v}") from exc
        return v

    @field_validator("allowed_origins")
    @classmethod
    def validate_allowed_origins(cls, v: set[OriginKind]) -> set[OriginKind]:
        """At least one origin must be enabled."""
        if not v:
            raise ValueError("allowed_origins must enable at least one origin")
        return v

    @field_validator("http_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v


@lru_cache(maxsize=1)
def get_settings() -> RequestSettings:
    """Return a cached settings instance."""

    return RequestSettings()
