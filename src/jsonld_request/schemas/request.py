"""Request options and response envelope schemas."""

import codecs
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator

from jsonld_request.schemas.base import OriginKind


# None ("no data"), plain text, or decoded JSON / JSON-LD. JSON scalars are
# valid documents too: json.loads("42") == 42.
ParsedResult = dict[str, Any] | list[Any] | str | bytes | int | float | bool | None


class RequestOptions(BaseModel):
    """Caller options for a single dispatch."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    encoding: str | None = Field(
        default=None,
        description="Text encoding for stdin/file reads and charset-less HTTP bodies",
    )
    data_type: str | None = Field(
        default=None,
        alias="dataType",
        description="Explicit content type; omit, empty or 'auto' to auto-detect",
    )
    base: str | None = Field(
        default=None,
        description="Base IRI for RDFa extraction; defaults per origin",
    )
    allow: set[OriginKind] | None = Field(
        default=None,
        description="Enabled origins; defaults to the configured set",
    )
    headers: dict[str, str] = Field(default_factory=dict)
    transport_options: dict[str, Any] = Field(
        default_factory=dict,
        description="Forwarded verbatim to httpx.AsyncClient",
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str | None) -> str | None:
        """Validate the codec is known to Python."""
        if v is None:
            return None
        try:
            codecs.lookup(v)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {v}") from exc
        return v

    @field_validator("data_type")
    @classmethod
    def normalize_data_type(cls, v: str | None) -> str | None:
        """Treat empty and 'auto' as no declared type."""
        if v is None:
            return None
        v = v.strip()
        if not v or v.lower() == "auto":
            return None
        return v


class ResponseEnvelope(BaseModel):
    """Transport response (HTTP only) paired with the parsed data."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    response: httpx.Response | None = None
    data: ParsedResult = None
