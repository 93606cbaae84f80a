"""Base enums and the standardized failure record."""

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, Field


class OriginKind(StrEnum):
    """Where a location's data comes from."""

    STDIN = "stdin"
    FILE = "file"
    HTTP = "http"
    HTTPS = "https"


class ContentKind(StrEnum):
    """Recognized content kinds, one parser each."""

    TEXT = "text"
    JSON = "json"
    XML = "xml"
    HTML = "html"
    XHTML = "xhtml"

    @property
    def is_markup(self) -> bool:
        return self in {ContentKind.XML, ContentKind.HTML, ContentKind.XHTML}


class ErrorCodes(StrEnum):
    """Standard error codes for request failures."""

    # Dispatcher
    REQUEST_ORIGIN_NOT_ALLOWED = "ERR_REQUEST_ORIGIN_NOT_ALLOWED"

    # HTTP reader
    REQUEST_HTTP_STATUS = "ERR_REQUEST_HTTP_STATUS"
    REQUEST_NETWORK = "ERR_REQUEST_NETWORK"

    # Parser
    PARSER_DECODE = "ERR_PARSER_DECODE"
    PARSER_JSON = "ERR_PARSER_JSON"
    PARSER_EXTRACTION = "ERR_PARSER_EXTRACTION"
    PARSER_UNKNOWN_TYPE = "ERR_PARSER_UNKNOWN_TYPE"
    PARSER_AUTODETECT = "ERR_PARSER_AUTODETECT"


class FailureDetails(BaseModel):
    """Structured context attached to a failure."""

    url: str | None = None
    content_type: str | None = None
    status_code: int | None = None
    code: str | None = None
    origin: OriginKind | None = None


class RequestFailure(BaseModel):
    """Standardized error object for request failures."""

    component: str
    error_code: ErrorCodes
    message: str
    details: FailureDetails = Field(default_factory=FailureDetails)
    causes: list[str] = Field(default_factory=list)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
