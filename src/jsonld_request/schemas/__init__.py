"""Pydantic schemas shared across the request pipeline.

Contains:
- ContentKind, OriginKind, ErrorCodes
- FailureDetails, RequestFailure
- RequestOptions, ResponseEnvelope
"""

from jsonld_request.schemas.base import (
    ContentKind,
    ErrorCodes,
    FailureDetails,
    OriginKind,
    RequestFailure,
)
from jsonld_request.schemas.request import (
    ParsedResult,
    RequestOptions,
    ResponseEnvelope,
)


__all__ = [
    # Base
    "ContentKind",
    "OriginKind",
    "ErrorCodes",
    "FailureDetails",
    "RequestFailure",
    # Request
    "ParsedResult",
    "RequestOptions",
    "ResponseEnvelope",
]
