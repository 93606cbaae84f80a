"""jsonld-request - load JSON-LD from stdin, a file, or a URL.

Reads or fetches raw content and converts it into a structured document,
auto-detecting JSON, plain text, or (X)HTML/XML with embedded RDFa.
"""

from jsonld_request.dispatcher import RequestDispatcher, dispatch
from jsonld_request.exceptions import JsonLdRequestError
from jsonld_request.parser import DocumentParser
from jsonld_request.schemas import (
    ContentKind,
    ErrorCodes,
    OriginKind,
    RequestOptions,
    ResponseEnvelope,
)


__version__ = "0.1.0"

__all__ = [
    "ContentKind",
    "DocumentParser",
    "ErrorCodes",
    "JsonLdRequestError",
    "OriginKind",
    "RequestDispatcher",
    "RequestOptions",
    "ResponseEnvelope",
    "dispatch",
]
