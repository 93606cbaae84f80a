"""Document parsing - "the decoder".

Turns raw text or bytes into plain text, decoded JSON, or expanded JSON-LD
extracted from RDFa in XML/HTML/XHTML.
"""

from jsonld_request.parser.detect import detect_from_location, first_success
from jsonld_request.parser.document import DocumentParser
from jsonld_request.parser.rdfa import RdfaExtractor
from jsonld_request.parser.typed import (
    TypedParser,
    decode_text,
    resolve_content_kind,
)


__all__ = [
    "DocumentParser",
    "RdfaExtractor",
    "TypedParser",
    "decode_text",
    "detect_from_location",
    "first_success",
    "resolve_content_kind",
]
