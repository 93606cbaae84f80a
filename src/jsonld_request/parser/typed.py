"""Typed parsing: one parser per recognized content kind."""

from __future__ import annotations

import json
import logging

from jsonld_request.exceptions import JsonLdRequestError
from jsonld_request.parser.rdfa import RdfaExtractor
from jsonld_request.schemas import ContentKind, ErrorCodes, ParsedResult


logger = logging.getLogger(__name__)

COMPONENT = "parser"

TYPE_TOKENS: dict[str, ContentKind] = {
    # Plain text
    "text": ContentKind.TEXT,
    "plain": ContentKind.TEXT,
    "text/plain": ContentKind.TEXT,
    # JSON family
    "json": ContentKind.JSON,
    "jsonld": ContentKind.JSON,
    "json-ld": ContentKind.JSON,
    "ld+json": ContentKind.JSON,
    "application/json": ContentKind.JSON,
    "application/ld+json": ContentKind.JSON,
    # Markup with embedded RDFa
    "xml": ContentKind.XML,
    "text/xml": ContentKind.XML,
    "html": ContentKind.HTML,
    "text/html": ContentKind.HTML,
    "xhtml": ContentKind.XHTML,
    "application/xhtml+xml": ContentKind.XHTML,
}


def resolve_content_kind(content_type: str, location: str | None = None) -> ContentKind:
    """Map a declared content type to its kind.

    Raises:
        JsonLdRequestError: ERR_PARSER_UNKNOWN_TYPE for unrecognized types.
    """
    kind = TYPE_TOKENS.get(content_type.strip().lower())
    if kind is None:
        raise JsonLdRequestError(
            component=COMPONENT,
            error_code=ErrorCodes.PARSER_UNKNOWN_TYPE,
            message=f"Unknown Content-Type: {content_type}",
            url=location,
            content_type=content_type,
        )
    return kind


def decode_text(
    raw: bytes,
    encoding: str,
    *,
    location: str | None = None,
    content_type: str | None = None,
) -> str:
    """Decode a raw payload, reporting invalid bytes as a content error.

    Raises:
        JsonLdRequestError: ERR_PARSER_DECODE when `raw` is not valid in
            `encoding`.
    """
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise JsonLdRequestError(
            component=COMPONENT,
            error_code=ErrorCodes.PARSER_DECODE,
            message=f"Content is not valid {encoding}.",
            url=location,
            content_type=content_type,
            causes=[exc],
        ) from exc


class TypedParser:
    """Parse raw data strictly as a given content kind."""

    def __init__(self, *, extractor: RdfaExtractor | None = None) -> None:
        self._extractor = extractor or RdfaExtractor()

    def parse_as(
        self,
        kind: ContentKind,
        data: str | bytes,
        *,
        location: str | None = None,
        base: str | None = None,
        content_type: str | None = None,
        require_markup: bool = False,
    ) -> ParsedResult:
        """Parse data as `kind`.

        Args:
            kind: Resolved content kind.
            data: Raw payload.
            location: Where the data came from, reported in errors.
            base: Base IRI for RDFa extraction (defaults to `location`).
            content_type: The declared or detected type string, reported in
                errors (defaults to the kind's name).
            require_markup: Reject HTML that starts with text instead of an
                element, used when the kind is a guess.

        Returns:
            The data itself for text, decoded JSON, or expanded JSON-LD.
        """
        declared = content_type or str(kind)
        if kind is ContentKind.TEXT:
            return data
        if kind is ContentKind.JSON:
            return self._parse_json(data, location=location, content_type=declared)
        return self._parse_markup(
            kind,
            data,
            location=location,
            base=base if base is not None else (location or ""),
            content_type=declared,
            require_markup=require_markup,
        )

    def _parse_json(
        self, data: str | bytes, *, location: str | None, content_type: str
    ) -> ParsedResult:
        try:
            return json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise JsonLdRequestError(
                component=COMPONENT,
                error_code=ErrorCodes.PARSER_JSON,
                message="Error parsing JSON.",
                url=location,
                content_type=content_type,
                causes=[exc],
            ) from exc

    def _parse_markup(
        self,
        kind: ContentKind,
        data: str | bytes,
        *,
        location: str | None,
        base: str,
        content_type: str,
        require_markup: bool,
    ) -> ParsedResult:
        try:
            return self._extractor.extract_document(
                data, kind, base, require_markup=require_markup
            )
        except Exception as exc:  # any DOM, RDFa or conversion failure
            raise JsonLdRequestError(
                component=COMPONENT,
                error_code=ErrorCodes.PARSER_EXTRACTION,
                message="RDFa extraction error.",
                url=location,
                content_type=content_type,
                causes=[exc],
            ) from exc
