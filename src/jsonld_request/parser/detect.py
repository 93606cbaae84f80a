"""Format detection by location extension and ordered trial parsing."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from jsonld_request.exceptions import JsonLdRequestError
from jsonld_request.schemas import ContentKind, ErrorCodes, ParsedResult


logger = logging.getLogger(__name__)

# Checked in order; the first matching suffix wins.
EXTENSION_KINDS: tuple[tuple[str, ContentKind], ...] = (
    (".txt", ContentKind.TEXT),
    (".json", ContentKind.JSON),
    (".jsonld", ContentKind.JSON),
    (".json-ld", ContentKind.JSON),
    (".xml", ContentKind.XML),
    (".html", ContentKind.HTML),
    (".xhtml", ContentKind.XHTML),
)

# JSON fails fast on a syntax error, markup parsing is the expensive fallback.
AUTODETECT_ORDER: tuple[ContentKind, ...] = (ContentKind.JSON, ContentKind.HTML)

Attempt = Callable[[], ParsedResult]


def detect_from_location(location: str | None) -> ContentKind | None:
    """Return the content kind implied by the location's extension, if any."""
    if not location:
        return None
    for suffix, kind in EXTENSION_KINDS:
        if location.endswith(suffix):
            return kind
    return None


def first_success(
    attempts: Sequence[tuple[ContentKind, Attempt]],
    *,
    location: str | None = None,
) -> ParsedResult:
    """Return the result of the first attempt that parses.

    Raises:
        JsonLdRequestError: ERR_PARSER_AUTODETECT carrying every attempt's
            failure when none succeeds.
    """
    failures: list[JsonLdRequestError] = []
    for kind, attempt in attempts:
        try:
            return attempt()
        except JsonLdRequestError as exc:
            logger.debug(
                "Auto-detect candidate failed",
                extra={"content_kind": str(kind), "url": location, "error": str(exc)},
            )
            failures.append(exc)

    logger.warning(
        "Unable to auto-detect format",
        extra={"url": location, "attempts": [str(kind) for kind, _ in attempts]},
    )
    error = JsonLdRequestError(
        component="parser",
        error_code=ErrorCodes.PARSER_AUTODETECT,
        message="Unable to auto-detect format.",
        url=location,
        causes=failures,
    )
    raise error from (failures[-1] if failures else None)
