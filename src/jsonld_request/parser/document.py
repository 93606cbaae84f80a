"""Top-level document parser: pass-through, explicit type, detection, fallback."""

from __future__ import annotations

import logging
from functools import partial
from typing import Any

from jsonld_request.parser.detect import (
    AUTODETECT_ORDER,
    detect_from_location,
    first_success,
)
from jsonld_request.parser.typed import TypedParser, resolve_content_kind
from jsonld_request.schemas import ParsedResult


logger = logging.getLogger(__name__)


class DocumentParser(TypedParser):
    """Convert raw payloads into structured values.

    Order of decisions:
        1. Empty str/bytes parse to None.
        2. Anything that is not str/bytes is already structured and returned
           unchanged.
        3. An explicit content type selects exactly one parser, no fallback.
        4. A recognized location extension (.txt, .json/.jsonld/.json-ld,
           .xml/.html/.xhtml) selects the parser.
        5. Otherwise JSON is tried, then HTML, and an auto-detect error is
           raised if both fail.
    """

    def parse(
        self,
        data: object,
        *,
        location: str | None = None,
        base: str | None = None,
        content_type: str | None = None,
    ) -> ParsedResult | Any:
        """Parse data read from `location`.

        Args:
            data: Raw payload, or an already-structured value.
            location: Origin of the data, used for extension detection and
                error reporting.
            base: Base IRI for RDFa extraction.
            content_type: Declared type; None, empty or 'auto' to detect.

        Returns:
            Parsed result, None for empty payloads, or `data` itself when it
            is already structured.
        """
        if not isinstance(data, str | bytes):
            return data
        if len(data) == 0:
            return None

        if content_type and content_type.strip().lower() != "auto":
            kind = resolve_content_kind(content_type, location)
            return self.parse_as(
                kind, data, location=location, base=base, content_type=content_type
            )

        kind = detect_from_location(location)
        if kind is not None:
            logger.debug(
                "Detected content kind from location",
                extra={"url": location, "content_kind": str(kind)},
            )
            return self.parse_as(kind, data, location=location, base=base)

        return first_success(
            [
                (
                    candidate,
                    partial(
                        self.parse_as,
                        candidate,
                        data,
                        location=location,
                        base=base,
                        require_markup=True,
                    ),
                )
                for candidate in AUTODETECT_ORDER
            ],
            location=location,
        )
