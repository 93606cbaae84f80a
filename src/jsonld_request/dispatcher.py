"""Request dispatch: pick a source reader for a location.

Origin priority is fixed: stdin > http > https > file, restricted to the
origins enabled for the request.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from jsonld_request.config import RequestSettings, get_settings
from jsonld_request.connectors import FileReader, StdinReader, WebReader
from jsonld_request.exceptions import JsonLdRequestError
from jsonld_request.parser import DocumentParser
from jsonld_request.schemas import (
    ErrorCodes,
    OriginKind,
    RequestOptions,
    ResponseEnvelope,
)


logger = logging.getLogger(__name__)

STDIN_SENTINEL = "-"


def origin_of(location: str | None) -> OriginKind:
    """Return the origin a location names, ignoring what is allowed."""
    if not location or location == STDIN_SENTINEL:
        return OriginKind.STDIN
    if location.startswith("http://"):
        return OriginKind.HTTP
    if location.startswith("https://"):
        return OriginKind.HTTPS
    return OriginKind.FILE


class RequestDispatcher:
    """Route a location to the stdin, file or HTTP reader."""

    def __init__(
        self,
        *,
        settings: RequestSettings | None = None,
        parser: DocumentParser | None = None,
        stdin_reader: StdinReader | None = None,
        file_reader: FileReader | None = None,
        web_reader: WebReader | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        parser = parser or DocumentParser()
        self._stdin = stdin_reader or StdinReader(
            parser=parser, settings=self._settings
        )
        self._file = file_reader or FileReader(parser=parser, settings=self._settings)
        self._web = web_reader or WebReader(parser=parser, settings=self._settings)

    def _resolve_options(
        self,
        options: RequestOptions | Mapping[str, Any] | None,
        overrides: dict[str, Any],
    ) -> RequestOptions:
        if options is None:
            resolved = RequestOptions.model_validate(overrides)
        elif isinstance(options, RequestOptions):
            resolved = (
                RequestOptions.model_validate({**dict(options), **overrides})
                if overrides
                else options
            )
        else:
            resolved = RequestOptions.model_validate({**options, **overrides})

        updates: dict[str, Any] = {}
        if resolved.encoding is None:
            updates["encoding"] = self._settings.default_encoding
        if resolved.allow is None:
            updates["allow"] = set(self._settings.allowed_origins)
        return resolved.model_copy(update=updates) if updates else resolved

    async def dispatch(
        self,
        location: str | None,
        options: RequestOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> ResponseEnvelope:
        """Load structured data from a location.

        Args:
            location: One of:
                - None, "" or "-": read from stdin.
                - URL beginning with "http://" or "https://".
                - Anything else: a file path, optionally "file://" prefixed.
            options: RequestOptions or an equivalent mapping.
            **overrides: Individual RequestOptions fields.

        Returns:
            ResponseEnvelope with the httpx response (HTTP only) and the data.

        Raises:
            JsonLdRequestError: ERR_REQUEST_ORIGIN_NOT_ALLOWED when no allowed
                origin matches, or any reader/parser failure.
            OSError: File read failures, unchanged.
        """
        opts = self._resolve_options(options, overrides)
        allow = opts.allow or set()

        if (not location or location == STDIN_SENTINEL) and OriginKind.STDIN in allow:
            origin = OriginKind.STDIN
        elif location and (
            (location.startswith("http://") and OriginKind.HTTP in allow)
            or (location.startswith("https://") and OriginKind.HTTPS in allow)
        ):
            origin = origin_of(location)
        elif OriginKind.FILE in allow:
            origin = OriginKind.FILE
        else:
            rejected = origin_of(location)
            raise JsonLdRequestError(
                component="dispatcher",
                error_code=ErrorCodes.REQUEST_ORIGIN_NOT_ALLOWED,
                message=(
                    f"Origin '{rejected}' is not allowed for location: {location!r}"
                ),
                url=location,
                origin=rejected,
            )

        logger.debug(
            "Dispatching request", extra={"url": location, "origin": str(origin)}
        )
        if origin is OriginKind.STDIN:
            return await self._stdin.fetch(location, opts)
        if origin is OriginKind.FILE:
            return await self._file.fetch(location or "", opts)
        return await self._web.fetch(location or "", opts)


async def dispatch(
    location: str | None,
    options: RequestOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> ResponseEnvelope:
    """Load structured data from a location with the default dispatcher."""

    return await RequestDispatcher().dispatch(location, options, **overrides)
