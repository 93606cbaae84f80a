"""HTTP(S) reader with content negotiation.

Sends an Accept header preferring JSON-LD, then JSON, then (X)HTML, and
parses the body according to the declared or response content type.
No retries: any failure is terminal for the call.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from jsonld_request.config import RequestSettings, get_settings
from jsonld_request.exceptions import JsonLdRequestError
from jsonld_request.parser import DocumentParser
from jsonld_request.schemas import ErrorCodes, RequestOptions, ResponseEnvelope


logger = logging.getLogger(__name__)


def media_type(response: httpx.Response) -> str | None:
    """Return the response's content type without parameters."""
    value = response.headers.get("content-type", "").split(";")[0].strip()
    return value or None


class WebReader:
    """Fetch a URL and parse the response body."""

    def __init__(
        self,
        *,
        parser: DocumentParser | None = None,
        settings: RequestSettings | None = None,
    ) -> None:
        self._parser = parser or DocumentParser()
        self._settings = settings or get_settings()

    def _build_headers(self, options: RequestOptions) -> dict[str, str]:
        headers = dict(options.headers)
        if not any(name.lower() == "accept" for name in headers):
            headers["Accept"] = self._settings.accept_header
        return headers

    def _client_options(self, options: RequestOptions) -> dict[str, Any]:
        client_options: dict[str, Any] = {
            "timeout": self._settings.http_timeout_seconds,
            "follow_redirects": self._settings.follow_redirects,
        }
        client_options.update(options.transport_options)
        return client_options

    async def fetch(self, url: str, options: RequestOptions) -> ResponseEnvelope:
        """Fetch and parse a URL.

        Error Codes:
            - ERR_REQUEST_HTTP_STATUS: Non-2xx response
            - ERR_REQUEST_NETWORK: Connection error or timeout
        """
        headers = self._build_headers(options)

        try:
            async with httpx.AsyncClient(**self._client_options(options)) as client:
                response = await client.get(url, headers=headers)
        except httpx.RequestError as exc:
            logger.warning(
                "HTTP request failed",
                extra={"url": url, "error": type(exc).__name__},
            )
            raise JsonLdRequestError(
                component="web_reader",
                error_code=ErrorCodes.REQUEST_NETWORK,
                message=f"Network error: {exc!s}",
                url=url,
                code=type(exc).__name__,
                causes=[exc],
            ) from exc

        # The error body is not parsed into the failure.
        if not 200 <= response.status_code < 300:
            logger.warning(
                "Bad status code",
                extra={"url": url, "status_code": response.status_code},
            )
            raise JsonLdRequestError(
                component="web_reader",
                error_code=ErrorCodes.REQUEST_HTTP_STATUS,
                message="Bad status code.",
                url=url,
                status_code=response.status_code,
            )

        body = response.content
        if not body:
            return ResponseEnvelope(response=response, data=None)

        # httpx uses the response charset when it is a known codec, else this.
        response.default_encoding = options.encoding or self._settings.default_encoding
        content_type = options.data_type or media_type(response)
        logger.debug(
            "Fetched %s",
            url,
            extra={"status_code": response.status_code, "content_type": content_type},
        )

        data = self._parser.parse(
            response.text,
            location=url,
            base=options.base if options.base is not None else url,
            content_type=content_type,
        )
        return ResponseEnvelope(response=response, data=data)
