"""Standard input reader."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import BinaryIO

from jsonld_request.config import RequestSettings, get_settings
from jsonld_request.parser import DocumentParser, decode_text
from jsonld_request.schemas import RequestOptions, ResponseEnvelope


logger = logging.getLogger(__name__)


class StdinReader:
    """Read the whole standard input stream and parse it."""

    def __init__(
        self,
        *,
        parser: DocumentParser | None = None,
        settings: RequestSettings | None = None,
        stream: BinaryIO | None = None,
    ) -> None:
        self._parser = parser or DocumentParser()
        self._settings = settings or get_settings()
        self._stream = stream

    async def fetch(
        self, location: str | None, options: RequestOptions
    ) -> ResponseEnvelope:
        stream = self._stream if self._stream is not None else sys.stdin.buffer
        raw = await asyncio.to_thread(stream.read)
        encoding = options.encoding or self._settings.default_encoding
        logger.debug("Read %d bytes from stdin", len(raw))

        base = options.base if options.base is not None else self._settings.stdin_base
        data = self._parser.parse(
            decode_text(
                raw, encoding, location=location, content_type=options.data_type
            ),
            location=location,
            base=base,
            content_type=options.data_type,
        )
        return ResponseEnvelope(response=None, data=data)
