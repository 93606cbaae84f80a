"""Local file reader."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from jsonld_request.config import RequestSettings, get_settings
from jsonld_request.parser import DocumentParser, decode_text
from jsonld_request.schemas import RequestOptions, ResponseEnvelope


logger = logging.getLogger(__name__)

FILE_PREFIX = "file://"


class FileReader:
    """Read a whole local file and parse it.

    Filesystem errors (missing file, permissions, directories) propagate
    unchanged as OSError subclasses.
    """

    def __init__(
        self,
        *,
        parser: DocumentParser | None = None,
        settings: RequestSettings | None = None,
    ) -> None:
        self._parser = parser or DocumentParser()
        self._settings = settings or get_settings()

    async def fetch(self, location: str, options: RequestOptions) -> ResponseEnvelope:
        path = location.removeprefix(FILE_PREFIX)
        # Bytes then decode, so text content is returned without newline translation.
        raw = await asyncio.to_thread(Path(path).read_bytes)
        encoding = options.encoding or self._settings.default_encoding
        logger.debug("Read %d bytes from %s", len(raw), path)

        data = self._parser.parse(
            decode_text(
                raw, encoding, location=path, content_type=options.data_type
            ),
            location=path,
            base=options.base if options.base is not None else f"{FILE_PREFIX}{path}",
            content_type=options.data_type,
        )
        return ResponseEnvelope(response=None, data=data)
