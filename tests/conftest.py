"""Pytest configuration and shared fixtures.

This module provides fixtures for:
- Isolated settings (no environment or .env leakage)
- Parsers backed by a recording RDFa extractor
- Sample payloads written to temporary files
- An httpx MockTransport factory for HTTP flows
"""

import io
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from jsonld_request.config import RequestSettings, get_settings
from jsonld_request.parser import DocumentParser
from tests.mocks.data_generators import EXPECTED_STATEMENT
from tests.mocks.mock_extractor import MockRdfaExtractor


# =============================================================================
# Configuration
# =============================================================================


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch) -> None:
    """Drop cached settings and JSONLD_REQUEST_* variables between tests."""
    import os

    for name in list(os.environ):
        if name.startswith("JSONLD_REQUEST_"):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()


@pytest.fixture
def settings() -> RequestSettings:
    """Provide default settings without reading a .env file."""
    return RequestSettings(_env_file=None)


# =============================================================================
# Parser Mocks
# =============================================================================


@pytest.fixture
def mock_extractor() -> MockRdfaExtractor:
    """Provide an extractor returning the one expected RDFa statement."""
    return MockRdfaExtractor(result=[EXPECTED_STATEMENT])


@pytest.fixture
def failing_extractor() -> MockRdfaExtractor:
    """Provide an extractor that always fails."""
    return MockRdfaExtractor(error=ValueError("no RDFa here"))


@pytest.fixture
def parser(mock_extractor) -> DocumentParser:
    """Provide a DocumentParser wired to the recording extractor."""
    return DocumentParser(extractor=mock_extractor)


# =============================================================================
# Sources
# =============================================================================


@pytest.fixture
def write_file(tmp_path) -> Callable[[str, str | bytes], Path]:
    """Return a helper that writes content under tmp_path."""

    def _write(name: str, content: str | bytes) -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def stdin_with(monkeypatch) -> Callable[[bytes], None]:
    """Return a helper that replaces sys.stdin with the given bytes."""

    def _set(content: bytes) -> None:
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(content)))

    return _set


@pytest.fixture
def mock_transport() -> Callable[..., httpx.MockTransport]:
    """Return a factory for a MockTransport that records requests.

    The recorded requests are available on the transport as `.requests`.
    """

    def _factory(
        status_code: int = 200,
        content: bytes = b"",
        headers: dict[str, str] | None = None,
    ) -> httpx.MockTransport:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(status_code, content=content, headers=headers)

        transport = httpx.MockTransport(handler)
        transport.requests = requests  # type: ignore[attr-defined]
        return transport

    return _factory
