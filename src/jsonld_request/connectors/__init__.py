"""Source readers for the request pipeline.

Contains:
- Stdin Reader
- File Reader
- HTTP Reader
"""

from jsonld_request.connectors.file import FILE_PREFIX, FileReader
from jsonld_request.connectors.stdin import StdinReader
from jsonld_request.connectors.web import WebReader


__all__ = ["FILE_PREFIX", "FileReader", "StdinReader", "WebReader"]
