"""Mock implementations for isolated tests.

This module provides:
- Sample JSON and RDFa payloads (data_generators)
- A recording RDFa extractor (mock_extractor)

These mocks let the parser and readers be tested without network access.
"""
