"""Unit tests for empty/pass-through handling, extension detection and fallback."""

import pytest

from jsonld_request.exceptions import JsonLdRequestError
from jsonld_request.parser import DocumentParser, detect_from_location, first_success
from jsonld_request.schemas import ContentKind, ErrorCodes
from tests.mocks.data_generators import (
    EXPECTED_STATEMENT,
    NOT_JSON_NOR_MARKUP,
    PLAIN_TEXT,
    RDFA_HTML,
    SAMPLE_JSONLD,
    SAMPLE_JSONLD_TEXT,
)


class TestEmptyAndStructured:
    """Test suite for payloads that are never parsed."""

    @pytest.mark.unit
    @pytest.mark.parametrize("empty", ["", b""])
    @pytest.mark.parametrize("content_type", [None, "json", "text/html", "bogus"])
    def test_empty_payload_is_no_data(
        self, parser, mock_extractor, empty, content_type
    ):
        """Test empty str/bytes return None whatever the type."""
        assert parser.parse(empty, location="x.json", content_type=content_type) is None
        assert mock_extractor.calls == []

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value", [SAMPLE_JSONLD, [1, 2, 3], 42, {"nested": {"list": []}}]
    )
    def test_structured_value_passes_through(self, parser, value):
        """Test non-text values are returned as-is."""
        assert parser.parse(value, content_type="json") is value


class TestExtensionDetection:
    """Test suite for location-based detection."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("location", "expected"),
        [
            ("notes.txt", ContentKind.TEXT),
            ("data.json", ContentKind.JSON),
            ("data.jsonld", ContentKind.JSON),
            ("data.json-ld", ContentKind.JSON),
            ("feed.xml", ContentKind.XML),
            ("page.html", ContentKind.HTML),
            ("page.xhtml", ContentKind.XHTML),
            ("http://example.com/a/doc.jsonld", ContentKind.JSON),
            ("archive.tar.gz", None),
            ("-", None),
            (None, None),
        ],
    )
    def test_detect_from_location(self, location, expected):
        """Test known suffixes map to their kind."""
        assert detect_from_location(location) is expected

    @pytest.mark.unit
    @pytest.mark.parametrize("location", ["doc.json", "doc.jsonld", "doc.json-ld"])
    def test_json_extension_wins_over_markup_content(
        self, parser, mock_extractor, location
    ):
        """Test JSON extensions select JSON even for markup content."""
        with pytest.raises(JsonLdRequestError) as exc_info:
            parser.parse(RDFA_HTML, location=location)

        assert exc_info.value.error_code == ErrorCodes.PARSER_JSON
        assert mock_extractor.calls == []

    @pytest.mark.unit
    def test_txt_extension_returns_text(self, parser):
        """Test .txt content is returned unmodified, even if it looks like JSON."""
        assert parser.parse(PLAIN_TEXT, location="notes.txt") == PLAIN_TEXT
        assert parser.parse(SAMPLE_JSONLD_TEXT, location="notes.txt") == (
            SAMPLE_JSONLD_TEXT
        )

    @pytest.mark.unit
    def test_markup_extension_uses_dialect(self, parser, mock_extractor):
        """Test .xhtml picks the XHTML processor."""
        assert parser.parse(RDFA_HTML, location="page.xhtml") == [EXPECTED_STATEMENT]
        assert mock_extractor.last_call["kind"] is ContentKind.XHTML

    @pytest.mark.unit
    def test_auto_type_means_detect(self, parser):
        """Test the 'auto' sentinel behaves like no type."""
        assert parser.parse(PLAIN_TEXT, location="a.txt", content_type="auto") == (
            PLAIN_TEXT
        )


class TestAutoDetect:
    """Test suite for JSON-then-HTML trial parsing."""

    @pytest.mark.unit
    def test_json_tried_first(self, parser, mock_extractor):
        """Test valid JSON never reaches the markup parser."""
        assert parser.parse(SAMPLE_JSONLD_TEXT, location="-") == SAMPLE_JSONLD
        assert mock_extractor.calls == []

    @pytest.mark.unit
    def test_falls_back_to_html(self, parser, mock_extractor):
        """Test non-JSON content is parsed as HTML."""
        result = parser.parse(RDFA_HTML, location="page", base="http://example.com/")

        assert result == [EXPECTED_STATEMENT]
        assert mock_extractor.last_call["kind"] is ContentKind.HTML
        assert mock_extractor.last_call["base"] == "http://example.com/"
        assert mock_extractor.last_call["require_markup"] is True

    @pytest.mark.unit
    def test_both_candidates_fail(self, failing_extractor):
        """Test an auto-detect error references the location and both causes."""
        parser = DocumentParser(extractor=failing_extractor)

        with pytest.raises(JsonLdRequestError) as exc_info:
            parser.parse(NOT_JSON_NOR_MARKUP, location="mystery.dat")

        error = exc_info.value
        assert error.error_code == ErrorCodes.PARSER_AUTODETECT
        assert error.details.url == "mystery.dat"
        assert [cause.error_code for cause in error.causes] == [
            ErrorCodes.PARSER_JSON,
            ErrorCodes.PARSER_EXTRACTION,
        ]
        assert len(error.failure.causes) == 2


class TestFirstSuccess:
    """Test suite for the ordered-candidate combinator."""

    @pytest.mark.unit
    def test_returns_first_success_and_stops(self):
        """Test later candidates are not attempted after a success."""
        called: list[str] = []

        def ok() -> str:
            called.append("ok")
            return "parsed"

        def never() -> str:
            called.append("never")
            return "unused"

        assert first_success([(ContentKind.JSON, ok), (ContentKind.HTML, never)]) == (
            "parsed"
        )
        assert called == ["ok"]

    @pytest.mark.unit
    def test_non_request_errors_propagate(self):
        """Test only JsonLdRequestError triggers the next candidate."""

        def boom() -> str:
            raise KeyError("unexpected")

        with pytest.raises(KeyError):
            first_success([(ContentKind.JSON, boom)])

    @pytest.mark.unit
    def test_empty_candidates_raise(self):
        """Test no candidates is an auto-detect failure."""
        with pytest.raises(JsonLdRequestError) as exc_info:
            first_success([], location="x")

        assert exc_info.value.error_code == ErrorCodes.PARSER_AUTODETECT
        assert exc_info.value.causes == ()
