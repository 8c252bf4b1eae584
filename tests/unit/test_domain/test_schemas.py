"""
test_schemas.py - request parsing tests

DoD:
- title missing/empty → INVALID_INPUT
- blocks not a list → INVALID_INPUT
- unknown / non-object blocks skipped, order kept
- unknown theme → light
"""

import pytest

from sitebuilder.domain.errors import ErrorCodes, SiteBuilderError, http_status_for
from sitebuilder.domain.schemas import (
    HeadingBlock,
    ImageBlock,
    ParagraphBlock,
    normalize_theme,
    parse_block,
    parse_site_request,
)


class TestParseBlock:

    def test_heading(self):
        assert parse_block({"type": "h1", "text": "Hi"}) == HeadingBlock(text="Hi")

    def test_paragraph(self):
        assert parse_block({"type": "p", "text": "Body"}) == ParagraphBlock(text="Body")

    def test_image(self):
        block = parse_block({"type": "image", "filename": "a.png", "alt": "cap"})
        assert block == ImageBlock(filename="a.png", alt="cap")
        assert block.src == ""

    def test_image_alt_text_alias(self):
        block = parse_block({"type": "image", "filename": "a.png", "altText": "cap"})
        assert block.alt == "cap"

    def test_missing_fields_default_empty(self):
        assert parse_block({"type": "h1"}) == HeadingBlock(text="")
        assert parse_block({"type": "image"}) == ImageBlock()

    def test_non_string_coerced(self):
        assert parse_block({"type": "p", "text": 42}).text == "42"

    @pytest.mark.parametrize("data", ["h1", 1, None, [], {"type": "video"}, {}])
    def test_skipped(self, data):
        assert parse_block(data) is None


class TestParseSiteRequest:

    def test_valid(self, sample_payload: dict):
        request = parse_site_request(sample_payload)

        assert request.title == "Hello Site"
        assert request.theme == "dark"
        assert [type(b) for b in request.blocks] == [HeadingBlock, ParagraphBlock, ImageBlock]

    def test_unknown_blocks_dropped_order_kept(self):
        request = parse_site_request(
            {
                "title": "t",
                "blocks": [{"type": "p", "text": "1"}, {"type": "x"}, "junk", {"type": "h1", "text": "2"}],
            }
        )
        assert [b.text for b in request.blocks] == ["1", "2"]

    def test_empty_blocks_ok(self):
        assert parse_site_request({"title": "t", "blocks": []}).blocks == []

    @pytest.mark.parametrize(
        "payload",
        [
            None,
            [],
            "title",
            {"blocks": []},
            {"title": "", "blocks": []},
            {"title": None, "blocks": []},
            {"title": "t"},
            {"title": "t", "blocks": "not-a-list"},
            {"title": "t", "blocks": {"0": {"type": "h1"}}},
        ],
    )
    def test_invalid(self, payload):
        with pytest.raises(SiteBuilderError) as exc_info:
            parse_site_request(payload)

        assert exc_info.value.code == ErrorCodes.INVALID_INPUT
        assert http_status_for(exc_info.value.code) == 400

    def test_theme_defaults(self):
        assert parse_site_request({"title": "t", "blocks": []}).theme == "light"


class TestNormalizeTheme:

    @pytest.mark.parametrize(
        "theme,expected",
        [("light", "light"), ("dark", "dark"), ("neon", "light"), (None, "light"), ("", "light"), (1, "light")],
    )
    def test_values(self, theme, expected):
        assert normalize_theme(theme) == expected


class TestSiteBuilderError:

    def test_message_and_context(self):
        err = SiteBuilderError(ErrorCodes.INVALID_INPUT, "Invalid data", field="title")

        assert err.message == "Invalid data"
        assert "INVALID_INPUT" in str(err)
        assert err.to_dict() == {"code": "INVALID_INPUT", "message": "Invalid data", "field": "title"}

    def test_status_mapping(self):
        assert http_status_for(ErrorCodes.UPLOAD_MISSING) == 400
        assert http_status_for(ErrorCodes.PAYLOAD_TOO_LARGE) == 413
        assert http_status_for(ErrorCodes.GENERATION_FAILED) == 500
        assert http_status_for("SOMETHING_ELSE") == 500
