"""Tests for markup elements and normalization."""

import json
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from aedoc.models.api_reference import ApiItemReference
from aedoc.models.markup import (
    LinkStatus,
    Markup,
    MarkupApiLink,
    MarkupHtmlTag,
    MarkupText,
)
from aedoc.parsers.markdownish import parse_markdownish_text


class TestCreateTextElements:
    """Tests for Markup.create_text_elements."""

    def test_empty_text_has_no_elements(self):
        """Test that empty text produces nothing."""
        assert Markup.create_text_elements("") == []

    def test_collapses_whitespace(self):
        """Test that whitespace runs become single spaces."""
        assert Markup.create_text_elements("a \n\t b") == [MarkupText("a b")]


class TestNormalize:
    """Tests for Markup.normalize."""

    def test_trims_and_drops_doubled_paragraphs(self):
        """Test trimming at the edges and removal of repeated breaks."""
        elements = [
            MarkupText("  a"),
            Markup.PARAGRAPH,
            Markup.PARAGRAPH,
            MarkupText("b  "),
        ]

        Markup.normalize(elements)

        assert elements == [MarkupText("a"), Markup.PARAGRAPH, MarkupText("b")]

    def test_drops_leading_and_trailing_paragraphs(self):
        """Test that breaks at either end are removed."""
        elements = [Markup.PARAGRAPH, MarkupText("a"), Markup.PARAGRAPH]

        Markup.normalize(elements)

        assert elements == [MarkupText("a")]

    def test_merges_adjacent_text(self):
        """Test that neighbouring text runs are merged."""
        elements = [MarkupText("a "), MarkupText("b")]

        Markup.normalize(elements)

        assert elements == [MarkupText("a b")]

    def test_whitespace_paragraph_is_removed(self):
        """Test that a paragraph of only spaces disappears with its break."""
        elements = [
            MarkupText("a"),
            Markup.PARAGRAPH,
            MarkupText("   "),
            Markup.PARAGRAPH,
            MarkupText("b"),
        ]

        Markup.normalize(elements)

        assert elements == [MarkupText("a"), Markup.PARAGRAPH, MarkupText("b")]

    def test_text_before_html_keeps_trailing_space(self):
        """Test that only paragraph breaks and the edges trigger trimming."""
        elements = [MarkupText("a "), MarkupHtmlTag("<b>"), MarkupText(" c")]

        Markup.normalize(elements)

        assert elements == [MarkupText("a "), MarkupHtmlTag("<b>"), MarkupText(" c")]

    def test_link_elements_are_kept_by_identity(self):
        """Test that normalization does not replace link objects."""
        link = Markup.create_api_link(
            [MarkupText("Foo")], ApiItemReference(package_name="pkg", export_name="Foo")
        )
        elements = [MarkupText(" See "), link, MarkupText(". ")]

        Markup.normalize(elements)

        assert elements[1] is link
        assert elements[0] == MarkupText("See ")
        assert elements[2] == MarkupText(".")

    def test_empty_list(self):
        """Test that an empty list stays empty."""
        elements = []

        Markup.normalize(elements)

        assert elements == []

    def test_normalize_is_idempotent(self):
        """Test that normalizing twice gives the same result as once."""
        elements = parse_markdownish_text(
            "  Intro <b>bold</b> text.\n\n\n  \n\nSecond \\<escaped\\> para.  \n\n"
        )
        Markup.normalize(elements)
        once = list(elements)

        Markup.normalize(elements)

        assert elements == once


class TestExtractTextContent:
    """Tests for Markup.extract_text_content."""

    def test_renders_text_links_and_paragraphs(self):
        """Test plain-text rendering of mixed elements."""
        elements = [
            MarkupText("See"),
            MarkupText(" "),
            Markup.create_web_link([MarkupText("docs")], "http://example.com"),
            MarkupHtmlTag("<br/>"),
            Markup.PARAGRAPH,
            MarkupText("Done."),
        ]

        assert Markup.extract_text_content(elements) == "See docs\n\nDone."


class TestSerialization:
    """Tests for to_dict output."""

    def test_api_link_to_dict(self):
        """Test that API links serialize their target and status."""
        link = MarkupApiLink(
            elements=[MarkupText("Guid")],
            target=ApiItemReference("@scope", "pkg", "Guid", "newGuid"),
        )

        data = link.to_dict()

        assert data["kind"] == "api-link"
        assert data["status"] == LinkStatus.INCOMPLETE.value
        assert data["target"] == {
            "scope_name": "@scope",
            "package_name": "pkg",
            "export_name": "Guid",
            "member_name": "newGuid",
        }
        json.dumps(data)

    def test_element_kinds(self):
        """Test the kind discriminators used by renderers."""
        assert MarkupText("a").to_dict() == {"kind": "text", "text": "a"}
        assert Markup.PARAGRAPH.to_dict() == {"kind": "paragraph"}
        assert MarkupHtmlTag("<b>").to_dict() == {"kind": "html-tag", "token": "<b>"}
        assert Markup.create_web_link([], "http://x").to_dict()["kind"] == "web-link"
