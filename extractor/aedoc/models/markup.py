"""Markup elements produced from AEDoc comments, and helpers to build them.

A rendered block (summary, remarks, a parameter description, ...) is an
ordered list of these elements. The ``kind`` discriminators match the JSON
written by ``to_dict()`` and consumed by the renderers.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, List, Union

from .api_reference import ApiItemReference


class LinkStatus(Enum):
    """Validation state of an API link."""

    INCOMPLETE = "incomplete"
    RESOLVED = "resolved"
    UNRESOLVED = "unresolved"
    RESTRICTED = "restricted"


@dataclass
class MarkupText:
    """A run of plain text."""

    kind: ClassVar[str] = "text"
    text: str

    def to_dict(self) -> dict:
        return {"kind": self.kind, "text": self.text}


@dataclass(frozen=True)
class MarkupParagraph:
    """Paragraph break between two blocks of text."""

    kind: ClassVar[str] = "paragraph"

    def to_dict(self) -> dict:
        return {"kind": self.kind}


@dataclass
class MarkupHtmlTag:
    """An opening or closing HTML tag, passed through verbatim."""

    kind: ClassVar[str] = "html-tag"
    token: str

    def to_dict(self) -> dict:
        return {"kind": self.kind, "token": self.token}


@dataclass
class MarkupWebLink:
    """A hyperlink to a URL."""

    kind: ClassVar[str] = "web-link"
    elements: List[MarkupText]
    target_url: str

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "elements": [element.to_dict() for element in self.elements],
            "target_url": self.target_url,
        }


@dataclass
class MarkupApiLink:
    """A hyperlink to another API item.

    The status stays INCOMPLETE until the deferred pass has checked the
    target's release tag.
    """

    kind: ClassVar[str] = "api-link"
    elements: List[MarkupText]
    target: ApiItemReference
    status: LinkStatus = LinkStatus.INCOMPLETE

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "elements": [element.to_dict() for element in self.elements],
            "target": self.target.to_dict(),
            "status": self.status.value,
        }


MarkupElement = Union[
    MarkupText, MarkupParagraph, MarkupHtmlTag, MarkupWebLink, MarkupApiLink
]


class Markup:
    """Factory and normalization helpers for markup element lists."""

    PARAGRAPH: ClassVar[MarkupParagraph] = MarkupParagraph()

    _WHITESPACE_RE = re.compile(r"\s+")

    @staticmethod
    def create_text_elements(text: str) -> List[MarkupText]:
        """Create text elements for a string, collapsing whitespace runs.

        Returns an empty list for empty text.
        """
        if not text:
            return []
        return [MarkupText(Markup._WHITESPACE_RE.sub(" ", text))]

    @staticmethod
    def create_html_tag(token: str) -> MarkupHtmlTag:
        return MarkupHtmlTag(token)

    @staticmethod
    def create_web_link(elements: List[MarkupText], target_url: str) -> MarkupWebLink:
        return MarkupWebLink(elements=list(elements), target_url=target_url)

    @staticmethod
    def create_api_link(
        elements: List[MarkupText], target: ApiItemReference
    ) -> MarkupApiLink:
        return MarkupApiLink(elements=list(elements), target=target)

    @staticmethod
    def normalize(elements: List[MarkupElement]) -> None:
        """Clean up a list of elements in place.

        Repeats until nothing changes:
        - empty text runs are dropped and adjacent runs are merged
        - paragraph breaks at either end, or directly after another
          break, are dropped
        - text is trimmed next to either end or a paragraph break

        Running it a second time never changes the result.
        """
        while True:
            result = Markup._normalize_once(elements)
            if result == elements:
                return
            elements[:] = result

    @staticmethod
    def _normalize_once(elements: List[MarkupElement]) -> List[MarkupElement]:
        merged: List[MarkupElement] = []
        for element in elements:
            if isinstance(element, MarkupText):
                if not element.text:
                    continue
                if merged and isinstance(merged[-1], MarkupText):
                    merged[-1] = MarkupText(merged[-1].text + element.text)
                    continue
            elif isinstance(element, MarkupParagraph):
                if not merged or isinstance(merged[-1], MarkupParagraph):
                    continue
            merged.append(element)

        while merged and isinstance(merged[-1], MarkupParagraph):
            merged.pop()

        result: List[MarkupElement] = []
        last = len(merged) - 1
        for i, element in enumerate(merged):
            if isinstance(element, MarkupText):
                text = element.text
                if i == 0 or isinstance(merged[i - 1], MarkupParagraph):
                    text = text.lstrip()
                if i == last or isinstance(merged[i + 1], MarkupParagraph):
                    text = text.rstrip()
                if text != element.text:
                    element = MarkupText(text)
            result.append(element)
        return result

    @staticmethod
    def extract_text_content(elements: List[MarkupElement]) -> str:
        """Render elements to plain text.

        Link elements contribute their display text; HTML tags are omitted.
        """
        parts: List[str] = []
        for element in elements:
            if isinstance(element, MarkupText):
                parts.append(element.text)
            elif isinstance(element, MarkupParagraph):
                parts.append("\n\n")
            elif isinstance(element, (MarkupWebLink, MarkupApiLink)):
                parts.append(Markup.extract_text_content(element.elements))
        return "".join(parts)

    @staticmethod
    def to_dicts(elements: List[MarkupElement]) -> List[dict]:
        """Serialize a list of elements for JSON output."""
        return [element.to_dict() for element in elements]
