"""Token data model produced by the AEDoc tokenizer."""

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Classification of a unit of AEDoc comment text."""

    TEXT = "text"
    BLOCK_TAG = "block-tag"
    INLINE_TAG = "inline-tag"


@dataclass(frozen=True)
class Token:
    """A classified unit of an AEDoc comment.

    Attributes:
        type: Whether this is plain text, a block tag or an inline tag.
        tag: The tag identifier including the "@" (e.g. '@link'), or '' for text.
        text: The raw payload. For text tokens this is untrimmed; for inline
            tags it is the content after the tag name (e.g. 'Foo.bar | label').
    """

    type: TokenType
    tag: str = ""
    text: str = ""

    def __repr__(self) -> str:
        """Human-readable representation for debugging."""
        return f"Token({self.type.value} {self.tag!r} {self.text!r})"
