"""Parsers for AEDoc comment text and API item references."""

from .api_definition_reference import ApiDefinitionReference
from .comment_text import extract_comment_body
from .link_parser import parse_link_tag
from .markdownish import parse_markdownish_text
from .tokenizer import Tokenizer

__all__ = [
    "ApiDefinitionReference",
    "Tokenizer",
    "extract_comment_body",
    "parse_link_tag",
    "parse_markdownish_text",
]
