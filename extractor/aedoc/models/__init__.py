"""Data models for AEDoc extraction.

This module defines the core data structures used throughout the extractor:
- Token: A classified unit of comment text
- Markup elements: Text, paragraph breaks, HTML tags, web and API links
- ApiItem / ApiPackage: Declarations being documented
- ResolvedApiItem: Documentation of a reference target
- Diagnostic: A problem reported for a comment
- ExtractionResult: Documentation for a whole package
"""

from .api_item import AedocParameter, ApiItem, ApiItemKind, ApiPackage, ResolvedApiItem
from .api_reference import ApiItemReference
from .completion_state import CompletionState
from .diagnostics import Diagnostic, DiagnosticCollector
from .extraction_result import ExtractionResult
from .markup import (
    LinkStatus,
    Markup,
    MarkupApiLink,
    MarkupElement,
    MarkupHtmlTag,
    MarkupParagraph,
    MarkupText,
    MarkupWebLink,
)
from .release_tag import ReleaseTag
from .token import Token, TokenType

__all__ = [
    "AedocParameter",
    "ApiItem",
    "ApiItemKind",
    "ApiItemReference",
    "ApiPackage",
    "CompletionState",
    "Diagnostic",
    "DiagnosticCollector",
    "ExtractionResult",
    "LinkStatus",
    "Markup",
    "MarkupApiLink",
    "MarkupElement",
    "MarkupHtmlTag",
    "MarkupParagraph",
    "MarkupText",
    "MarkupWebLink",
    "ReleaseTag",
    "ResolvedApiItem",
    "Token",
    "TokenType",
]
