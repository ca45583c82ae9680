"""Collects documentation for every item of a package and completes it."""

import sys
from typing import Optional

from ..documentation.api_documentation import ApiDocumentation
from ..models.api_item import ApiItem, ApiItemKind
from ..models.extraction_result import ExtractionResult
from ..parsers.comment_text import extract_comment_body
from ..resolution.base_resolver import ReferenceResolver
from ..resolution.package_resolver import PackageResolver
from .extractor_context import ExtractorContext


class DocumentationCollector:
    """Orchestrates both passes over a package's AEDoc comments.

    Items are added one at a time, which parses their comments immediately.
    complete() is the barrier: it runs the deferred pass on every item, in
    the order they were added, after which no more items may be added.

    Attributes:
        context: Package identity, config and shared diagnostics channels.
        resolver: Resolver used for {@link} and {@inheritdoc} targets.
    """

    def __init__(
        self,
        context: ExtractorContext,
        resolver: Optional[ReferenceResolver] = None,
    ) -> None:
        """Initialize the collector with injected dependencies.

        Args:
            context: Context for the package being documented.
            resolver: Optional resolver (creates a PackageResolver if None).
        """
        self.context = context
        self.resolver = resolver or PackageResolver()
        self._completed = False

    def add_item(
        self,
        name: str,
        kind: ApiItemKind,
        comment: str,
        parent: Optional[ApiItem] = None,
    ) -> ApiItem:
        """Parse an item's comment and register the item with the package.

        Args:
            name: Export name, or member name when parent is given.
            kind: Declaration kind.
            comment: Raw comment, with or without the /** */ delimiters.
            parent: Owning export for class/interface members.

        Returns:
            The new item, with first-pass documentation.

        Raises:
            RuntimeError: If complete() has already run.
        """
        if self._completed:
            raise RuntimeError("Cannot add items after documentation has been completed")

        qualified_name = f"{parent.name}.{name}" if parent is not None else name
        documentation = ApiDocumentation(
            extract_comment_body(comment),
            self.resolver,
            self.context,
            item_name=qualified_name,
        )
        item = ApiItem(name=name, kind=kind, documentation=documentation)

        if parent is not None:
            parent.members[name] = item
        else:
            self.context.package.exports[name] = item
        return item

    def complete(self, verbose: bool = False) -> ExtractionResult:
        """Run the deferred pass for every item and gather the results.

        Args:
            verbose: If True, print progress information to stderr.

        Returns:
            ExtractionResult for the whole package.
        """
        items = list(self.context.package.iter_items())
        if verbose:
            print(f"Completing documentation for {len(items)} items", file=sys.stderr)

        for item in items:
            item.documentation.complete_initialization()
        self._completed = True

        return ExtractionResult(
            package_name=self.context.package_name,
            items=list(self.context.package.exports.values()),
            diagnostics=list(self.context.errors),
            warnings=list(self.context.warnings),
        )
