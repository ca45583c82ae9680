"""Second pass over a documentation object: links and {@inheritdoc}."""

import copy
import logging
import re
from typing import TYPE_CHECKING, Generator, List

from ..models.completion_state import CompletionState
from ..models.markup import LinkStatus, Markup, MarkupApiLink
from ..models.token import Token
from ..parsers.api_definition_reference import ApiDefinitionReference

if TYPE_CHECKING:
    from ..documentation.api_documentation import ApiDocumentation

logger = logging.getLogger(__name__)


class DeferredResolver:
    """Drains the queued links and {@inheritdoc} requests of one object.

    Must only run once every documentation object in the package has finished
    its first pass, since both checks read other items' release tags and
    content. Resolving an {@inheritdoc} whose target is a local item that has
    not completed yet completes that target first; a target that is already in
    progress means the two items inherit from each other, which is reported.

    Targets are completed from an explicit stack of suspended steps rather
    than by recursion, so long inheritance chains do not hit the interpreter's
    recursion limit.
    """

    _WHITESPACE_RE = re.compile(r"\s")

    def __init__(self, documentation: "ApiDocumentation") -> None:
        self.documentation = documentation
        self.context = documentation.context
        self.config = documentation.context.config

    def complete(self) -> None:
        """Validate queued links, then resolve queued {@inheritdoc} requests."""
        if self.documentation.completion_state != CompletionState.UNVISITED:
            return

        # Each entry yields the documentation objects it needs completed first
        stack: List[Generator["ApiDocumentation", None, None]] = [self._steps()]
        try:
            while stack:
                try:
                    target = next(stack[-1])
                except StopIteration:
                    stack.pop()
                    continue
                if target.completion_state == CompletionState.UNVISITED:
                    stack.append(DeferredResolver(target)._steps())
        finally:
            for steps in reversed(stack):
                steps.close()

    def _steps(self) -> Generator["ApiDocumentation", None, None]:
        doc = self.documentation
        doc.completion_state = CompletionState.IN_PROGRESS
        try:
            self._complete_links()
            yield from self._complete_inheritdocs()
        finally:
            doc.completion_state = CompletionState.DONE

    def _complete_links(self) -> None:
        """Check that each {@link} target will appear in the generated docs."""
        doc = self.documentation
        while doc.incomplete_links:
            link: MarkupApiLink = doc.incomplete_links.popleft()

            reference = ApiDefinitionReference.create_from_parts(link.target)
            resolved = doc.reference_resolver.resolve(
                reference, self.context.package, doc.warnings
            )

            # The resolver has already reported a missing target
            if resolved is None:
                link.status = LinkStatus.UNRESOLVED
                continue

            if resolved.release_tag in self.config.restricted_link_tags:
                doc.report_error(
                    "The {@link} tag references an @internal or @alpha API item,"
                    " which will not appear in the generated documentation"
                )
                link.status = LinkStatus.RESTRICTED
            else:
                link.status = LinkStatus.RESOLVED

    def _complete_inheritdocs(self) -> Generator["ApiDocumentation", None, None]:
        doc = self.documentation
        while doc.incomplete_inheritdocs:
            yield from self._resolve_inheritdoc(doc.incomplete_inheritdocs.popleft())

        if (
            self.config.enforce_inherited_deprecation
            and doc.is_doc_inherited_deprecated
            and not doc.deprecated_message
        ):
            doc.report_error(
                "A deprecation message must be included after the @deprecated tag."
            )

    def _resolve_inheritdoc(
        self, token: Token
    ) -> Generator["ApiDocumentation", None, None]:
        """Copy the documentation of the {@inheritdoc} target onto this item.

        The format is {@inheritdoc @scopeName/packageName:exportName.memberName}.
        """
        doc = self.documentation
        reference_text = token.text

        if self._WHITESPACE_RE.search(reference_text):
            doc.report_error(
                "The {@inheritdoc} tag does not match the expected pattern"
                ' "{@inheritdoc @scopeName/packageName:exportName}"'
            )
            return

        reference = ApiDefinitionReference.create_from_string(
            reference_text, doc.report_error
        )
        if reference is None:
            doc.report_error(f'Incorrectly formatted API item reference: "{reference_text}"')
            return

        resolved = doc.reference_resolver.resolve(
            reference, self.context.package, doc.warnings
        )

        # Nothing to inherit; point readers at the target instead
        if resolved is None:
            doc.summary = Markup.create_text_elements(
                f"See documentation for {reference_text}"
            )
            return

        target = resolved.documentation
        if target is not None:
            if target.completion_state == CompletionState.IN_PROGRESS:
                logger.warning(
                    f"Circular @inheritdoc reference from {doc.item_name!r} to {reference_text!r}"
                )
                doc.report_error(
                    f'The {{@inheritdoc}} tag for "{reference_text}" forms a circular reference'
                )
                return
            yield target
            resolved.refresh()

        doc.summary = copy.deepcopy(resolved.summary)
        doc.remarks = copy.deepcopy(resolved.remarks)

        if resolved.kind.is_function_like:
            doc.parameters = copy.deepcopy(resolved.parameters)
            doc.returns_message = copy.deepcopy(resolved.returns_message)

        # The local @deprecated check already ran in the first pass; see
        # ExtractorConfig.enforce_inherited_deprecation.
        if resolved.deprecated_message:
            doc.is_doc_inherited_deprecated = True
