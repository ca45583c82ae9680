"""AEDoc documentation object and its first-pass tag parser.

For guidance about using these tags, see:
https://github.com/Microsoft/web-build-tools/wiki/API-Extractor-~-AEDoc-tags
"""

from collections import deque
from typing import TYPE_CHECKING, Callable, Deque, Dict, List, Optional

from ..models.api_item import AedocParameter
from ..models.completion_state import CompletionState
from ..models.diagnostics import Diagnostic, DiagnosticCollector
from ..models.markup import Markup, MarkupApiLink, MarkupElement, MarkupText
from ..models.release_tag import ReleaseTag
from ..models.token import Token, TokenType
from ..parsers.link_parser import parse_link_tag
from ..parsers.markdownish import parse_markdownish_text
from ..parsers.tokenizer import Tokenizer
from ..resolution.deferred_resolver import DeferredResolver

if TYPE_CHECKING:
    from ..analysis.extractor_context import ExtractorContext
    from ..resolution.base_resolver import ReferenceResolver


class ApiDocumentation:
    """Parsed AEDoc for a single API item.

    The comment is parsed in the constructor (first pass). Links and
    {@inheritdoc} requests are queued, because validating them needs the
    release tags and content of other items that may not be parsed yet. The
    owner calls complete_initialization() once every item in the package has
    been constructed (second pass); after that the object is read-only.

    Problems in the comment never raise. They are reported as diagnostics and
    set failed_to_parse, so callers can suppress "collateral damage" errors
    (e.g. if "@public" was misspelled, don't also complain it is missing).
    """

    # (alphabetical order)
    ALLOWED_BLOCK_TAGS = (
        "@alpha",
        "@beta",
        "@betadocumentation",
        "@deprecated",
        "@eventproperty",
        "@internal",
        "@internalremarks",
        "@override",
        "@packagedocumentation",
        "@param",
        "@preapproved",
        "@public",
        "@readonly",
        "@remarks",
        "@returns",
        "@sealed",
        "@virtual",
    )

    ALLOWED_INLINE_TAGS = (
        "@inheritdoc",
        "@link",
    )

    _RELEASE_TAGS = {
        "@public": ReleaseTag.PUBLIC,
        "@internal": ReleaseTag.INTERNAL,
        "@alpha": ReleaseTag.ALPHA,
        "@beta": ReleaseTag.BETA,
    }

    _FLAG_TAGS = {
        "@preapproved": "preapproved",
        "@packagedocumentation": "is_package_documentation",
        "@readonly": "has_read_only_tag",
        "@betadocumentation": "is_doc_beta",
        "@eventproperty": "is_event_property",
        "@sealed": "is_sealed",
        "@virtual": "is_virtual",
        "@override": "is_override",
    }

    def __init__(
        self,
        original_aedoc: str,
        reference_resolver: "ReferenceResolver",
        context: "ExtractorContext",
        item_name: Optional[str] = None,
        error_logger: Optional[Callable[[str], None]] = None,
        warnings: Optional[List[str]] = None,
    ) -> None:
        """Parse an AEDoc comment.

        Args:
            original_aedoc: Comment text with the "/**" and "*/" removed,
                e.g. 'This is a summary. {@link a} @remarks These are remarks.'
            reference_resolver: Resolves references for {@link} and
                {@inheritdoc} during the deferred pass.
            context: Current package identity, config and shared channels.
            item_name: Name used to label diagnostics.
            error_logger: Optional callable receiving each error message.
            warnings: Sink for resolver warnings (defaults to context.warnings).
        """
        self.original_aedoc = original_aedoc
        self.reference_resolver = reference_resolver
        self.context = context
        self.warnings = warnings if warnings is not None else context.warnings
        self._error_logger = error_logger

        self.diagnostics = DiagnosticCollector(
            item_name=item_name, on_report=self._forward_diagnostic
        )
        self.failed_to_parse = False

        self.summary: List[MarkupElement] = []
        self.remarks: List[MarkupElement] = []
        self.returns_message: List[MarkupElement] = []
        self.deprecated_message: List[MarkupElement] = []
        self.parameters: Dict[str, AedocParameter] = {}

        self.release_tag = ReleaseTag.NONE
        self.preapproved = False
        self.is_package_documentation = False
        self.is_doc_beta = False
        self.is_event_property = False
        self.is_doc_inherited = False
        self.is_doc_inherited_deprecated = False
        self.has_read_only_tag = False
        self.is_sealed = False
        self.is_virtual = False
        self.is_override = False

        # Work for the deferred pass, drained in FIFO order
        self.incomplete_links: Deque[MarkupApiLink] = deque()
        self.incomplete_inheritdocs: Deque[Token] = deque()
        self.completion_state = CompletionState.UNVISITED

        self._parse_docs()

    @property
    def item_name(self) -> Optional[str]:
        return self.diagnostics.item_name

    @property
    def errors(self) -> List[str]:
        """Messages of every error reported for this comment so far."""
        return self.diagnostics.messages

    def report_error(self, message: str) -> None:
        """Report a problem with this comment and mark it as failed."""
        self.failed_to_parse = True
        self.diagnostics.report(message)

    def _forward_diagnostic(self, diagnostic: Diagnostic) -> None:
        self.context.report_error(diagnostic)
        if self._error_logger is not None:
            self._error_logger(diagnostic.message)

    def complete_initialization(self) -> None:
        """Run the deferred pass: validate links and resolve {@inheritdoc}.

        Only call this after every documentation object in the package has
        been constructed. Calling it again once complete does nothing.
        """
        DeferredResolver(self).complete()

    def _parse_docs(self) -> None:
        tokenizer = Tokenizer(self.original_aedoc, self.report_error)
        self.summary = self._parse_and_normalize(tokenizer)

        release_tag_count = 0

        while True:
            token = tokenizer.peek_token()
            if token is None:
                # If this documentation inherits docs from a deprecated API
                # item, it must either restate @deprecated or not use
                # @inheritdoc.
                if self.is_doc_inherited_deprecated and not self.deprecated_message:
                    self.report_error(
                        "A deprecation message must be included after the @deprecated tag."
                    )
                break

            if token.type == TokenType.BLOCK_TAG:
                tokenizer.get_token()
                tag = token.tag
                if tag == "@remarks":
                    self._check_inherit_doc_status(tag)
                    self.remarks = self._parse_and_normalize(tokenizer)
                elif tag == "@returns":
                    self._check_inherit_doc_status(tag)
                    self.returns_message = self._parse_and_normalize(tokenizer)
                elif tag == "@param":
                    self._check_inherit_doc_status(tag)
                    param = self._parse_param(tokenizer)
                    if param is not None:
                        self.parameters[param.name] = param
                elif tag == "@deprecated":
                    self.deprecated_message = self._parse_and_normalize(tokenizer)
                    if not self.deprecated_message:
                        self.report_error(
                            "deprecated description required after @deprecated AEDoc tag."
                        )
                elif tag == "@internalremarks":
                    # parse but discard
                    self._parse(tokenizer)
                elif tag in self._RELEASE_TAGS:
                    self.release_tag = self._RELEASE_TAGS[tag]
                    release_tag_count += 1
                elif tag in self._FLAG_TAGS:
                    setattr(self, self._FLAG_TAGS[tag], True)
                else:
                    self._report_bad_aedoc_tag(token)

            elif token.type == TokenType.INLINE_TAG:
                if token.tag in self.ALLOWED_INLINE_TAGS:
                    self._parse(tokenizer)
                else:
                    tokenizer.get_token()
                    self._report_bad_aedoc_tag(token)

            else:
                tokenizer.get_token()
                problem_text = token.text.strip()
                if problem_text:
                    max_length = self.context.config.max_problem_text_length
                    if len(problem_text) > max_length:
                        # Shorten "This is too long text" to "This is..."
                        problem_text = problem_text[: max_length - 3].strip() + "..."
                    self.report_error(f'Unexpected text in AEDoc comment: "{problem_text}"')

        if release_tag_count > 1:
            self.report_error("More than one release tag (@alpha, @beta, etc) was specified")

        if self.preapproved and self.release_tag != ReleaseTag.INTERNAL:
            self.report_error("The @preapproved tag may only be applied to @internal definitions")
            self.preapproved = False

        if self.is_sealed and self.is_virtual:
            self.report_error("The @sealed and @virtual tags may not be used together")

        if self.is_virtual and self.is_override:
            self.report_error("The @virtual and @override tags may not be used together")

    def _parse(self, tokenizer: Tokenizer) -> List[MarkupElement]:
        """Parse text and inline tags up to the next block tag."""
        markup_elements: List[MarkupElement] = []

        while True:
            token = tokenizer.peek_token()
            if token is None or token.type == TokenType.BLOCK_TAG:
                break

            if token.type == TokenType.INLINE_TAG:
                if token.tag == "@inheritdoc":
                    tokenizer.get_token()
                    if _has_content(markup_elements) or _has_content(self.summary):
                        self.report_error(
                            "A summary block is not allowed here,"
                            " because the @inheritdoc target provides the summary"
                        )
                    self.incomplete_inheritdocs.append(token)
                    self.is_doc_inherited = True
                elif token.tag == "@link":
                    tokenizer.get_token()
                    link = parse_link_tag(
                        token.text, self.report_error, self.context.parsed_package_name
                    )
                    if link is not None:
                        # Keep the link in place within the text
                        markup_elements.append(link)
                        if isinstance(link, MarkupApiLink):
                            self.incomplete_links.append(link)
                else:
                    break
            else:
                tokenizer.get_token()
                markup_elements.extend(parse_markdownish_text(token.text))

        return markup_elements

    def _parse_and_normalize(self, tokenizer: Tokenizer) -> List[MarkupElement]:
        markup_elements = self._parse(tokenizer)
        Markup.normalize(markup_elements)
        return markup_elements

    def _parse_param(self, tokenizer: Tokenizer) -> Optional[AedocParameter]:
        """Parse "name - description" following an @param tag."""
        token = tokenizer.peek_token()
        if token is None:
            self.report_error("The @param tag is missing a parameter description")
            return None
        if token.type != TokenType.TEXT:
            self.report_error(
                "The @param tag is missing the hyphen that delimits the parameter name"
                " and description"
            )
            return None
        tokenizer.get_token()

        hyphen_index = token.text.find("-")
        if hyphen_index < 0:
            self.report_error(
                "The @param tag is missing the hyphen that delimits the parameter name"
                " and description"
            )
            return None

        name = token.text[:hyphen_index].strip()
        comment = token.text[hyphen_index + 1 :]
        if not name:
            self.report_error("The @param tag is missing a parameter name")
            return None
        if not comment.strip():
            self.report_error("The @param tag is missing a parameter description")
            return None

        # The description may continue with more tokens, e.g. {@link}
        description: List[MarkupElement] = list(parse_markdownish_text(comment))
        description.extend(self._parse(tokenizer))
        Markup.normalize(description)

        return AedocParameter(name=name, description=description)

    def _report_bad_aedoc_tag(self, token: Token) -> None:
        supports_block = token.tag in self.ALLOWED_BLOCK_TAGS
        supports_inline = token.tag in self.ALLOWED_INLINE_TAGS

        if not supports_block and not supports_inline:
            self.report_error(f'The JSDoc tag "{token.tag}" is not supported by AEDoc')
        elif token.type == TokenType.INLINE_TAG and not supports_inline:
            self.report_error(
                f'The AEDoc tag "{token.tag}" must use the block tag notation'
                " (i.e. no curly braces)"
            )
        elif token.type == TokenType.BLOCK_TAG and not supports_block:
            self.report_error(
                f'The AEDoc tag "{token.tag}" must use the inline tag notation'
                " (i.e. with curly braces)"
            )
        else:
            self.report_error(f'The AEDoc tag "{token.tag}" is not supported in this context')

    def _check_inherit_doc_status(self, aedoc_tag: str) -> None:
        if self.is_doc_inherited:
            self.report_error(
                f"The {aedoc_tag} tag may not be used because this state is provided"
                " by the @inheritdoc target"
            )

    def to_dict(self) -> dict:
        """Serialize the documentation for JSON output."""
        return {
            "summary": Markup.to_dicts(self.summary),
            "remarks": Markup.to_dicts(self.remarks),
            "returns_message": Markup.to_dicts(self.returns_message),
            "deprecated_message": Markup.to_dicts(self.deprecated_message),
            "parameters": {
                name: param.to_dict() for name, param in self.parameters.items()
            },
            "release_tag": self.release_tag.value,
            "preapproved": self.preapproved,
            "is_package_documentation": self.is_package_documentation,
            "is_doc_beta": self.is_doc_beta,
            "is_event_property": self.is_event_property,
            "is_doc_inherited": self.is_doc_inherited,
            "is_doc_inherited_deprecated": self.is_doc_inherited_deprecated,
            "has_read_only_tag": self.has_read_only_tag,
            "is_sealed": self.is_sealed,
            "is_virtual": self.is_virtual,
            "is_override": self.is_override,
            "failed_to_parse": self.failed_to_parse,
            "errors": self.errors,
        }

    def __repr__(self) -> str:
        """Human-readable representation for debugging."""
        status = "failed" if self.failed_to_parse else "ok"
        return (
            f"ApiDocumentation({self.item_name!r}, release={self.release_tag.value}, "
            f"{status}, state={self.completion_state.value})"
        )


def _has_content(elements: List[MarkupElement]) -> bool:
    """True if elements hold anything other than whitespace text."""
    return any(
        not (isinstance(element, MarkupText) and not element.text.strip())
        for element in elements
    )
