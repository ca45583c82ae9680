"""Data models for API items and the documentation resolved from them."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional

from .markup import (
    Markup,
    MarkupApiLink,
    MarkupElement,
    MarkupHtmlTag,
    MarkupParagraph,
    MarkupText,
    MarkupWebLink,
    LinkStatus,
)
from .api_reference import ApiItemReference
from .release_tag import ReleaseTag

if TYPE_CHECKING:
    from ..documentation.api_documentation import ApiDocumentation


class ApiItemKind(Enum):
    """Kind of declaration an AEDoc comment is attached to."""

    CLASS = "class"
    CONSTRUCTOR = "constructor"
    ENUM = "enum"
    ENUM_VALUE = "enum-value"
    FUNCTION = "function"
    INTERFACE = "interface"
    METHOD = "method"
    NAMESPACE = "namespace"
    PACKAGE = "package"
    PROPERTY = "property"
    TYPE_ALIAS = "type-alias"
    VARIABLE = "variable"

    @property
    def is_function_like(self) -> bool:
        """True for kinds that carry parameters and a return value."""
        return self in (ApiItemKind.FUNCTION, ApiItemKind.METHOD, ApiItemKind.CONSTRUCTOR)


@dataclass
class AedocParameter:
    """AEDoc description of a single function parameter."""

    name: str
    description: List[MarkupElement] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"name": self.name, "description": Markup.to_dicts(self.description)}


@dataclass
class ApiItem:
    """A declaration in the package being documented.

    Attributes:
        name: Declared name (export name, or member name for members).
        kind: Declaration kind.
        documentation: Parsed AEDoc for this item.
        members: Child items keyed by name (class/interface members).
    """

    name: str
    kind: ApiItemKind
    documentation: "ApiDocumentation"
    members: Dict[str, "ApiItem"] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "kind": self.kind.value,
            "documentation": self.documentation.to_dict(),
            "members": [member.to_dict() for member in self.members.values()],
        }

    def __repr__(self) -> str:
        return f"ApiItem({self.kind.value} '{self.name}', members={len(self.members)})"


@dataclass
class ApiPackage:
    """The package whose items are being documented.

    Attributes:
        name: Full package name, e.g. '@scope/pkg'.
        exports: Top-level items keyed by export name.
    """

    name: str
    exports: Dict[str, ApiItem] = field(default_factory=dict)

    def find(self, export_name: str, member_name: str = "") -> Optional[ApiItem]:
        """Look up an export, or one of its members."""
        item = self.exports.get(export_name)
        if item is None or not member_name:
            return item
        return item.members.get(member_name)

    def iter_items(self):
        """Yield every export followed by its members, in declaration order."""
        for item in self.exports.values():
            yield item
            yield from item.members.values()


def _element_from_dict(data: dict) -> MarkupElement:
    kind = data.get("kind")
    if kind == "text":
        return MarkupText(data["text"])
    if kind == "paragraph":
        return Markup.PARAGRAPH
    if kind == "html-tag":
        return MarkupHtmlTag(data["token"])
    if kind == "web-link":
        return MarkupWebLink(
            elements=[MarkupText(e["text"]) for e in data.get("elements", [])],
            target_url=data["target_url"],
        )
    if kind == "api-link":
        return MarkupApiLink(
            elements=[MarkupText(e["text"]) for e in data.get("elements", [])],
            target=ApiItemReference(**data["target"]),
            status=LinkStatus(data.get("status", LinkStatus.RESOLVED.value)),
        )
    raise ValueError(f"Unknown markup element kind: {kind!r}")


def _elements_from_dict(data: Optional[List[dict]]) -> List[MarkupElement]:
    return [_element_from_dict(element) for element in data or []]


@dataclass
class ResolvedApiItem:
    """Documentation of an API item that a reference resolved to.

    Local items keep a back-reference to their ApiDocumentation so its
    deferred pass can be forced before the content is read. Items loaded from
    external API data have documentation=None and are already complete.
    """

    kind: ApiItemKind
    release_tag: ReleaseTag = ReleaseTag.NONE
    summary: List[MarkupElement] = field(default_factory=list)
    remarks: List[MarkupElement] = field(default_factory=list)
    deprecated_message: List[MarkupElement] = field(default_factory=list)
    returns_message: List[MarkupElement] = field(default_factory=list)
    parameters: Dict[str, AedocParameter] = field(default_factory=dict)
    documentation: Optional["ApiDocumentation"] = None

    @staticmethod
    def create_from_api_item(item: ApiItem) -> "ResolvedApiItem":
        """Wrap a local item, reading its documentation fields."""
        resolved = ResolvedApiItem(kind=item.kind, documentation=item.documentation)
        resolved.refresh()
        return resolved

    def refresh(self) -> None:
        """Re-read the fields from the backing documentation, if any.

        The backing documentation may replace its fields while completing
        (e.g. its own @inheritdoc), so this runs after forcing completion.
        """
        doc = self.documentation
        if doc is None:
            return
        self.release_tag = doc.release_tag
        self.summary = doc.summary
        self.remarks = doc.remarks
        self.deprecated_message = doc.deprecated_message
        self.returns_message = doc.returns_message
        self.parameters = doc.parameters

    @staticmethod
    def from_dict(data: dict) -> "ResolvedApiItem":
        """Create a ResolvedApiItem from external API JSON data."""
        return ResolvedApiItem(
            kind=ApiItemKind(data["kind"]),
            release_tag=ReleaseTag(data.get("release_tag", ReleaseTag.NONE.value)),
            summary=_elements_from_dict(data.get("summary")),
            remarks=_elements_from_dict(data.get("remarks")),
            deprecated_message=_elements_from_dict(data.get("deprecated_message")),
            returns_message=_elements_from_dict(data.get("returns_message")),
            parameters={
                name: AedocParameter(
                    name=name,
                    description=_elements_from_dict(param.get("description")),
                )
                for name, param in data.get("parameters", {}).items()
            },
        )
