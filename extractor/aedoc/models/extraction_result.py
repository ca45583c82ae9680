"""ExtractionResult data model for a fully documented package."""

from dataclasses import dataclass, field
from typing import List

from .api_item import ApiItem
from .diagnostics import Diagnostic


@dataclass
class ExtractionResult:
    """Documentation for every item of a package after both passes.

    Attributes:
        package_name: Full name of the documented package.
        items: Top-level items (exports), each carrying its members.
        diagnostics: Every error reported for any item, in report order.
        warnings: Messages from the reference resolver.
    """

    package_name: str
    items: List[ApiItem]
    diagnostics: List[Diagnostic] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def iter_all_items(self):
        """Yield every item, members included."""
        for item in self.items:
            yield item
            yield from item.members.values()

    @property
    def total_items(self) -> int:
        return sum(1 for _ in self.iter_all_items())

    def get_failed_items(self) -> List[ApiItem]:
        """Items whose documentation reported at least one error."""
        return [
            item for item in self.iter_all_items() if item.documentation.failed_to_parse
        ]

    def to_dict(self) -> dict:
        """Serialize the result for JSON output."""
        return {
            "package_name": self.package_name,
            "total_items": self.total_items,
            "failed_items": len(self.get_failed_items()),
            "items": [item.to_dict() for item in self.items],
            "diagnostics": [diagnostic.to_dict() for diagnostic in self.diagnostics],
            "warnings": list(self.warnings),
        }

    def __repr__(self) -> str:
        """Human-readable representation for debugging."""
        return (
            f"ExtractionResult(package={self.package_name!r}, "
            f"items={self.total_items}, errors={len(self.diagnostics)}, "
            f"warnings={len(self.warnings)})"
        )
