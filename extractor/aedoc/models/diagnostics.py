"""Diagnostics reported while parsing and resolving AEDoc comments."""

import logging
from dataclasses import asdict, dataclass, field
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class Diagnostic:
    """A single problem found in an AEDoc comment.

    Attributes:
        message: Human-readable description of the problem.
        item_name: Name of the API item whose comment has the problem, if known.
    """

    message: str
    item_name: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)

    def __str__(self) -> str:
        if self.item_name:
            return f"{self.item_name}: {self.message}"
        return self.message


@dataclass
class DiagnosticCollector:
    """Accumulates diagnostics for one documentation object.

    Passed around as a bound ``report`` callable so collaborators such as the
    tokenizer and the reference parser can report without knowing about the
    documentation object. ``on_report`` forwards each diagnostic to an outer
    channel (e.g. the compilation-wide error log).
    """

    item_name: Optional[str] = None
    on_report: Optional[Callable[[Diagnostic], None]] = None
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def report(self, message: str) -> None:
        diagnostic = Diagnostic(message=message, item_name=self.item_name)
        self.diagnostics.append(diagnostic)
        logger.debug(f"AEDoc error: {diagnostic}")
        if self.on_report is not None:
            self.on_report(diagnostic)

    @property
    def messages(self) -> List[str]:
        return [diagnostic.message for diagnostic in self.diagnostics]
