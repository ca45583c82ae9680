"""Compilation-wide context shared by every documentation object."""

import re
from typing import Callable, List, Optional, Tuple

from ..models.api_item import ApiPackage
from ..models.diagnostics import Diagnostic
from ..utils.config import ExtractorConfig


class ExtractorContext:
    """Identity of the package being documented plus shared channels.

    Attributes:
        package: The package whose items are being documented.
        warnings: Messages appended by the reference resolver during the
            deferred pass. Shared by every documentation object.
        errors: Every diagnostic reported by any documentation object.
        config: Extraction settings.
    """

    _PACKAGE_NAME_RE = re.compile(r"^(?:(@[a-z0-9\-_.~]+)/)?([a-z0-9\-_.~]+)$")

    def __init__(
        self,
        package_name: str,
        config: Optional[ExtractorConfig] = None,
        error_logger: Optional[Callable[[Diagnostic], None]] = None,
    ) -> None:
        """Create a context for a package.

        Args:
            package_name: Full package name, e.g. '@scope/pkg'. May be '' for
                a standalone comment that is not part of a package.
            config: Extraction settings (defaults to ExtractorConfig.from_env()).
            error_logger: Optional callable receiving every diagnostic.

        Raises:
            ValueError: If package_name is not a valid package name.
        """
        self.parsed_package_name: Optional[Tuple[str, str]] = (
            self.parse_package_name(package_name) if package_name else None
        )
        self.package = ApiPackage(name=package_name)
        self.config = config or ExtractorConfig.from_env()
        self.warnings: List[str] = []
        self.errors: List[Diagnostic] = []
        self._error_logger = error_logger

    @property
    def package_name(self) -> str:
        return self.package.name

    @classmethod
    def parse_package_name(cls, package_name: str) -> Tuple[str, str]:
        """Split a package name into (scope, unscoped name).

        Examples:
            '@microsoft/sp-core-library' -> ('@microsoft', 'sp-core-library')
            'lodash' -> ('', 'lodash')

        Raises:
            ValueError: If the name is not a valid package name.
        """
        match = cls._PACKAGE_NAME_RE.match(package_name)
        if not match:
            raise ValueError(f"Invalid package name: {package_name!r}")
        return match.group(1) or "", match.group(2)

    def report_error(self, diagnostic: Diagnostic) -> None:
        """Record a diagnostic from any documentation object."""
        self.errors.append(diagnostic)
        if self._error_logger is not None:
            self._error_logger(diagnostic)
