"""Parser for textual API item references used by {@link} and {@inheritdoc}."""

import re
from dataclasses import dataclass
from typing import Callable, Optional

from ..models.api_reference import ApiItemReference


@dataclass(frozen=True)
class ApiDefinitionReference:
    """A parsed reference such as ``@scope/package:Export.member``.

    Supported notations:
    - ``@scopeName/packageName:exportName.memberName``
    - ``packageName:exportName``
    - ``exportName.memberName`` (local to the current package)
    - ``exportName``
    """

    scope_name: str = ""
    package_name: str = ""
    export_name: str = ""
    member_name: str = ""

    NOTATION_MESSAGE = (
        "An API item reference must use the notation: "
        '"@scopeName/packageName:exportName.memberName"'
    )

    _SCOPED_PACKAGE_RE = re.compile(r"^(@[a-z0-9\-_.~]+)/([a-z0-9\-_.~]+)$")
    _PACKAGE_RE = re.compile(r"^[a-z0-9\-_.~]+$")
    _IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][\w$]*$")
    _WHITESPACE_RE = re.compile(r"\s")

    @classmethod
    def create_from_string(
        cls, reference_text: str, report_error: Callable[[str], None]
    ) -> Optional["ApiDefinitionReference"]:
        """Parse a reference, reporting and returning None if it is malformed.

        Args:
            reference_text: The reference, e.g. '@scope/pkg:Guid.newGuid'.
            report_error: Called with a message describing the problem.

        Returns:
            The parsed reference, or None if an error was reported.
        """
        if not reference_text or cls._WHITESPACE_RE.search(reference_text):
            report_error(cls.NOTATION_MESSAGE)
            return None

        scope_name = ""
        package_name = ""
        item_part = reference_text

        if ":" in reference_text:
            package_part, item_part = reference_text.split(":", 1)
            scoped = cls._SCOPED_PACKAGE_RE.match(package_part)
            if scoped:
                scope_name, package_name = scoped.group(1), scoped.group(2)
            elif cls._PACKAGE_RE.match(package_part):
                package_name = package_part
            else:
                report_error(cls.NOTATION_MESSAGE)
                return None

        item_parts = item_part.split(".")
        if len(item_parts) > 2:
            report_error(
                "Currently API item references are limited to a maximum of two parts"
            )
            return None

        export_name = item_parts[0]
        member_name = item_parts[1] if len(item_parts) > 1 else ""

        if not cls._IDENTIFIER_RE.match(export_name):
            report_error("An API item reference must contain a valid export name")
            return None
        if len(item_parts) > 1 and not cls._IDENTIFIER_RE.match(member_name):
            report_error("An API item reference must contain a valid member name")
            return None

        return cls(
            scope_name=scope_name,
            package_name=package_name,
            export_name=export_name,
            member_name=member_name,
        )

    @classmethod
    def create_from_parts(cls, parts: ApiItemReference) -> "ApiDefinitionReference":
        """Build a reference from an already-split item key."""
        return cls(
            scope_name=parts.scope_name,
            package_name=parts.package_name,
            export_name=parts.export_name,
            member_name=parts.member_name,
        )

    def to_api_item_reference(self) -> ApiItemReference:
        """Return a fresh, mutable item key for this reference."""
        return ApiItemReference(
            scope_name=self.scope_name,
            package_name=self.package_name,
            export_name=self.export_name,
            member_name=self.member_name,
        )

    def __str__(self) -> str:
        return str(self.to_api_item_reference())
