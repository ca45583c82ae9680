"""Normalized key identifying an API item across packages."""

from dataclasses import asdict, dataclass


@dataclass
class ApiItemReference:
    """A fully split reference to an API item.

    Example: "@microsoft/sp-core-library:Guid.newGuid" is stored as
    scope_name='@microsoft', package_name='sp-core-library',
    export_name='Guid', member_name='newGuid'.

    Attributes:
        scope_name: NPM-style scope including the "@", or '' if unscoped.
        package_name: Unscoped package name, or '' if the reference is local.
        export_name: Name of the exported item.
        member_name: Name of a member of the export, or ''.
    """

    scope_name: str = ""
    package_name: str = ""
    export_name: str = ""
    member_name: str = ""

    @property
    def full_package_name(self) -> str:
        """Package name with its scope prefix, e.g. '@scope/pkg'."""
        if self.scope_name:
            return f"{self.scope_name}/{self.package_name}"
        return self.package_name

    def to_dict(self) -> dict[str, str]:
        """Serialize to a JSON-compatible dictionary."""
        return asdict(self)

    def __str__(self) -> str:
        text = self.export_name
        if self.member_name:
            text += f".{self.member_name}"
        if self.package_name:
            text = f"{self.full_package_name}:{text}"
        return text
