"""Reference resolver over the current package and external API data."""

import logging
from typing import Dict, List, Optional

from ..models.api_item import ApiPackage, ResolvedApiItem
from ..parsers.api_definition_reference import ApiDefinitionReference
from .base_resolver import ReferenceResolver

logger = logging.getLogger(__name__)


class PackageResolver(ReferenceResolver):
    """
    Resolves references against items of the package being documented, and
    against other packages described by previously extracted API data.

    External packages are keyed by full package name ('@scope/pkg'); each
    maps an item key ('Export' or 'Export.member') to a ResolvedApiItem.
    """

    def __init__(
        self, external_packages: Optional[Dict[str, Dict[str, ResolvedApiItem]]] = None
    ) -> None:
        self.external_packages: Dict[str, Dict[str, ResolvedApiItem]] = (
            external_packages or {}
        )

    def add_external_package(
        self, package_name: str, items: Dict[str, ResolvedApiItem]
    ) -> None:
        """Register API data for another package."""
        self.external_packages[package_name] = items

    def resolve(
        self,
        reference: ApiDefinitionReference,
        package: ApiPackage,
        warnings: List[str],
    ) -> Optional[ResolvedApiItem]:
        item_reference = reference.to_api_item_reference()
        full_package_name = item_reference.full_package_name

        if not full_package_name or full_package_name == package.name:
            item = package.find(reference.export_name, reference.member_name)
            if item is not None:
                return ResolvedApiItem.create_from_api_item(item)
            if full_package_name:
                self._warn(warnings, f'Unable to resolve reference "{item_reference}"')
            return None

        external_items = self.external_packages.get(full_package_name)
        if external_items is None:
            self._warn(
                warnings,
                f'Unable to find referenced package "{full_package_name}"'
                f' for reference "{item_reference}"',
            )
            return None

        key = reference.export_name
        if reference.member_name:
            key += f".{reference.member_name}"
        resolved = external_items.get(key)
        if resolved is None:
            self._warn(warnings, f'Unable to resolve reference "{item_reference}"')
        return resolved

    @staticmethod
    def _warn(warnings: List[str], message: str) -> None:
        logger.warning(message)
        warnings.append(message)
