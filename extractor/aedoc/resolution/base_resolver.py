"""Abstract base class for resolving API item references."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.api_item import ApiPackage, ResolvedApiItem
from ..parsers.api_definition_reference import ApiDefinitionReference


class ReferenceResolver(ABC):
    """
    Interface used by ApiDocumentation to look up the target of a reference.

    Keeping this abstract lets {@inheritdoc} copy documentation without
    knowing whether it comes from an item in the current package or from
    previously extracted API data.
    """

    @abstractmethod
    def resolve(
        self,
        reference: ApiDefinitionReference,
        package: ApiPackage,
        warnings: List[str],
    ) -> Optional[ResolvedApiItem]:
        """
        Resolve a reference to an API item.

        Parameters
        ----------
        reference : ApiDefinitionReference
            The parsed reference. An empty package name means the current
            package.
        package : ApiPackage
            The package being documented.
        warnings : List[str]
            Sink for a message when a qualified reference cannot be found.

        Returns
        -------
        Optional[ResolvedApiItem]
            The resolved item, or None. A None result for a qualified
            reference has always been reported to ``warnings``; an unqualified
            miss is silent so that callers can fall back.
        """
        pass
