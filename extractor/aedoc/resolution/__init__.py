"""Reference resolution and the deferred documentation pass."""

from .base_resolver import ReferenceResolver
from .deferred_resolver import DeferredResolver
from .package_resolver import PackageResolver

__all__ = ["ReferenceResolver", "DeferredResolver", "PackageResolver"]
