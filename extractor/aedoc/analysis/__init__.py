"""Package-wide extraction: context and the two-pass collector."""

from .collector import DocumentationCollector
from .extractor_context import ExtractorContext

__all__ = ["DocumentationCollector", "ExtractorContext"]
