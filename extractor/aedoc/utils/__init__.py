"""Utility modules for configuration and manifest loading."""

from .config import ExtractorConfig

__all__ = ["ExtractorConfig"]
