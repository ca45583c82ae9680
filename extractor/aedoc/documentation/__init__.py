"""AEDoc documentation objects."""

from .api_documentation import ApiDocumentation

__all__ = ["ApiDocumentation"]
