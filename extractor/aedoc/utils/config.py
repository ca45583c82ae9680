"""Configuration for AEDoc extraction."""

import os
from dataclasses import dataclass, field
from typing import FrozenSet, Mapping, Optional

from ..models.release_tag import ReleaseTag

ENFORCE_INHERITED_DEPRECATION_ENV = "AEDOC_ENFORCE_INHERITED_DEPRECATION"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class ExtractorConfig:
    """Settings that tune how AEDoc comments are validated.

    Attributes:
        max_problem_text_length: Unexpected text quoted in an error message is
            shortened to this many characters.
        enforce_inherited_deprecation: Re-check after {@inheritdoc} completes
            that an item inheriting from a deprecated target restates
            @deprecated. Off by default: the check normally only runs at the
            end of the first pass, before any inheritance is known.
        restricted_link_tags: Release tags that a {@link} target must not have,
            because such items are left out of the generated documentation.
    """

    max_problem_text_length: int = 40
    enforce_inherited_deprecation: bool = False
    restricted_link_tags: FrozenSet[ReleaseTag] = field(
        default_factory=lambda: frozenset({ReleaseTag.INTERNAL, ReleaseTag.ALPHA})
    )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ExtractorConfig":
        """Build a config from defaults overridden by environment variables.

        Args:
            environ: Mapping to read from. If None, uses os.environ.
        """
        if environ is None:
            environ = os.environ
        config = cls()
        value = environ.get(ENFORCE_INHERITED_DEPRECATION_ENV)
        if value is not None:
            config.enforce_inherited_deprecation = value.strip().lower() in _TRUTHY
        return config
