"""Release tag classification for API items."""

from enum import Enum


class ReleaseTag(Enum):
    """Support/visibility stage asserted by an AEDoc release tag.

    NONE means no release tag was specified.
    """

    NONE = "none"
    INTERNAL = "internal"
    ALPHA = "alpha"
    BETA = "beta"
    PUBLIC = "public"
