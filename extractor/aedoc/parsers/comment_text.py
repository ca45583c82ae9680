"""Helpers for turning a raw ``/** ... */`` comment into AEDoc text."""

import re

_LEADING_STAR_RE = re.compile(r"^[ \t]*\*(?: |(?=\S)|$)?")


def extract_comment_body(comment: str) -> str:
    """Strip the comment delimiters and the leading "*" gutter from each line.

    Text that is not wrapped in ``/** */`` is returned unchanged, so callers can
    pass either a raw comment or an already-extracted body.

    Examples
    --------
    >>> extract_comment_body("/**\\n * Adds numbers.\\n * @public\\n */")
    'Adds numbers.\\n@public'
    """
    stripped = comment.strip()
    if not (stripped.startswith("/**") and stripped.endswith("*/")):
        return comment

    body = stripped[3:-2]
    lines = [_LEADING_STAR_RE.sub("", line, count=1) for line in body.split("\n")]
    return "\n".join(lines).strip()
