"""Parser for the markdown-ish subset allowed in AEDoc text.

"Markdown-ish" text can have:
- paragraphs delimited using blank lines
- HTML opening and closing tags, passed through as opaque tag elements
- backslash as an escape character

This is not a Markdown engine. Malformed HTML is never an error;
anything that does not look like a tag is plain text.
"""

import re
from typing import List

from ..models.markup import Markup, MarkupElement

# Matches one of:
# - an escape sequence, i.e. backslash followed by a non-alphabetical character
# - an HTML opening tag such as `<td>` or `<img src="example.gif" />`,
#   with single- or double-quoted attribute values
# - an HTML closing tag such as `</td>`
#
# Matching left to right means `\<td>` is an escaped "<", whereas `\\<td>` is an
# escaped backslash followed by an HTML element.
HTML_TAG_RE = re.compile(
    r"\\[^a-zA-Z\s]"
    r"|<[\w\-]+(?:\s+[\w\-]+\s*=\s*(?:\"[^\"]*\"|'[^']*'))*\s*/?>"
    r"|</[\w\-]+>"
)

PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")


def parse_markdownish_text(text: str) -> List[MarkupElement]:
    """Convert a run of plain text into markup elements.

    A paragraph break is emitted between paragraphs, never before the first
    or after the last. Escaped characters are folded into the surrounding text
    run; text accumulated before an HTML tag is flushed ahead of it.

    Args:
        text: Plain text taken from a text token.

    Returns:
        List of text, HTML tag and paragraph elements, in document order.
    """
    result: List[MarkupElement] = []
    if not text:
        return result

    for paragraph in PARAGRAPH_SPLIT_RE.split(text):
        if result:
            result.append(Markup.PARAGRAPH)

        last_match_end = 0
        accumulated_text = ""

        for match in HTML_TAG_RE.finditer(paragraph):
            accumulated_text += paragraph[last_match_end : match.start()]

            matched_text = match.group(0)
            if matched_text[0] == "\\":
                # Keep the escaped character, drop the backslash
                accumulated_text += matched_text[1]
            else:
                result.extend(Markup.create_text_elements(accumulated_text))
                accumulated_text = ""
                result.append(Markup.create_html_tag(matched_text))

            last_match_end = match.end()

        accumulated_text += paragraph[last_match_end:]
        result.extend(Markup.create_text_elements(accumulated_text))

    return result
