"""Parser for the body of an AEDoc {@link} inline tag."""

import re
from typing import Callable, Optional, Tuple, Union

from ..models.markup import Markup, MarkupApiLink, MarkupWebLink
from .api_definition_reference import ApiDefinitionReference

# Used to validate the display text for an {@link} tag. The display text can
# contain any characters except for the AEDoc delimiters "@", "|", "{", "}".
DISPLAY_TEXT_BAD_CHARACTER_RE = re.compile(r"[@|{}]")

# Distinguishes a URL ("http://", "https://", ...) from an API item reference
# such as "@microsoft/sp-core-library:Guid.newGuid" or "Guid".
HREF_RE = re.compile(r"^[a-z]+://")


def parse_link_tag(
    text: str,
    report_error: Callable[[str], None],
    package_name: Optional[Tuple[str, str]],
) -> Optional[Union[MarkupWebLink, MarkupApiLink]]:
    """Create a link element from the text inside an {@link} tag.

    The format is ``{@link URL or API item reference | display text}``, where
    the pipe is only needed when display text is given. Examples::

        {@link http://microsoft.com | microsoft home}
        {@link http://microsoft.com}
        {@link @microsoft/sp-core-library:Guid.newGuid | new Guid Object}
        {@link Guid.newGuid}

    Args:
        text: Content of the tag after "@link".
        report_error: Called with a message if the tag is malformed.
        package_name: (scope, unscoped name) of the current package, used when
            an API reference omits its package. None if unknown.

    Returns:
        A web link or an incomplete API link, or None if an error was reported.

    Raises:
        RuntimeError: If an API reference omits its package and no current
            package is known.
    """
    if not text:
        report_error("The {@link} tag must include a URL or API item reference")
        return None

    pipe_split_content = [value.strip() for value in text.split("|")]
    if len(pipe_split_content) > 2:
        report_error('The {@link} tag contains more than one pipe character ("|")')
        return None

    address_part = pipe_split_content[0]
    display_text_part = pipe_split_content[1] if len(pipe_split_content) > 1 else ""

    if display_text_part:
        match = DISPLAY_TEXT_BAD_CHARACTER_RE.search(display_text_part)
        if match:
            report_error(
                "The {@link} tag's display text contains an unsupported"
                f' character: "{match.group(0)}"'
            )
            return None
        display_text_elements = Markup.create_text_elements(display_text_part)
    else:
        display_text_elements = Markup.create_text_elements(address_part)

    if HREF_RE.match(address_part):
        if " " in address_part:
            report_error(
                "The {@link} tag contains additional spaces after the URL;"
                " if the URL contains spaces, encode them using %20;"
                ' for display text, use a pipe delimiter ("|")'
            )
            return None
        return Markup.create_web_link(display_text_elements, address_part)

    reference = ApiDefinitionReference.create_from_string(address_part, report_error)
    if reference is None:
        return None

    target = reference.to_api_item_reference()
    if not target.package_name:
        if not package_name:
            raise RuntimeError("Unable to resolve API reference without a package name")
        # Unqualified references point into the current package
        target.scope_name, target.package_name = package_name

    return Markup.create_api_link(display_text_elements, target)
