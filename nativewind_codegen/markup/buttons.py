"""Button component → TSX markup.

Button components follow the naming convention ``Button/<Variant>/<Size>``,
e.g. ``Button/Rounded/Small`` → ``<RoundedButton size="small">Go</RoundedButton>``.
Anything else becomes the default TouchableOpacity template. In both cases the
label is the first text found depth-first in the converted children.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from .model import MarkupKind, MarkupNode

BUTTON_KEYWORD = "Button"
NAME_SEPARATOR = "/"

DEFAULT_BUTTON_TEMPLATE = (
    '<TouchableOpacity className="items-center justify-center px-4 py-3 bg-blue rounded-md">\n'
    '  <Text className="text-white text-base font-medium">{text}</Text>\n'
    '</TouchableOpacity>'
)


def extract_children_text(children: Sequence[MarkupNode]) -> str:
    """First non-empty Text content, depth-first, earliest sibling wins."""
    for child in children:
        if child.kind is MarkupKind.TEXT and child.text:
            return child.text
        if child.children:
            nested = extract_children_text(child.children)
            if nested:
                return nested
    return ""


def parse_button_markup(component_name: str, children: Sequence[MarkupNode]) -> Tuple[MarkupKind, str]:
    """Build the literal markup for a button component.

    Returns:
        (kind of the rendered root element, markup string)
    """
    text = extract_children_text(children)
    # Segments are compared as-is: " Button / Rounded / Small" is not a button shape
    parts = component_name.split(NAME_SEPARATOR)

    if len(parts) != 3 or parts[0] != BUTTON_KEYWORD:
        return MarkupKind.INTERACTIVE, DEFAULT_BUTTON_TEMPLATE.format(text=text)

    _, variant, size = parts
    element = variant[:1].upper() + variant[1:].lower() + BUTTON_KEYWORD
    return MarkupKind.PREFORMATTED, f'<{element} size="{size.lower()}">{text}</{element}>'
