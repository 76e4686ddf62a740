"""NativeWind class-name heuristics.

Continuous Figma values (font size, weight, radius, spacing, padding) are
bucketed onto the Theme's ladders; colors resolve to palette names when they
match, else to arbitrary ``[#hex]`` values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .coercion import round_half_away
from .theme import DEFAULT_THEME, Ladder, Theme

# Figma textAlignHorizontal → class. Anything else (LEFT, JUSTIFIED, ...) is text-left.
TEXT_ALIGN_CLASSES = {
    "CENTER": "text-center",
    "RIGHT": "text-right",
}

# counterAxisAlignItems → items-*
ALIGN_ITEMS_CLASSES = {
    "MIN": "items-start",
    "MAX": "items-end",
    "CENTER": "items-center",
    "BASELINE": "items-baseline",
}

# primaryAxisAlignItems → justify-*
JUSTIFY_CONTENT_CLASSES = {
    "MIN": "justify-start",
    "MAX": "justify-end",
    "CENTER": "justify-center",
    "SPACE_BETWEEN": "justify-between",
}

AUTO_LAYOUT_MODES = {"HORIZONTAL", "VERTICAL"}


def bucket(value: float, ladder: Ladder, overflow: Optional[str] = None) -> Optional[str]:
    """First ladder token whose threshold ``value`` does not exceed, else ``overflow``."""
    for token, threshold in ladder:
        if value <= threshold:
            return token
    return overflow


def format_number(value: float) -> str:
    """Render a number the way JavaScript prints it (20.0 → "20")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def color_class(prefix: str, hex_color: str, theme: Theme = DEFAULT_THEME) -> str:
    token = theme.color_token(hex_color)
    if token:
        return f"{prefix}-{token}"
    return f"{prefix}-[{hex_color.lower()}]"


# =====================================================================
# Text
# =====================================================================


def font_size_class(font_size: float, theme: Theme = DEFAULT_THEME) -> str:
    return "text-" + bucket(font_size, theme.font_sizes, theme.font_size_overflow)


def font_weight_class(font_weight: float, theme: Theme = DEFAULT_THEME) -> str:
    return "font-" + bucket(font_weight, theme.font_weights, theme.font_weight_overflow)


def text_class_name(
    font_size: float,
    font_weight: float,
    text_align: str,
    color: Optional[str] = None,
    theme: Theme = DEFAULT_THEME,
) -> str:
    """Size, weight, alignment and (non-default) color classes, in that order."""
    classes = [
        font_size_class(font_size, theme),
        font_weight_class(font_weight, theme),
        TEXT_ALIGN_CLASSES.get(text_align, "text-left"),
    ]
    if color and color.upper() != theme.default_text_color.upper():
        classes.append(color_class("text", color, theme))
    return " ".join(classes)


# =====================================================================
# Containers
# =====================================================================


@dataclass(frozen=True)
class ContainerStyle:
    """Coerced container properties feeding ``container_class_name``."""
    width: float
    height: float
    background: Optional[str] = None
    corner_radius: Optional[float] = None
    layout_mode: Optional[str] = None
    counter_axis_align: Optional[str] = None
    primary_axis_align: Optional[str] = None
    item_spacing: float = 0
    padding_top: float = 0
    padding_right: float = 0
    padding_bottom: float = 0
    padding_left: float = 0

    @property
    def has_auto_layout(self) -> bool:
        return self.layout_mode in AUTO_LAYOUT_MODES


def size_classes(width: float, height: float) -> List[str]:
    return [f"w-[{round_half_away(width)}px]", f"h-[{round_half_away(height)}px]"]


def radius_class(radius: float, width: float, height: float, theme: Theme = DEFAULT_THEME) -> Optional[str]:
    if radius <= 0:
        return None
    token = bucket(radius, theme.radii)
    if token:
        return token
    if radius >= min(width, height) / 2:
        return "rounded-full"
    return f"rounded-[{format_number(radius)}px]"


def spacing_class(prefix: str, value: float, ladder: Ladder) -> Optional[str]:
    """``{prefix}-{token}`` from the ladder, ``{prefix}-[Npx]`` above it, None for 0."""
    if value <= 0:
        return None
    token = bucket(value, ladder)
    if token:
        return f"{prefix}-{token}"
    return f"{prefix}-[{format_number(value)}px]"


def padding_classes(style: ContainerStyle, theme: Theme = DEFAULT_THEME) -> List[str]:
    top, right = style.padding_top, style.padding_right
    bottom, left = style.padding_bottom, style.padding_left

    # All sides equal
    if top == right == bottom == left:
        uniform = spacing_class("p", top, theme.spacing)
        return [uniform] if uniform else []

    sides = (("pt", top), ("pr", right), ("pb", bottom), ("pl", left))
    return [
        cls for cls in (spacing_class(prefix, value, theme.side_padding) for prefix, value in sides)
        if cls
    ]


def container_class_name(style: ContainerStyle, theme: Theme = DEFAULT_THEME) -> str:
    """Size, background, radius and (with auto-layout) flex/gap/padding classes."""
    classes = size_classes(style.width, style.height)

    if style.background:
        classes.append(color_class("bg", style.background, theme))

    if style.corner_radius is not None:
        radius = radius_class(style.corner_radius, style.width, style.height, theme)
        if radius:
            classes.append(radius)

    if style.has_auto_layout:
        classes.append("flex-row" if style.layout_mode == "HORIZONTAL" else "flex-col")

        align_items = ALIGN_ITEMS_CLASSES.get(style.counter_axis_align)
        justify_content = JUSTIFY_CONTENT_CLASSES.get(style.primary_axis_align)
        if align_items:
            classes.append(align_items)
        if justify_content:
            classes.append(justify_content)

        gap = spacing_class("gap", style.item_spacing, theme.spacing)
        if gap:
            classes.append(gap)

        classes.extend(padding_classes(style, theme))

    return " ".join(classes)
