"""Design constants: palette and the bucket ladders used by the styling heuristics.

A ``Theme`` is immutable and passed to ``NodeConverter`` at construction, so
tests (and projects with their own design system) can swap ladders without
touching module state.

Ladders are ordered ``(token, threshold)`` pairs: a value maps to the first
token whose threshold it does not exceed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

Ladder = Tuple[Tuple[str, float], ...]


def _frozen(mapping: Dict[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping))


DEFAULT_COLORS = _frozen({
    "dark": "#1E1E1E",
    "white": "#FAFAF8",
    "blue": "#007AFF",
    "gray": "#8B8383",
    "light-gray": "#D9D9D9",
    "blue-gray": "#94A3B8",
    "green": "#0CEC80",
})

FONT_SIZE_LADDER: Ladder = (
    ("xs", 10),
    ("sm", 12),
    ("base", 14),
    ("md", 16),
    ("lg", 18),
    ("xl", 20),
    ("2xl", 22),
    ("3xl", 24),
)

FONT_WEIGHT_LADDER: Ladder = (
    ("light", 300),
    ("normal", 400),
    ("medium", 500),
    ("semibold", 600),
    ("bold", 700),
)

RADIUS_LADDER: Ladder = (
    ("rounded-sm", 2),
    ("rounded", 4),
    ("rounded-md", 6),
    ("rounded-lg", 8),
    ("rounded-xl", 12),
    ("rounded-2xl", 16),
)

# gap-* and uniform p-*
SPACING_LADDER: Ladder = (
    ("0.5", 2),
    ("1", 4),
    ("1.5", 6),
    ("2", 8),
    ("3", 12),
    ("4", 16),
    ("5", 20),
    ("6", 24),
)

# pt-* / pr-* / pb-* / pl-*
SIDE_PADDING_LADDER: Ladder = (
    ("1", 4),
    ("2", 8),
    ("3", 12),
    ("4", 16),
)


@dataclass(frozen=True)
class Theme:
    colors: Mapping[str, str] = field(default_factory=lambda: DEFAULT_COLORS)
    font_sizes: Ladder = FONT_SIZE_LADDER
    font_size_overflow: str = "4xl"
    font_weights: Ladder = FONT_WEIGHT_LADDER
    font_weight_overflow: str = "black"
    radii: Ladder = RADIUS_LADDER
    spacing: Ladder = SPACING_LADDER
    side_padding: Ladder = SIDE_PADDING_LADDER
    base_font_size: float = 14
    default_text_color: str = "#000000"
    icon_size: int = 24

    def __post_init__(self):
        object.__setattr__(self, "colors", _frozen(dict(self.colors)))

    def color_token(self, hex_color: str) -> Optional[str]:
        """Palette name for a hex color (case-insensitive), or None."""
        return self._color_reverse_map().get(hex_color.upper())

    def _color_reverse_map(self) -> Dict[str, str]:
        reverse: Dict[str, str] = {}
        for name, hex_val in self.colors.items():
            if isinstance(hex_val, str):
                reverse[hex_val.upper()] = name
        return reverse


DEFAULT_THEME = Theme()
