"""Figma paint helpers: fills and colors."""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional

logger = logging.getLogger("nativewind_codegen.integrations.figma")


def figma_color_to_hex(color: Dict) -> Optional[str]:
    """Convert Figma RGB float dict {r,g,b} to lowercase #rrggbb (alpha dropped).

    Channels are clamped to 0..1; a missing channel counts as 0. Returns None
    when a channel is not a finite number.
    """
    channels = [_channel_byte(color.get(key, 0)) for key in ("r", "g", "b")]
    if None in channels:
        logger.debug(f"Unusable color {color!r} ignored")
        return None
    r, g, b = channels
    return f"#{r:02x}{g:02x}{b:02x}"


def solid_fill_hex(fills: Any) -> Optional[str]:
    """Hex color of the first visible SOLID fill, or None when transparent.

    ``fills`` may be a list of paints, ``figma.mixed`` or missing; anything
    that is not a list is treated as transparent.
    """
    if not isinstance(fills, (list, tuple)):
        return None

    for fill in fills:
        if not isinstance(fill, dict):
            continue
        if fill.get("type") != "SOLID" or not fill.get("visible", True):
            continue
        color = fill.get("color")
        if not isinstance(color, dict):
            continue
        alpha, opacity = color.get("a", 1.0), fill.get("opacity", 1.0)
        if not isinstance(alpha, (int, float)):
            alpha = 1.0
        if not isinstance(opacity, (int, float)):
            opacity = 1.0
        if alpha == 0 or opacity == 0:
            return None
        return figma_color_to_hex(color)

    return None


def _channel_byte(value: Any) -> Optional[int]:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return None
    try:
        value = float(value)
    except OverflowError:
        return None
    if not math.isfinite(value):
        return None
    return round(min(max(value, 0.0), 1.0) * 255)
