"""Code generator runtime settings: tunable parameters for conversion and output.

All values read from environment variables with sensible defaults matching
the Figma plugin's defaults. Import from here instead of hardcoding.

Style constant tables (palette, font-size / spacing / radius ladders) are not
settings; they live in ``markup.theme.Theme``.
"""

from __future__ import annotations

import os


def _int(key: str, default: int) -> int:
    return int(os.getenv(key, str(default)))


def _str(key: str, default: str) -> str:
    return os.getenv(key, default)


def _bool(key: str, default: bool) -> bool:
    return os.getenv(key, "true" if default else "false").lower() in ("true", "1", "yes")


# =====================================================================
# TSX Output
# =====================================================================

# Indent width per nesting level (ignored when tabs are used)
CODEGEN_INDENT_SIZE = _int("CODEGEN_INDENT_SIZE", 2)

# Indent with spaces (true) or one tab per level (false)
CODEGEN_USE_SPACES = _bool("CODEGEN_USE_SPACES", True)


# =====================================================================
# Conversion Policies
# =====================================================================

# lenient fallback: "false" (default) | "true"
#   false: unsupported node types (RECTANGLE, VECTOR, ...) raise UnsupportedNodeKind
#   true: unsupported node types become an empty View sized from geometry
CODEGEN_LENIENT_FALLBACK = _bool("CODEGEN_LENIENT_FALLBACK", False)

# Directory prefix used in icon import statements
CODEGEN_ICON_ASSET_DIR = _str("CODEGEN_ICON_ASSET_DIR", "@/assets/images")


# =====================================================================
# Logging
# =====================================================================

CODEGEN_LOG_LEVEL = _str("CODEGEN_LOG_LEVEL", "INFO")
