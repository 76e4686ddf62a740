#!/usr/bin/env python3
"""Generate React Native TSX from a Figma JSON export.

Usage:
    # REST export (GET /v1/files/:key/nodes?ids=...), first node:
    nativewind-codegen nodes.json

    # Pick a node from a multi-node response:
    nativewind-codegen nodes.json --node-id 16650:538

    # Tabs, lenient fallback for RECTANGLE/VECTOR/... nodes, write to a file:
    nativewind-codegen node.json --tabs --lenient --output Screen.tsx

    # Override CODEGEN_LENIENT_FALLBACK=true for one run:
    nativewind-codegen node.json --no-lenient
"""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

from . import settings
from .codegen import handle_generate
from .integrations.figma_document import load_visual_tree
from .logging_config import get_codegen_logger
from .markup.generator import GenerationOptions


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="nativewind-codegen",
        description="Convert a Figma node tree into React Native + NativeWind TSX",
    )
    parser.add_argument("input", type=Path, help="Figma JSON file (nodes response or single node)")
    parser.add_argument("--node-id", default=None, help="Node to convert from a nodes response")
    parser.add_argument(
        "--indent", type=int, default=settings.CODEGEN_INDENT_SIZE,
        help=f"Spaces per indent level (default: {settings.CODEGEN_INDENT_SIZE})",
    )
    parser.add_argument("--tabs", action="store_true", help="Indent with tabs")
    parser.add_argument(
        "--lenient", action=argparse.BooleanOptionalAction, default=settings.CODEGEN_LENIENT_FALLBACK,
        help="Render unsupported node types as sized empty Views",
    )
    parser.add_argument("--output", type=Path, default=None, help="Write TSX here instead of stdout")
    parser.add_argument("--log-level", default=settings.CODEGEN_LOG_LEVEL, help="Logging level")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logger = get_codegen_logger(args.log_level)

    try:
        payload = json.loads(args.input.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Cannot read {args.input}: {e}")
        return 2
    if not isinstance(payload, dict):
        logger.error(f"{args.input}: expected a JSON object")
        return 2

    try:
        root, lookup = load_visual_tree(payload, args.node_id)
    except ValueError as e:
        logger.error(str(e))
        return 2

    options = GenerationOptions(indent_size=args.indent, use_spaces=not args.tabs)
    results = asyncio.run(handle_generate(root, lookup, options=options, lenient=args.lenient))
    result = results[0]

    if result.is_error:
        print(f"{result.title}: {result.code}", file=sys.stderr)
        return 1

    if args.output:
        args.output.write_text(result.code + "\n", encoding="utf-8")
        logger.info(f"Wrote {args.output}")
    else:
        print(result.code)
    return 0


if __name__ == "__main__":
    sys.exit(main())
