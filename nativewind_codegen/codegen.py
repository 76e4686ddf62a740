"""Code generation entrypoints.

- ``convert_node``: Figma node → MarkupNode tree (async; instances resolve
  their backing component through a ``ComponentLookup``)
- ``generate_markup``: MarkupNode tree → TSX text
- ``handle_generate``: the "generate" event handler; wraps both steps and
  turns a missing selection or a conversion failure into an Error result
"""

from __future__ import annotations

import logging
from typing import List, Literal, Optional

from pydantic import BaseModel

from . import settings
from .integrations.figma_components import ComponentLookup, FileComponentLookup
from .integrations.figma_nodes import VisualNode
from .markup.classifier import NodeConverter
from .markup.diagnostics import DiagnosticSink
from .markup.generator import GenerationOptions, TSXGenerator
from .markup.model import MarkupNode
from .markup.theme import DEFAULT_THEME, Theme

logger = logging.getLogger("nativewind_codegen")

RESULT_TITLE = "React Native TSX"
ERROR_TITLE = "Error"
NO_SELECTION_MESSAGE = "Please select a node."


class CodegenResult(BaseModel):
    """One panel entry returned to the host."""
    title: str
    code: str
    language: Literal["TYPESCRIPT", "JAVASCRIPT", "PLAINTEXT"] = "TYPESCRIPT"

    @property
    def is_error(self) -> bool:
        return self.title == ERROR_TITLE


def default_options() -> GenerationOptions:
    return GenerationOptions(
        indent_size=settings.CODEGEN_INDENT_SIZE,
        use_spaces=settings.CODEGEN_USE_SPACES,
    )


def create_converter(
    lookup: Optional[ComponentLookup] = None,
    *,
    theme: Optional[Theme] = None,
    lenient: Optional[bool] = None,
    sink: Optional[DiagnosticSink] = None,
) -> NodeConverter:
    return NodeConverter(
        lookup if lookup is not None else FileComponentLookup(),
        theme or DEFAULT_THEME,
        lenient=settings.CODEGEN_LENIENT_FALLBACK if lenient is None else lenient,
        sink=sink,
        icon_asset_dir=settings.CODEGEN_ICON_ASSET_DIR,
    )


async def convert_node(
    root: VisualNode,
    lookup: Optional[ComponentLookup] = None,
    *,
    theme: Optional[Theme] = None,
    lenient: Optional[bool] = None,
    sink: Optional[DiagnosticSink] = None,
) -> MarkupNode:
    """Convert one root node. Raises ``CodegenError`` subclasses on failure."""
    converter = create_converter(lookup, theme=theme, lenient=lenient, sink=sink)
    return await converter.convert_node(root)


def generate_markup(tree: MarkupNode, options: Optional[GenerationOptions] = None) -> str:
    return TSXGenerator(options or default_options()).generate(tree)


async def handle_generate(
    node: Optional[VisualNode],
    lookup: Optional[ComponentLookup] = None,
    *,
    options: Optional[GenerationOptions] = None,
    lenient: Optional[bool] = None,
) -> List[CodegenResult]:
    """Run the full pipeline for the selected node and package the output for display."""
    if node is None:
        return [CodegenResult(title=ERROR_TITLE, code=NO_SELECTION_MESSAGE)]

    logger.info(f"Codegen started for '{node.label}' ({node.type})")
    try:
        tree = await convert_node(node, lookup, lenient=lenient)
        code = generate_markup(tree, options)
    except Exception as e:
        logger.error(f"Codegen error for '{node.label}': {e}", exc_info=True)
        return [CodegenResult(title=ERROR_TITLE, code=str(e))]

    return [CodegenResult(title=RESULT_TITLE, code=code)]
