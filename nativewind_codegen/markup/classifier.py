"""Figma node tree → MarkupNode tree.

``NodeConverter`` classifies each visual node into an output element:

- TEXT → ``Text`` with size / weight / alignment / color classes
- INSTANCE, COMPONENT → button markup, icon ``Image`` or ``View``, decided by
  keyword rules on the component name (instances resolve their backing
  component through the injected ``ComponentLookup``)
- FRAME, GROUP, ... → ``View`` with size / background / radius / flex classes
- anything else → ``UnsupportedNodeKind`` unless the lenient fallback is on

Children of a node are converted concurrently and reassembled in their
original order; the first failing child fails the parent.
"""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import replace
from enum import Enum
from typing import FrozenSet, List, Optional, Sequence, Tuple

from ..integrations.figma_components import ComponentLookup
from ..integrations.figma_nodes import NodeKind, VisualNode
from ..integrations.figma_paints import solid_fill_hex
from .buttons import parse_button_markup
from .coercion import (
    is_placeholder,
    node_size,
    safe_font_size,
    safe_font_weight,
    safe_number,
    safe_string,
)
from .diagnostics import DiagnosticSink
from .errors import ChildConversionFailure, UnsupportedNodeKind
from .model import Expression, MarkupKind, MarkupNode
from .styling import ContainerStyle, container_class_name, size_classes, text_class_name
from .theme import DEFAULT_THEME, Theme

logger = logging.getLogger("nativewind_codegen.markup")


class ComponentRole(str, Enum):
    INTERACTIVE = "interactive"
    ICON = "icon"
    CONTAINER = "container"


# Keywords matched case-insensitively as substrings of the component name
INTERACTIVE_KEYWORDS = frozenset({"button", "btn", "cta", "action"})
ICON_KEYWORDS = frozenset({"icon", "icn", "svg", "symbol"})

# Evaluated in order, first match wins; no match → CONTAINER
COMPONENT_RULES: Tuple[Tuple[FrozenSet[str], ComponentRole], ...] = (
    (INTERACTIVE_KEYWORDS, ComponentRole.INTERACTIVE),
    (ICON_KEYWORDS, ComponentRole.ICON),
)


def classify_component_name(
    name: str,
    rules: Sequence[Tuple[FrozenSet[str], ComponentRole]] = COMPONENT_RULES,
) -> ComponentRole:
    lower_name = name.lower()
    for keywords, role in rules:
        if any(kw in lower_name for kw in keywords):
            return role
    return ComponentRole.CONTAINER


def to_icon_identifier(name: str) -> str:
    """'  My Icon  ' → 'my_icon'"""
    return re.sub(r"\s+", "_", name.strip().lower())


class NodeConverter:
    """Convert a Figma node tree into a MarkupNode tree.

    Args:
        lookup: Resolves INSTANCE nodes to their backing component
        theme: Palette and bucket ladders
        lenient: Convert unsupported node types to sized empty Views instead of raising
        rules: Ordered (keywords, role) component rules
        sink: Receives coercion warnings (defaults to logging)
        icon_asset_dir: Directory prefix for icon import statements
    """

    def __init__(
        self,
        lookup: ComponentLookup,
        theme: Theme = DEFAULT_THEME,
        *,
        lenient: bool = False,
        rules: Sequence[Tuple[FrozenSet[str], ComponentRole]] = COMPONENT_RULES,
        sink: Optional[DiagnosticSink] = None,
        icon_asset_dir: str = "@/assets/images",
    ):
        self._lookup = lookup
        self._theme = theme
        self._lenient = lenient
        self._rules = tuple(rules)
        self._sink = sink
        self._icon_asset_dir = icon_asset_dir.rstrip("/")

    async def convert_node(self, node: VisualNode) -> MarkupNode:
        kind = node.kind
        if kind is NodeKind.TEXT:
            return self._convert_text(node)
        if kind is NodeKind.INSTANCE:
            return await self._convert_instance(node)
        if kind is NodeKind.COMPONENT:
            return await self._convert_component(node, node.name or "")
        if kind is NodeKind.CONTAINER:
            return await self._convert_container(node)

        if not self._lenient:
            raise UnsupportedNodeKind(node.type, node.name)
        logger.debug(f"Lenient fallback for '{node.label}' ({node.type})")
        width, height = node_size(node, self._sink)
        return MarkupNode(kind=MarkupKind.CONTAINER, class_name=" ".join(size_classes(width, height)))

    async def convert_children(self, children: Optional[Sequence[VisualNode]]) -> List[MarkupNode]:
        """Convert siblings concurrently; results keep the input order.

        The first failure cancels the siblings still running and propagates.
        """
        if not children:
            return []
        tasks = [asyncio.ensure_future(self._convert_child(child)) for child in children]
        try:
            return list(await asyncio.gather(*tasks))
        except Exception:
            for task in tasks:
                task.cancel()
            # Collect the remaining outcomes so none is left unretrieved
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def _convert_child(self, child: VisualNode) -> MarkupNode:
        try:
            return await self.convert_node(child)
        except ChildConversionFailure as e:
            raise e.nested_in(child.label) from e.cause
        except Exception as e:
            raise ChildConversionFailure((child.label,), e) from e

    # ------------------------------------------------------------------
    # Per-kind conversion
    # ------------------------------------------------------------------

    def _convert_text(self, node: VisualNode) -> MarkupNode:
        font_size = safe_font_size(node.font_size, self._theme.base_font_size, sink=self._sink)
        font_weight = safe_font_weight(node.font_weight, sink=self._sink)
        text_align = safe_string(node.text_align_horizontal, "LEFT", field="textAlignHorizontal", sink=self._sink)
        color = solid_fill_hex(node.fills)

        return MarkupNode(
            kind=MarkupKind.TEXT,
            class_name=text_class_name(font_size, font_weight, text_align, color, self._theme),
            text=node.characters or "",
        )

    async def _convert_instance(self, node: VisualNode) -> MarkupNode:
        main_component = await self._lookup.get_main_component(node)
        name = main_component.name if main_component else ""
        return await self._convert_component(node, name)

    async def _convert_component(self, node: VisualNode, component_name: str) -> MarkupNode:
        role = classify_component_name(component_name, self._rules)
        logger.debug(f"Component '{component_name}' on '{node.label}' → {role.value}")

        if role is ComponentRole.INTERACTIVE:
            children = await self.convert_children(node.children)
            kind, markup = parse_button_markup(component_name, children)
            return MarkupNode(kind=kind, literal_markup=markup)

        if role is ComponentRole.ICON:
            return self._icon_image(component_name)

        return await self._convert_container(node)

    def _icon_image(self, component_name: str) -> MarkupNode:
        icon_name = to_icon_identifier(component_name)
        size = self._theme.icon_size
        return MarkupNode(
            kind=MarkupKind.IMAGE,
            attributes={"source": Expression(icon_name)},
            class_name=f"w-[{size}px] h-[{size}px]",
            auxiliary_statement=f"import {icon_name} from '{self._icon_asset_dir}/{icon_name}.svg';",
        )

    async def _convert_container(self, node: VisualNode) -> MarkupNode:
        class_name = container_class_name(self._container_style(node), self._theme)
        children = await self.convert_children(node.children)
        return MarkupNode(kind=MarkupKind.CONTAINER, class_name=class_name, children=children)

    def _container_style(self, node: VisualNode) -> ContainerStyle:
        width, height = node_size(node, self._sink)
        layout_mode = node.layout_mode if isinstance(node.layout_mode, str) else None
        style = ContainerStyle(
            width=width,
            height=height,
            background=solid_fill_hex(node.fills),
            corner_radius=self._corner_radius(node),
            layout_mode=layout_mode,
        )
        if not style.has_auto_layout:
            return style

        # Absent values mean 0 / unset; only present-but-unusable values warn
        def number(value, field):
            return safe_number(0 if value is None else value, 0, field=field, sink=self._sink)

        def keyword(value, field):
            return None if value is None else safe_string(value, None, field=field, sink=self._sink)

        return replace(
            style,
            counter_axis_align=keyword(node.counter_axis_align_items, "counterAxisAlignItems"),
            primary_axis_align=keyword(node.primary_axis_align_items, "primaryAxisAlignItems"),
            item_spacing=number(node.item_spacing, "itemSpacing"),
            padding_top=number(node.padding_top, "paddingTop"),
            padding_right=number(node.padding_right, "paddingRight"),
            padding_bottom=number(node.padding_bottom, "paddingBottom"),
            padding_left=number(node.padding_left, "paddingLeft"),
        )

    def _corner_radius(self, node: VisualNode) -> Optional[float]:
        """Uniform corner radius, or None when absent or the corners differ.

        ``cornerRadius`` wins; the per-corner ``rectangleCornerRadii`` are
        used when it is missing or ``figma.mixed``.
        """
        radius, radii = node.corner_radius, node.rectangle_corner_radii
        per_corner = isinstance(radii, (list, tuple)) and len(radii) == 4

        if per_corner and (radius is None or is_placeholder(radius)):
            values = {
                safe_number(r, 0, field="rectangleCornerRadii", sink=self._sink)
                for r in radii
            }
            if len(values) == 1:
                return values.pop()
            logger.debug(f"Non-uniform corner radii {radii} on '{node.label}' ignored")
            return None

        if radius is None:
            return None
        return safe_number(radius, 0, field="cornerRadius", sink=self._sink)
