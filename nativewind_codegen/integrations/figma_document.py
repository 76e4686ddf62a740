"""Figma export → VisualNode tree loader.

Accepts either:
- A GET /v1/files/:key/nodes response: ``{"name", "nodes": {id: {"document", "components"}}}``
- A single node / document dict (Plugin API dump or hand-written fixture)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from .figma_components import FileComponentLookup
from .figma_nodes import VisualNode

logger = logging.getLogger("nativewind_codegen.integrations.figma")


def load_visual_tree(
    payload: Dict[str, Any],
    node_id: Optional[str] = None,
) -> Tuple[Optional[VisualNode], FileComponentLookup]:
    """Load the root node to convert plus a lookup for its instances.

    Args:
        payload: Parsed Figma JSON (nodes response or single node)
        node_id: Node to select from a nodes response; defaults to the first entry

    Returns:
        (root node or None when nothing is selected, component lookup)

    Raises:
        ValueError: ``node_id`` was given but is not in the response
    """
    lookup = FileComponentLookup.from_nodes_response(payload)

    nodes_map = payload.get("nodes")
    if not isinstance(nodes_map, dict):
        document = payload.get("document", payload)
        if not isinstance(document, dict) or not document:
            return None, lookup
        return VisualNode.from_figma(document), lookup

    if node_id is not None:
        entry = nodes_map.get(node_id)
        if entry is None:
            # Figma URLs use "1-10" where the API uses "1:10"
            entry = nodes_map.get(node_id.replace("-", ":"))
        if entry is None:
            raise ValueError(
                f"Node '{node_id}' not found in Figma response. "
                f"Available nodes: {list(nodes_map.keys())}"
            )
    else:
        entry = next((val for val in nodes_map.values() if val is not None), None)

    if entry is None or not isinstance(entry.get("document"), dict):
        logger.warning("Figma response contains no node document")
        return None, lookup

    root = VisualNode.from_figma(entry["document"])
    logger.info(f"Loaded node '{root.label}' ({root.type}), {len(root.children)} children")
    return root, lookup
