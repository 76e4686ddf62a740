"""Component definition lookup for INSTANCE nodes.

The classifier needs the name of an instance's backing COMPONENT to decide
whether it is a button, an icon or a plain view. In the Figma plugin runtime
that is ``node.getMainComponentAsync()``; here it is an injected port so the
classifier can run against REST exports or test fakes.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional, Protocol

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .figma_nodes import NodeKind, VisualNode

logger = logging.getLogger("nativewind_codegen.integrations.figma")


class ComponentMeta(BaseModel):
    """Backing component definition of an instance (REST ``components`` entry)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: str = ""
    key: str = ""
    name: str = ""
    description: str = ""
    component_set_id: Optional[str] = None


class ComponentLookup(Protocol):
    """Port resolving an instance node to its backing component."""

    async def get_main_component(self, node: VisualNode) -> Optional[ComponentMeta]:
        """Return the backing component of ``node`` or None when unresolved."""
        ...


class FileComponentLookup:
    """Resolve instances against components known from a Figma file export.

    Args:
        components: REST ``components`` map (component id → metadata dict)
        definitions: COMPONENT nodes found in the document tree
    """

    def __init__(
        self,
        components: Optional[Dict[str, Any]] = None,
        definitions: Iterable[VisualNode] = (),
    ):
        self._components: Dict[str, ComponentMeta] = {}
        for comp_id, meta in (components or {}).items():
            if isinstance(meta, dict):
                self._components[comp_id] = ComponentMeta.model_validate({"id": comp_id, **meta})
        for node in definitions:
            self._components.setdefault(node.id, ComponentMeta(id=node.id, name=node.name))

    def __len__(self) -> int:
        return len(self._components)

    @classmethod
    def from_nodes_response(cls, response: Dict[str, Any]) -> "FileComponentLookup":
        """Build from a GET /v1/files/:key/nodes response (or a bare document dict)."""
        components: Dict[str, Any] = {}
        definitions = []

        entries = response.get("nodes")
        if isinstance(entries, dict):
            documents = []
            for entry in entries.values():
                if not isinstance(entry, dict):
                    continue
                components.update(entry.get("components") or {})
                if isinstance(entry.get("document"), dict):
                    documents.append(entry["document"])
        else:
            components.update(response.get("components") or {})
            document = response.get("document", response)
            documents = [document] if isinstance(document, dict) else []

        for document in documents:
            definitions.extend(_collect_definitions(VisualNode.from_figma(document)))

        lookup = cls(components, definitions)
        logger.info(f"FileComponentLookup: {len(lookup)} component definitions")
        return lookup

    async def get_main_component(self, node: VisualNode) -> Optional[ComponentMeta]:
        if not node.component_id:
            logger.debug(f"Instance '{node.label}' has no componentId")
            return None
        meta = self._components.get(node.component_id)
        if meta is None:
            logger.warning(f"Component {node.component_id} for instance '{node.label}' not found")
        return meta


def _collect_definitions(node: VisualNode) -> list:
    """Recursively collect COMPONENT nodes from a tree."""
    found = []
    if node.kind is NodeKind.COMPONENT:
        found.append(node)
    for child in node.children:
        found.extend(_collect_definitions(child))
    return found
