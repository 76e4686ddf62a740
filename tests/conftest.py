"""Shared fixtures for code generator tests.

Provides:
- Fake ComponentLookup implementations (static names, delayed, failing)
- Small builders for Figma node dicts
- A collecting diagnostic sink
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional

import pytest

from nativewind_codegen.integrations.figma_components import ComponentMeta
from nativewind_codegen.integrations.figma_nodes import VisualNode
from nativewind_codegen.markup.classifier import NodeConverter
from nativewind_codegen.markup.diagnostics import CollectingDiagnosticSink


# ---------------------------------------------------------------------------
# Fake component lookups
# ---------------------------------------------------------------------------


class StaticLookup:
    """Resolve instances by node id → component name."""

    def __init__(self, names: Optional[Dict[str, str]] = None):
        self.names = names or {}
        self.calls: List[str] = []

    async def get_main_component(self, node: VisualNode) -> Optional[ComponentMeta]:
        self.calls.append(node.id)
        await asyncio.sleep(0)
        name = self.names.get(node.id)
        return ComponentMeta(id=f"c-{node.id}", name=name) if name is not None else None


class DelayedLookup(StaticLookup):
    """Like StaticLookup but each node id resolves after its own delay."""

    def __init__(self, names: Dict[str, str], delays: Dict[str, float]):
        super().__init__(names)
        self.delays = delays
        self.completed: List[str] = []

    async def get_main_component(self, node: VisualNode) -> Optional[ComponentMeta]:
        await asyncio.sleep(self.delays.get(node.id, 0))
        self.completed.append(node.id)
        name = self.names.get(node.id)
        return ComponentMeta(id=f"c-{node.id}", name=name) if name is not None else None


class FailingLookup:
    def __init__(self, error: Exception):
        self.error = error

    async def get_main_component(self, node: VisualNode) -> Optional[ComponentMeta]:
        raise self.error


# ---------------------------------------------------------------------------
# Node builders
# ---------------------------------------------------------------------------


def solid(r: float, g: float, b: float, **extra: Any) -> Dict[str, Any]:
    return {"type": "SOLID", "color": {"r": r, "g": g, "b": b, "a": 1}, **extra}


def text(node_id: str, characters: str, **fields: Any) -> Dict[str, Any]:
    return {"id": node_id, "type": "TEXT", "name": characters, "characters": characters, **fields}


def instance(node_id: str, children: Optional[list] = None, **fields: Any) -> Dict[str, Any]:
    return {
        "id": node_id, "type": "INSTANCE", "name": f"instance {node_id}",
        "width": 100, "height": 40, "children": children or [], **fields,
    }


def frame(node_id: str, children: Optional[list] = None, **fields: Any) -> Dict[str, Any]:
    return {
        "id": node_id, "type": "FRAME", "name": f"frame {node_id}",
        "width": 393, "height": 852, "children": children or [], **fields,
    }


def node(data: Dict[str, Any]) -> VisualNode:
    return VisualNode.from_figma(data)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sink():
    return CollectingDiagnosticSink()


@pytest.fixture
def lookup():
    return StaticLookup()


@pytest.fixture
def converter(lookup, sink):
    return NodeConverter(lookup, sink=sink)
