"""Figma-side data: node models, paint helpers and component lookup."""

from .figma_components import ComponentLookup, ComponentMeta, FileComponentLookup
from .figma_document import load_visual_tree
from .figma_nodes import MIXED, NodeKind, VisualNode

__all__ = [
    "ComponentLookup",
    "ComponentMeta",
    "FileComponentLookup",
    "MIXED",
    "NodeKind",
    "VisualNode",
    "load_visual_tree",
]
