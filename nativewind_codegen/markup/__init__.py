"""Intermediate markup tree, styling heuristics, classifier and TSX serializer."""

from .classifier import NodeConverter
from .errors import ChildConversionFailure, CodegenError, UnsupportedNodeKind
from .generator import GenerationOptions, TSXGenerator
from .model import Expression, MarkupKind, MarkupNode
from .theme import DEFAULT_THEME, Theme

__all__ = [
    "ChildConversionFailure",
    "CodegenError",
    "DEFAULT_THEME",
    "Expression",
    "GenerationOptions",
    "MarkupKind",
    "MarkupNode",
    "NodeConverter",
    "TSXGenerator",
    "Theme",
    "UnsupportedNodeKind",
]
