"""Conversion errors."""

from __future__ import annotations

from typing import Sequence


class CodegenError(Exception):
    """Base class for conversion failures."""


class UnsupportedNodeKind(CodegenError):
    """Raised when a node type has no classification rule and no lenient fallback."""

    def __init__(self, node_type: str, node_name: str = ""):
        self.node_type = node_type
        self.node_name = node_name
        super().__init__(f"Unsupported node type: {node_type}")


class ChildConversionFailure(CodegenError):
    """A child subtree failed to convert; the parent is not emitted.

    Attributes:
        path: Node labels from the failing parent's child down to the failing node
        cause: The original exception
    """

    def __init__(self, path: Sequence[str], cause: BaseException):
        self.path = tuple(path)
        self.cause = cause
        super().__init__(f"Failed to convert child '{' > '.join(self.path)}': {cause}")

    def nested_in(self, label: str) -> "ChildConversionFailure":
        """Same failure seen one level higher in the tree."""
        return ChildConversionFailure((label,) + self.path, self.cause)
