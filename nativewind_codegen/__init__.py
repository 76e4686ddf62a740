"""Figma → React Native (NativeWind) TSX code generator.

Subpackages:
- integrations: Figma node models, paint helpers, component lookup
- markup: Intermediate markup tree, styling heuristics, classifier and TSX serializer

Entrypoints live in ``nativewind_codegen.codegen``.
"""

__version__ = "0.3.0"
