"""MarkupNode tree → indented TSX text."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from .model import Expression, MarkupNode
from .styling import format_number


class GenerationOptions(BaseModel):
    """Indentation settings for TSX output."""
    indent_size: int = Field(default=2, ge=0)
    use_spaces: bool = True


class TSXGenerator:
    """Render MarkupNode trees. Stateless apart from options; never mutates nodes."""

    def __init__(self, options: Optional[GenerationOptions] = None):
        self.options = options or GenerationOptions()

    def generate(self, node: MarkupNode, depth: int = 0) -> str:
        indent = self._indent(depth)
        attrs = self._props_to_string(node.attributes)
        if node.class_name:
            attrs += f' className="{node.class_name}"'
        tag = node.tag

        # Precomputed markup wins over everything else
        if node.literal_markup:
            return "\n".join(
                indent + line if line else line
                for line in node.literal_markup.split("\n")
            )

        if node.auxiliary_statement:
            return f"{indent}{node.auxiliary_statement}\n{indent}<{tag}{attrs} />"

        if node.children:
            children_tsx = "\n".join(self.generate(child, depth + 1) for child in node.children)
            return f"{indent}<{tag}{attrs}>\n{children_tsx}\n{indent}</{tag}>"

        if node.text:
            return f"{indent}<{tag}{attrs}>{node.text}</{tag}>"

        return f"{indent}<{tag}{attrs} />"

    def _indent(self, depth: int) -> str:
        if self.options.use_spaces:
            return " " * (depth * self.options.indent_size)
        return "\t" * depth

    @staticmethod
    def _props_to_string(props: Dict[str, Any]) -> str:
        if not props:
            return ""
        return " " + " ".join(_prop_to_string(key, value) for key, value in props.items())


def _prop_to_string(key: str, value: Any) -> str:
    if isinstance(value, str):
        return f'{key}="{value}"'
    if isinstance(value, bool):
        return key if value else f"{key}={{false}}"
    if isinstance(value, (int, float)):
        return f"{key}={{{format_number(value)}}}"
    if isinstance(value, Expression):
        return f"{key}={{{value.code}}}"
    return f"{key}={{{json.dumps(value, separators=(',', ':'), ensure_ascii=False)}}}"
