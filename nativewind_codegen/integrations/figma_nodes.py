"""Figma visual node model.

A read-only view of a Figma scene node, built from either shape the Figma
APIs hand out:

- Plugin API: flat camelCase fields (``width``, ``fontSize``, ``fills``...)
- REST API: geometry under ``absoluteBoundingBox``, text style under
  ``style`` (or ``typeStyle`` in some exports)

Style and geometry fields are kept as raw values on purpose. Figma sends
``figma.mixed`` symbols, strings and nulls in places where numbers are
expected; normalizing them is the classifier's job (see ``markup.coercion``).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class _Mixed:
    """Placeholder for Figma's ``figma.mixed`` symbol."""

    _instance: Optional["_Mixed"] = None

    def __new__(cls) -> "_Mixed":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MIXED"


MIXED = _Mixed()


class NodeKind(str, Enum):
    TEXT = "text"
    INSTANCE = "instance"
    COMPONENT = "component"
    CONTAINER = "container"
    OTHER = "other"


# Figma type tag → NodeKind. Anything not listed is OTHER.
_TYPE_KINDS = {
    "TEXT": NodeKind.TEXT,
    "INSTANCE": NodeKind.INSTANCE,
    "COMPONENT": NodeKind.COMPONENT,
    "FRAME": NodeKind.CONTAINER,
    "GROUP": NodeKind.CONTAINER,
    "COMPONENT_SET": NodeKind.CONTAINER,
    "SECTION": NodeKind.CONTAINER,
}

# REST text style keys lifted onto the node
_STYLE_KEYS = ("fontSize", "fontWeight", "textAlignHorizontal")


class VisualNode(BaseModel):
    """A Figma scene node and its ordered children."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    id: str = ""
    type: str = ""
    name: str = ""
    characters: Optional[str] = None
    visible: bool = True

    # Geometry
    width: Any = None
    height: Any = None

    # Text style
    font_size: Any = None
    font_weight: Any = None
    text_align_horizontal: Any = None

    # Paint / shape
    fills: Any = None
    corner_radius: Any = None
    rectangle_corner_radii: Any = None

    # Auto-layout
    layout_mode: Any = None
    item_spacing: Any = None
    padding_top: Any = None
    padding_right: Any = None
    padding_bottom: Any = None
    padding_left: Any = None
    primary_axis_align_items: Any = None
    counter_axis_align_items: Any = None

    # INSTANCE → backing COMPONENT id (REST API)
    component_id: Optional[str] = None

    children: List["VisualNode"] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _lift_rest_fields(cls, data: Any) -> Any:
        """Flatten REST-shaped geometry and text style into node fields."""
        if not isinstance(data, dict):
            return data
        data = dict(data)

        bbox = data.get("absoluteBoundingBox")
        if isinstance(bbox, dict):
            data.setdefault("width", bbox.get("width"))
            data.setdefault("height", bbox.get("height"))

        style = data.get("style")
        # Fallback: some Figma exports use "typeStyle" instead of "style"
        if not isinstance(style, dict) or not style:
            style = data.get("typeStyle")
        if isinstance(style, dict):
            for key in _STYLE_KEYS:
                if key in style:
                    data.setdefault(key, style[key])
        return data

    @field_validator("children", mode="before")
    @classmethod
    def _none_children(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def kind(self) -> NodeKind:
        return _TYPE_KINDS.get(self.type, NodeKind.OTHER)

    @property
    def label(self) -> str:
        """Human-readable node label for diagnostics."""
        return self.name or self.id or self.type or "?"

    @classmethod
    def from_figma(cls, data: dict) -> "VisualNode":
        return cls.model_validate(data)


VisualNode.model_rebuild()
