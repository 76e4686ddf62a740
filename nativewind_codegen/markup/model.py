from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class MarkupKind(str, Enum):
    """Output element kinds; the value is the rendered tag name."""
    TEXT = "Text"
    CONTAINER = "View"
    IMAGE = "Image"
    INTERACTIVE = "TouchableOpacity"
    PREFORMATTED = "Button"


@dataclass(frozen=True)
class Expression:
    """Raw JSX expression attribute value, rendered as ``name={code}``."""
    code: str


@dataclass(frozen=True)
class MarkupNode:
    """Intermediate markup element produced by the classifier.

    At most one of ``literal_markup``, ``children`` and ``text`` may be set.
    With none set the node renders as a self-closing element.
    """

    kind: MarkupKind
    attributes: Dict[str, Any] = field(default_factory=dict)
    class_name: Optional[str] = None
    text: Optional[str] = None
    children: Tuple["MarkupNode", ...] = ()
    literal_markup: Optional[str] = None
    auxiliary_statement: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(self.children))
        object.__setattr__(self, "attributes", dict(self.attributes))
        contents = [
            name for name, present in (
                ("literal_markup", self.literal_markup is not None),
                ("children", bool(self.children)),
                ("text", self.text is not None),
            ) if present
        ]
        if len(contents) > 1:
            raise ValueError(f"MarkupNode may hold only one of {contents}")

    @property
    def tag(self) -> str:
        return self.kind.value
