"""Diagnostic sinks for non-fatal coercion fallbacks.

Coercion never raises: when a value cannot be used it falls back to a default
and reports a ``CoercionWarning`` to a sink. The default sink logs; tests use
``CollectingDiagnosticSink`` to assert on fallbacks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Protocol

logger = logging.getLogger("nativewind_codegen.markup")


@dataclass(frozen=True)
class CoercionWarning:
    """A coercion that fell back to its default."""
    field: str  # e.g. "fontSize", "width"
    value: Any
    default: Any
    reason: str  # "placeholder" | "missing" | "invalid"


class DiagnosticSink(Protocol):
    def warn(self, warning: CoercionWarning) -> None:
        ...


class LoggingDiagnosticSink:
    """Write coercion warnings to the package logger."""

    def __init__(self, log: logging.Logger = logger):
        self._log = log

    def warn(self, warning: CoercionWarning) -> None:
        self._log.warning(
            f"{warning.field}: {warning.reason} value {warning.value!r}, "
            f"using default {warning.default!r}"
        )


@dataclass
class CollectingDiagnosticSink:
    """Keep coercion warnings in memory."""
    warnings: List[CoercionWarning] = field(default_factory=list)

    def warn(self, warning: CoercionWarning) -> None:
        self.warnings.append(warning)

    def fields(self) -> List[str]:
        return [w.field for w in self.warnings]


DEFAULT_SINK = LoggingDiagnosticSink()
