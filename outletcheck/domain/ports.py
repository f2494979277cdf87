from __future__ import annotations
from typing import Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from .failures import FailureKind
    from .widgets import Widget


# ---- Ports (Hexagonal boundaries) ----
class NamedAttributeLookup(Protocol):
    """Reflective read of a named attribute on an opaque object.

    Absence and a ``None`` value are indistinguishable to callers.
    """

    def lookup(self, obj: object, name: str) -> Optional[object]: ...


class FailureSink(Protocol):
    """Non-fatal failure channel; recording must never abort the caller."""

    def fail(self, kind: "FailureKind", message: str) -> None: ...


class WidgetClassifier(Protocol):
    """Translate a host toolkit widget into a resolvable widget variant."""

    def classify(self, widget: object) -> "Widget": ...
