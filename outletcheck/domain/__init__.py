"""Domain package exports for failure model, widget variants and ports."""

from .errors import WiringAssertionError
from .failures import (
    Failure,
    FailureCollector,
    FailureKind,
    expect_equal,
    expect_identical,
    expect_not_none,
)
from .ports import FailureSink, NamedAttributeLookup, WidgetClassifier
from .widgets import (
    SUPPORTED_EVENTS,
    BarItem,
    ControlEvent,
    GenericControl,
    Unclassified,
    Widget,
)

__all__ = [
    "BarItem",
    "ControlEvent",
    "Failure",
    "FailureCollector",
    "FailureKind",
    "FailureSink",
    "GenericControl",
    "NamedAttributeLookup",
    "SUPPORTED_EVENTS",
    "Unclassified",
    "Widget",
    "WidgetClassifier",
    "WiringAssertionError",
    "expect_equal",
    "expect_identical",
    "expect_not_none",
]
