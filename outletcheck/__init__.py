"""Outlet and action assertions for view-controller unit tests."""

from .assertions import action, any_outlet, outlet, typed_outlet, use_collector
from .domain import (
    SUPPORTED_EVENTS,
    BarItem,
    ControlEvent,
    Failure,
    FailureCollector,
    FailureKind,
    GenericControl,
    Unclassified,
    WiringAssertionError,
)
from .usecases import ResolveAction, ResolveOutlet

__all__ = [
    "BarItem",
    "ControlEvent",
    "Failure",
    "FailureCollector",
    "FailureKind",
    "GenericControl",
    "ResolveAction",
    "ResolveOutlet",
    "SUPPORTED_EVENTS",
    "Unclassified",
    "WiringAssertionError",
    "action",
    "any_outlet",
    "outlet",
    "typed_outlet",
    "use_collector",
]
