"""Test-facing call patterns for outlet and action checks.

Usage inside a test::

    check_outlet = outlet(controller)
    check_outlet("btn_save", ttk.Button)

    check_action = action(controller)
    check_action("on_save", from_="btn_save")

Failures go to the collector passed in, else to the collector of the running
pytest test (see ``outletcheck.pytest_plugin``), else to a fresh collector
exposed as ``.failures`` on the returned check.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Optional

from .adapters.attribute_lookup import AttributeLookup
from .adapters.duck_widgets import DuckTypedClassifier
from .domain.failures import FailureCollector
from .domain.ports import NamedAttributeLookup, WidgetClassifier
from .usecases.resolve_action import ResolveAction
from .usecases.resolve_outlet import ExpectedType, ResolveOutlet

_ambient: List[FailureCollector] = []


@contextmanager
def use_collector(collector: FailureCollector) -> Iterator[FailureCollector]:
    """Make ``collector`` the default failure channel inside the block."""
    _ambient.append(collector)
    try:
        yield collector
    finally:
        _ambient.remove(collector)


def current_collector() -> Optional[FailureCollector]:
    return _ambient[-1] if _ambient else None


def collector_or_default(failures: Optional[FailureCollector]) -> FailureCollector:
    if failures is not None:
        return failures
    return current_collector() or FailureCollector()


class OutletCheck:
    """Callable ``check(name, expected_type=None)`` bound to one controller."""

    def __init__(
        self,
        controller: Any,
        failures: FailureCollector,
        lookup: NamedAttributeLookup,
        expected_type: Optional[ExpectedType] = None,
    ) -> None:
        self.controller = controller
        self.failures = failures
        self.expected_type = expected_type
        self._resolve = ResolveOutlet(lookup=lookup, failures=failures)

    def __call__(self, name: str, expected_type: Optional[ExpectedType] = None) -> Optional[Any]:
        return self._resolve(self.controller, name, expected_type or self.expected_type)


class ActionCheck:
    """Callable ``check(expected_action, from_)`` bound to one controller."""

    def __init__(
        self,
        controller: Any,
        failures: FailureCollector,
        lookup: NamedAttributeLookup,
        classifier: WidgetClassifier,
    ) -> None:
        self.controller = controller
        self.failures = failures
        self._resolve = ResolveAction(
            resolve_outlet=ResolveOutlet(lookup=lookup, failures=failures),
            classifier=classifier,
            failures=failures,
        )

    def __call__(self, expected_action: str, from_: str) -> None:
        self._resolve(self.controller, expected_action, from_)


def outlet(
    controller: Any,
    failures: Optional[FailureCollector] = None,
    *,
    lookup: Optional[NamedAttributeLookup] = None,
) -> OutletCheck:
    """Return a check asserting that ``controller`` has a bound outlet."""
    return OutletCheck(controller, collector_or_default(failures), lookup or AttributeLookup())


def typed_outlet(expected_type: ExpectedType) -> Callable[..., OutletCheck]:
    """Build an ``outlet`` variant that also checks the bound object's type."""

    def factory(
        controller: Any,
        failures: Optional[FailureCollector] = None,
        *,
        lookup: Optional[NamedAttributeLookup] = None,
    ) -> OutletCheck:
        return OutletCheck(
            controller,
            collector_or_default(failures),
            lookup or AttributeLookup(),
            expected_type=expected_type,
        )

    return factory


any_outlet = outlet


def action(
    controller: Any,
    failures: Optional[FailureCollector] = None,
    *,
    lookup: Optional[NamedAttributeLookup] = None,
    classifier: Optional[WidgetClassifier] = None,
) -> ActionCheck:
    """Return a check asserting that an outlet sends an action to ``controller``."""
    return ActionCheck(
        controller,
        collector_or_default(failures),
        lookup or AttributeLookup(),
        classifier or DuckTypedClassifier(),
    )


__all__ = [
    "ActionCheck",
    "OutletCheck",
    "action",
    "any_outlet",
    "current_collector",
    "outlet",
    "typed_outlet",
    "use_collector",
]
