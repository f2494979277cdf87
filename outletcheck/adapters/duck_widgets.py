"""Classify plain Python objects by the target-action capabilities they expose."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..domain.widgets import BarItem, GenericControl, Unclassified, Widget

_log = logging.getLogger(__name__)


def action_name(action: Any) -> Optional[str]:
    """Return the handler name for a string or callable action."""
    if action is None or isinstance(action, str):
        return action
    name = getattr(action, "__name__", None)
    if isinstance(name, str):
        return name
    return str(action)


def is_bar_item(widget: Any) -> bool:
    return hasattr(widget, "target") and hasattr(widget, "action")


def is_generic_control(widget: Any) -> bool:
    return callable(getattr(widget, "all_targets", None)) and callable(
        getattr(widget, "actions_for_target", None)
    )


class DuckTypedClassifier:
    """Map objects to widget variants; bar items are checked first."""

    def classify(self, widget: Any) -> Widget:
        if is_bar_item(widget):
            return self._bar_item(widget)
        if is_generic_control(widget):
            targets = list(widget.all_targets() or [])
            return GenericControl(targets=targets, actions_for=widget.actions_for_target)
        kind = type(widget).__name__
        _log.debug("No target-action capabilities on %s", kind)
        return Unclassified(kind=kind)

    @staticmethod
    def _bar_item(widget: Any) -> BarItem:
        action = widget.action
        target = widget.target
        if target is None:
            # Bound-method action carries its own receiver.
            target = getattr(action, "__self__", None)
        return BarItem(target=target, action=action_name(action))
