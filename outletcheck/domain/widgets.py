"""Widget variants understood by the action resolver.

Adapters translate concrete toolkit objects into one of these variants so the
resolver only matches on the variant, never on toolkit classes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union


class ControlEvent(str, Enum):
    """Trigger events a control can dispatch to a registered handler."""

    TOUCH_DOWN = "touch_down"
    TOUCH_UP_INSIDE = "touch_up_inside"
    VALUE_CHANGED = "value_changed"
    EDITING_CHANGED = "editing_changed"
    PRIMARY_ACTION_TRIGGERED = "primary_action_triggered"


# Searched in this order; handlers wired to any other event are not found.
SUPPORTED_EVENTS: Tuple[ControlEvent, ...] = (
    ControlEvent.TOUCH_UP_INSIDE,
    ControlEvent.VALUE_CHANGED,
)

ActionsFor = Callable[[Any, ControlEvent], Optional[Sequence[str]]]


@dataclass(frozen=True)
class BarItem:
    """Item holding exactly one target and one handler name."""

    target: Any
    action: Optional[str]


def _no_actions(target: Any, event: ControlEvent) -> Optional[Sequence[str]]:
    return None


@dataclass(frozen=True)
class GenericControl:
    """Control with an event -> handler registration table per target."""

    targets: List[Any] = field(default_factory=list)
    actions_for: ActionsFor = _no_actions

    def first_target(self) -> Any:
        return self.targets[0] if self.targets else None

    def candidate_actions(
        self, target: Any, events: Sequence[ControlEvent] = SUPPORTED_EVENTS
    ) -> List[str]:
        """Concatenate handler names registered for ``target`` across ``events``."""
        names: List[str] = []
        for event in events:
            names.extend(self.actions_for(target, event) or [])
        return names


@dataclass(frozen=True)
class Unclassified:
    """Widget of a kind the resolver does not know how to inspect."""

    kind: str


Widget = Union[BarItem, GenericControl, Unclassified]
