"""Target-action registration and classification for tkinter widgets.

tkinter turns every Python callback into an opaque Tcl command name, so a
widget cannot be asked afterwards which handler it will invoke. Views that
want their wiring to be verifiable register actions through ``add_target``;
the adapter keeps a per-widget dispatch table, installs a single Tk callback
per event, and lets the classifier read the table back.
"""

from __future__ import annotations

import logging
import tkinter as tk
import weakref
from dataclasses import dataclass, field
from tkinter import ttk
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..domain.widgets import ControlEvent, GenericControl, Widget
from .duck_widgets import DuckTypedClassifier, action_name

_log = logging.getLogger(__name__)

BUTTON_TYPES: Tuple[type, ...] = (tk.Button, ttk.Button)
LABEL_TYPES: Tuple[type, ...] = (tk.Label, ttk.Label)
CHECKBUTTON_TYPES: Tuple[type, ...] = (tk.Checkbutton, ttk.Checkbutton)
RADIOBUTTON_TYPES: Tuple[type, ...] = (tk.Radiobutton, ttk.Radiobutton)
COMBOBOX_TYPES: Tuple[type, ...] = (ttk.Combobox,)
SCALE_TYPES: Tuple[type, ...] = (tk.Scale, ttk.Scale)
SPINBOX_TYPES: Tuple[type, ...] = (tk.Spinbox, ttk.Spinbox)
ENTRY_TYPES: Tuple[type, ...] = (tk.Entry, ttk.Entry)
LISTBOX_TYPES: Tuple[type, ...] = (tk.Listbox,)

# Widgets whose ``command`` option fires for the given event.
_COMMAND_EVENTS: Sequence[Tuple[Tuple[type, ...], ControlEvent]] = (
    (BUTTON_TYPES, ControlEvent.TOUCH_UP_INSIDE),
    (CHECKBUTTON_TYPES, ControlEvent.VALUE_CHANGED),
    (RADIOBUTTON_TYPES, ControlEvent.VALUE_CHANGED),
    (SCALE_TYPES, ControlEvent.VALUE_CHANGED),
    (SPINBOX_TYPES, ControlEvent.VALUE_CHANGED),
)

# Widgets that are controls even before any action is registered.
CONTROL_TYPES: Tuple[type, ...] = (
    BUTTON_TYPES
    + CHECKBUTTON_TYPES
    + RADIOBUTTON_TYPES
    + COMBOBOX_TYPES
    + SCALE_TYPES
    + SPINBOX_TYPES
    + ENTRY_TYPES
    + LISTBOX_TYPES
)

_SEQUENCES: Dict[ControlEvent, str] = {
    ControlEvent.TOUCH_DOWN: "<ButtonPress-1>",
    ControlEvent.TOUCH_UP_INSIDE: "<ButtonRelease-1>",
    ControlEvent.EDITING_CHANGED: "<KeyRelease>",
    ControlEvent.PRIMARY_ACTION_TRIGGERED: "<Return>",
}

_VALUE_CHANGED_SEQUENCES: Sequence[Tuple[Tuple[type, ...], str]] = (
    (COMBOBOX_TYPES, "<<ComboboxSelected>>"),
    (LISTBOX_TYPES, "<<ListboxSelect>>"),
    ((ttk.Treeview,), "<<TreeviewSelect>>"),
    ((ttk.Notebook,), "<<NotebookTabChanged>>"),
)


@dataclass
class _Registration:
    target: Any
    action: str
    event: ControlEvent


@dataclass
class _DispatchTable:
    registrations: List[_Registration] = field(default_factory=list)
    installed: Dict[ControlEvent, str] = field(default_factory=dict)


_TABLES: "weakref.WeakKeyDictionary[tk.Misc, _DispatchTable]" = weakref.WeakKeyDictionary()


def command_event(widget: tk.Misc) -> Optional[ControlEvent]:
    """Return the event the widget's ``command`` option fires for, if any."""
    for types, event in _COMMAND_EVENTS:
        if isinstance(widget, types):
            return event
    return None


def event_sequence(widget: tk.Misc, event: ControlEvent) -> str:
    """Return the Tk event sequence bound for ``event`` on ``widget``.

    Raises:
        ValueError: Tk never fires ``event`` for this kind of widget.
    """
    if event is ControlEvent.VALUE_CHANGED:
        for types, sequence in _VALUE_CHANGED_SEQUENCES:
            if isinstance(widget, types):
                return sequence
    if event not in _SEQUENCES:
        raise ValueError(f"{type(widget).__name__} does not fire {event.value}")
    return _SEQUENCES[event]


def _dispatch(widget: tk.Misc, event: ControlEvent) -> None:
    table = _TABLES.get(widget)
    if table is None:
        return
    for registration in list(table.registrations):
        if registration.event is event:
            getattr(registration.target, registration.action)(widget)


def _install(widget: tk.Misc, table: _DispatchTable, event: ControlEvent) -> None:
    if event in table.installed:
        return
    if command_event(widget) is event:
        # A command set by the view keeps running ahead of registered actions.
        previous = str(widget.cget("command") or "")

        def on_command(*args: Any) -> None:
            if previous:
                widget.tk.call(previous, *args)
            _dispatch(widget, event)

        widget.configure(command=on_command)
        table.installed[event] = "command"
    else:
        sequence = event_sequence(widget, event)
        widget.bind(sequence, lambda _tk_event: _dispatch(widget, event), add="+")
        table.installed[event] = sequence
    _log.debug("Installed %s dispatch on %s via %s", event.value, widget, table.installed[event])


def add_target(widget: tk.Misc, target: Any, action: Any, event: ControlEvent) -> None:
    """Register ``target.<action>(widget)`` to run when ``widget`` fires ``event``.

    Args:
        widget: tkinter widget that fires the event.
        target: Object receiving the action, usually the controller.
        action: Handler name, or a bound method whose name is used.
        event: Trigger event to register for.

    Raises:
        TypeError: ``widget`` is not a tkinter widget.
        ValueError: ``action`` does not name a handler, or the widget never
            fires ``event``.
    """
    if not isinstance(widget, tk.Misc):
        raise TypeError(f"{type(widget).__name__} is not a tkinter widget")
    name = action_name(action)
    if not name:
        raise ValueError("action must be a non-empty handler name")
    event = ControlEvent(event)
    if command_event(widget) is not event:
        event_sequence(widget, event)
    table = _TABLES.setdefault(widget, _DispatchTable())
    _install(widget, table, event)
    table.registrations.append(_Registration(target=target, action=name, event=event))


def remove_target(
    widget: tk.Misc,
    target: Any,
    action: Any = None,
    event: Optional[ControlEvent] = None,
) -> None:
    """Drop registrations for ``target``, optionally narrowed by action and event."""
    table = _TABLES.get(widget) if isinstance(widget, tk.Misc) else None
    if table is None:
        return
    name = action_name(action)
    table.registrations = [
        r
        for r in table.registrations
        if not (
            r.target is target
            and (name is None or r.action == name)
            and (event is None or r.event is event)
        )
    ]


def all_targets(widget: tk.Misc) -> List[Any]:
    """Registered targets in registration order, each listed once."""
    table = _TABLES.get(widget) if isinstance(widget, tk.Misc) else None
    if table is None:
        return []
    targets: List[Any] = []
    for registration in table.registrations:
        if not any(existing is registration.target for existing in targets):
            targets.append(registration.target)
    return targets


def actions_for_target(widget: tk.Misc, target: Any, event: ControlEvent) -> Optional[List[str]]:
    """Handler names registered for ``target`` on ``event``; ``None`` if there are none."""
    table = _TABLES.get(widget) if isinstance(widget, tk.Misc) else None
    if table is None:
        return None
    names = [
        r.action for r in table.registrations if r.target is target and r.event is event
    ]
    return names or None


class TkWidgetClassifier:
    """Classify tkinter widgets, deferring other objects to duck typing."""

    def __init__(self, fallback: Optional[DuckTypedClassifier] = None) -> None:
        self._fallback = fallback or DuckTypedClassifier()

    def classify(self, widget: Any) -> Widget:
        if isinstance(widget, tk.Misc) and (
            widget in _TABLES or isinstance(widget, CONTROL_TYPES)
        ):
            return GenericControl(
                targets=all_targets(widget),
                actions_for=lambda target, event: actions_for_target(widget, target, event),
            )
        return self._fallback.classify(widget)


__all__ = [
    "BUTTON_TYPES",
    "CHECKBUTTON_TYPES",
    "COMBOBOX_TYPES",
    "CONTROL_TYPES",
    "ENTRY_TYPES",
    "LABEL_TYPES",
    "LISTBOX_TYPES",
    "RADIOBUTTON_TYPES",
    "SCALE_TYPES",
    "SPINBOX_TYPES",
    "TkWidgetClassifier",
    "actions_for_target",
    "add_target",
    "all_targets",
    "command_event",
    "event_sequence",
    "remove_target",
]
