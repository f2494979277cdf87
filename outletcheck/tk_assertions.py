"""tkinter flavoured outlet and action checks."""

from __future__ import annotations

from typing import Any, Optional

from .adapters.attribute_lookup import AttributeLookup
from .adapters.tk_widgets import (
    BUTTON_TYPES,
    CHECKBUTTON_TYPES,
    COMBOBOX_TYPES,
    ENTRY_TYPES,
    LABEL_TYPES,
    SCALE_TYPES,
    TkWidgetClassifier,
)
from .assertions import ActionCheck, collector_or_default, typed_outlet
from .domain.failures import FailureCollector
from .domain.ports import NamedAttributeLookup, WidgetClassifier

button_outlet = typed_outlet(BUTTON_TYPES)
label_outlet = typed_outlet(LABEL_TYPES)
checkbutton_outlet = typed_outlet(CHECKBUTTON_TYPES)
combobox_outlet = typed_outlet(COMBOBOX_TYPES)
scale_outlet = typed_outlet(SCALE_TYPES)
entry_outlet = typed_outlet(ENTRY_TYPES)


def action(
    controller: Any,
    failures: Optional[FailureCollector] = None,
    *,
    lookup: Optional[NamedAttributeLookup] = None,
    classifier: Optional[WidgetClassifier] = None,
) -> ActionCheck:
    """Like ``outletcheck.assertions.action`` but reads tkinter dispatch tables."""
    return ActionCheck(
        controller,
        collector_or_default(failures),
        lookup or AttributeLookup(),
        classifier or TkWidgetClassifier(),
    )


__all__ = [
    "action",
    "button_outlet",
    "checkbutton_outlet",
    "combobox_outlet",
    "entry_outlet",
    "label_outlet",
    "scale_outlet",
]
