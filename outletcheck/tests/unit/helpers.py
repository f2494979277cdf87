from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from outletcheck.domain.widgets import ControlEvent


class BarButtonItemStub:
    def __init__(self, target: Any = None, action: Any = None) -> None:
        self.target = target
        self.action = action


class ControlStub:
    """Control with a target -> event -> handler names table."""

    def __init__(self) -> None:
        self._table: List[Tuple[Any, ControlEvent, str]] = []

    def add_target(self, target: Any, action: str, event: ControlEvent) -> None:
        self._table.append((target, event, action))

    def all_targets(self) -> List[Any]:
        targets: List[Any] = []
        for target, _event, _action in self._table:
            if not any(t is target for t in targets):
                targets.append(target)
        return targets

    def actions_for_target(self, target: Any, event: ControlEvent) -> Optional[List[str]]:
        names = [a for t, e, a in self._table if t is target and e is event]
        return names or None


class LabelStub:
    def __init__(self, text: str = "") -> None:
        self.text = text


class ImageViewStub:
    pass


class EditorController:
    """Controller with a toolbar item, a slider, a segmented control and a label."""

    def __init__(self) -> None:
        self.save_button = BarButtonItemStub(target=self, action="save_tapped")
        self.cancel_button = BarButtonItemStub(target=self, action="cancel_tapped")
        self.slider = ControlStub()
        self.slider.add_target(self, "slider_moved", ControlEvent.VALUE_CHANGED)
        self.segments = ControlStub()
        self.segments.add_target(self, "segment_tapped", ControlEvent.TOUCH_UP_INSIDE)
        self.segments.add_target(self, "segment_changed", ControlEvent.VALUE_CHANGED)
        self.title_label = LabelStub("Editor")
        self.preview = ImageViewStub()
        self.detail_label: Optional[LabelStub] = None

    def save_tapped(self, sender: Any) -> None:
        pass

    def cancel_tapped(self, sender: Any) -> None:
        pass

    def slider_moved(self, sender: Any) -> None:
        pass


def bag_controller(widgets: Dict[str, Any]) -> Any:
    class _BagController:
        def __init__(self) -> None:
            self.widgets = dict(widgets)

    return _BagController()


__all__ = [
    "BarButtonItemStub",
    "ControlStub",
    "EditorController",
    "ImageViewStub",
    "LabelStub",
    "bag_controller",
]
