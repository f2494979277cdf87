from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from ..domain.failures import (
    FailureKind,
    expect_equal,
    expect_identical,
    expect_not_none,
)
from ..domain.ports import FailureSink, WidgetClassifier
from ..domain.widgets import SUPPORTED_EVENTS, BarItem, GenericControl, Unclassified
from .resolve_outlet import ResolveOutlet

_log = logging.getLogger(__name__)


@dataclass
class ResolveAction:
    resolve_outlet: ResolveOutlet
    classifier: WidgetClassifier
    failures: FailureSink

    def __call__(self, controller: Any, expected_action: str, source_outlet: str) -> None:
        """Check that ``source_outlet`` sends ``expected_action`` to ``controller``.

        Every unmet expectation is recorded independently; a missing outlet
        still runs the target and handler checks against ``None``.
        """
        if not isinstance(expected_action, str) or not expected_action.strip():
            raise ValueError("action name must be a non-empty string")

        widget = self.resolve_outlet(controller, source_outlet)
        target, action = (None, None)
        if widget is not None:
            target, action = self._target_and_action(widget, expected_action)

        expect_identical(
            self.failures,
            target,
            controller,
            kind=FailureKind.TARGET_MISMATCH,
            message=(
                f"{source_outlet} target was {_describe(target)}, "
                f"expected {type(controller).__name__} instance"
            ),
        )
        found = expect_not_none(
            self.failures,
            action,
            kind=FailureKind.HANDLER_MISSING,
            message=f"{expected_action} action not found on {source_outlet}",
        )
        if found:
            expect_equal(
                self.failures,
                action,
                expected_action,
                kind=FailureKind.HANDLER_MISMATCH,
                message=f"{source_outlet} action was {action}, expected {expected_action}",
            )

    def _target_and_action(
        self, widget: Any, expected_action: str
    ) -> Tuple[Any, Optional[str]]:
        variant = self.classifier.classify(widget)

        if isinstance(variant, BarItem):
            return variant.target, variant.action

        if isinstance(variant, GenericControl):
            # Only the first registered target is inspected.
            target = variant.first_target()
            if target is None:
                return None, None
            candidates = variant.candidate_actions(target, SUPPORTED_EVENTS)
            _log.debug("Candidate actions for %s: %s", expected_action, candidates)
            matching = next((name for name in candidates if name == expected_action), None)
            return target, matching

        if isinstance(variant, Unclassified):
            self.failures.fail(
                FailureKind.UNHANDLED_CONTROL, f"Unhandled control type: {variant.kind}"
            )
        return None, None


def _describe(target: Any) -> str:
    if target is None:
        return "None"
    return f"{type(target).__name__} instance"
