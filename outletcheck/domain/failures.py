"""Non-fatal failure recording for outlet and action checks."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Optional

from .errors import WiringAssertionError
from .ports import FailureSink

_log = logging.getLogger(__name__)


class FailureKind(str, Enum):
    MISSING_OUTLET = "missing_outlet"
    TYPE_MISMATCH = "type_mismatch"
    UNHANDLED_CONTROL = "unhandled_control"
    TARGET_MISMATCH = "target_mismatch"
    HANDLER_MISSING = "handler_missing"
    HANDLER_MISMATCH = "handler_mismatch"


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str

    def __str__(self) -> str:
        return self.message


class FailureCollector:
    """Ordered list of failures recorded during one test step.

    Failures are never deduplicated: running the same check twice records its
    failures twice.
    """

    def __init__(self) -> None:
        self._failures: List[Failure] = []

    def fail(self, kind: FailureKind, message: str) -> None:
        _log.warning("%s: %s", kind.value, message)
        self._failures.append(Failure(kind=kind, message=message))

    @property
    def failures(self) -> List[Failure]:
        return list(self._failures)

    def messages(self) -> List[str]:
        return [failure.message for failure in self._failures]

    def of_kind(self, kind: FailureKind) -> List[Failure]:
        return [failure for failure in self._failures if failure.kind is kind]

    def clear(self) -> None:
        self._failures.clear()

    def assert_clean(self) -> None:
        """Raise ``WiringAssertionError`` if any failure was recorded."""
        if self._failures:
            raise WiringAssertionError(self._failures)

    def __len__(self) -> int:
        return len(self._failures)

    def __iter__(self) -> Iterator[Failure]:
        return iter(list(self._failures))

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"FailureCollector({len(self._failures)} failures)"


# ---- Expectations routed through a sink ----
def expect_identical(
    sink: FailureSink,
    actual: Any,
    expected: Any,
    *,
    kind: FailureKind = FailureKind.TARGET_MISMATCH,
    message: Optional[str] = None,
) -> bool:
    """Record ``kind`` unless ``actual is expected``."""
    if actual is expected:
        return True
    sink.fail(kind, message or f"expected {expected!r}, got {actual!r}")
    return False


def expect_not_none(
    sink: FailureSink,
    value: Any,
    *,
    kind: FailureKind = FailureKind.HANDLER_MISSING,
    message: Optional[str] = None,
) -> bool:
    if value is not None:
        return True
    sink.fail(kind, message or "expected a value, got None")
    return False


def expect_equal(
    sink: FailureSink,
    actual: Any,
    expected: Any,
    *,
    kind: FailureKind = FailureKind.HANDLER_MISMATCH,
    message: Optional[str] = None,
) -> bool:
    if actual == expected:
        return True
    sink.fail(kind, message or f"expected {expected!r}, got {actual!r}")
    return False
