from __future__ import annotations

import logging

import pytest

from outletcheck.domain.errors import WiringAssertionError
from outletcheck.domain.failures import (
    FailureCollector,
    FailureKind,
    expect_equal,
    expect_identical,
    expect_not_none,
)


def test_collector_keeps_order_and_duplicates() -> None:
    failures = FailureCollector()

    failures.fail(FailureKind.MISSING_OUTLET, "a outlet was None")
    failures.fail(FailureKind.TARGET_MISMATCH, "a target was None")
    failures.fail(FailureKind.MISSING_OUTLET, "a outlet was None")

    assert failures.messages() == ["a outlet was None", "a target was None", "a outlet was None"]
    assert len(failures.of_kind(FailureKind.MISSING_OUTLET)) == 2


def test_empty_collector_is_still_truthy() -> None:
    failures = FailureCollector()

    assert failures
    assert len(failures) == 0


def test_assert_clean_lists_every_failure() -> None:
    failures = FailureCollector()
    failures.fail(FailureKind.UNHANDLED_CONTROL, "Unhandled control type: Label")
    failures.fail(FailureKind.HANDLER_MISSING, "tap action not found on title")

    with pytest.raises(WiringAssertionError) as excinfo:
        failures.assert_clean()

    message = str(excinfo.value)
    assert message.startswith("2 wiring failures:")
    assert "[unhandled_control] Unhandled control type: Label" in message
    assert "[handler_missing] tap action not found on title" in message
    assert len(excinfo.value.failures) == 2


def test_assert_clean_passes_and_clear_resets() -> None:
    failures = FailureCollector()
    failures.assert_clean()

    failures.fail(FailureKind.TYPE_MISMATCH, "x")
    failures.clear()

    failures.assert_clean()


def test_wiring_error_is_an_assertion_error() -> None:
    assert issubclass(WiringAssertionError, AssertionError)


def test_recorded_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    failures = FailureCollector()

    with caplog.at_level(logging.WARNING, logger="outletcheck"):
        failures.fail(FailureKind.MISSING_OUTLET, "btn outlet was None")

    assert "missing_outlet: btn outlet was None" in caplog.text


def test_expect_identical_uses_identity() -> None:
    failures = FailureCollector()
    expected = {"a": 1}

    assert expect_identical(failures, expected, expected) is True
    assert expect_identical(failures, {"a": 1}, expected) is False
    assert [f.kind for f in failures] == [FailureKind.TARGET_MISMATCH]


def test_expect_not_none_and_equal_route_through_sink() -> None:
    failures = FailureCollector()

    assert expect_not_none(failures, "x") is True
    assert expect_not_none(failures, None, message="missing") is False
    assert expect_equal(failures, "a", "a") is True
    assert expect_equal(failures, "a", "b") is False

    assert failures.messages() == ["missing", "expected 'b', got 'a'"]
    assert [f.kind for f in failures] == [FailureKind.HANDLER_MISSING, FailureKind.HANDLER_MISMATCH]
