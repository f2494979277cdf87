"""pytest integration: a per-test failure collector that fails the test.

Enable with ``pytest_plugins = ["outletcheck.pytest_plugin"]`` in a conftest.
Checks built by ``outletcheck.assertions`` inside a test record into that
test's collector; once the test body returns, every recorded failure is
reported together.
"""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from .assertions import use_collector
from .domain.errors import WiringAssertionError
from .domain.failures import FailureCollector
from .utils.logging import LOGGER_NAME, configure, level_name

_log = logging.getLogger(__name__)

collector_key = pytest.StashKey[FailureCollector]()
_previous_level_key = pytest.StashKey[int]()


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addini(
        "outletcheck_log_level",
        "Level of the outletcheck logger (OUTLETCHECK_LOG_LEVEL overrides).",
        default="WARNING",
    )
    parser.addini(
        "outletcheck_fail_on_report",
        "Fail tests that recorded outlet/action failures.",
        type="bool",
        default=True,
    )


def pytest_configure(config: pytest.Config) -> None:
    config.stash[_previous_level_key] = logging.getLogger(LOGGER_NAME).level
    level = configure(config.getini("outletcheck_log_level"))
    _log.debug("outletcheck logging at %s", level_name(level))


def pytest_unconfigure(config: pytest.Config) -> None:
    previous = config.stash.get(_previous_level_key, None)
    if previous is not None:
        logging.getLogger(LOGGER_NAME).setLevel(previous)


def pytest_report_header(config: pytest.Config) -> str:
    level = logging.getLogger(LOGGER_NAME).getEffectiveLevel()
    return f"outletcheck: log level {level_name(level)}"


@pytest.fixture(autouse=True)
def wiring(request: pytest.FixtureRequest) -> Iterator[FailureCollector]:
    """Failure collector of the running test."""
    collector = FailureCollector()
    request.node.stash[collector_key] = collector
    with use_collector(collector):
        yield collector


@pytest.hookimpl(wrapper=True)
def pytest_runtest_call(item: pytest.Item):
    collector = item.stash.get(collector_key, None)
    try:
        result = yield
    except BaseException:
        if collector is not None and len(collector):
            item.add_report_section(
                "call", "outletcheck", "\n".join(f"[{f.kind.value}] {f.message}" for f in collector)
            )
        raise
    if collector is not None and len(collector) and item.config.getini("outletcheck_fail_on_report"):
        raise WiringAssertionError(collector.failures)
    return result
