"""Errors raised when recorded wiring failures are turned into a test result.

Resolvers never raise these; they only record failures. The error is raised
once a caller asks a collector to be clean.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List

if TYPE_CHECKING:
    from .failures import Failure


class WiringAssertionError(AssertionError):
    """One or more outlet/action expectations were not met."""

    def __init__(self, failures: Iterable["Failure"]):
        self.failures: List["Failure"] = list(failures)
        count = len(self.failures)
        header = f"{count} wiring failure{'s' if count != 1 else ''}"
        lines = [f"  [{f.kind.value}] {f.message}" for f in self.failures]
        super().__init__("\n".join([header + ":", *lines]) if lines else header)
