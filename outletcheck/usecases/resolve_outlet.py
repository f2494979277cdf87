from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from ..domain.failures import FailureKind
from ..domain.ports import FailureSink, NamedAttributeLookup

_log = logging.getLogger(__name__)

ExpectedType = Union[type, Tuple[type, ...]]


def describe_type(expected: ExpectedType) -> str:
    if isinstance(expected, tuple):
        return " or ".join(t.__name__ for t in expected)
    return expected.__name__


@dataclass
class ResolveOutlet:
    lookup: NamedAttributeLookup
    failures: FailureSink

    def __call__(
        self,
        controller: Any,
        name: str,
        expected_type: Optional[ExpectedType] = None,
    ) -> Optional[Any]:
        """Return the object bound to outlet ``name`` on ``controller``.

        A missing outlet, or one bound to an object that is not an instance of
        ``expected_type``, is recorded in ``failures`` and yields ``None``.
        """
        if not isinstance(name, str) or not name.strip():
            raise ValueError("outlet name must be a non-empty string")

        value = self.lookup.lookup(controller, name)
        if value is None:
            self.failures.fail(FailureKind.MISSING_OUTLET, f"{name} outlet was None")
            return None

        _log.debug("%s outlet resolved to %s", name, type(value).__name__)

        if expected_type is not None and not isinstance(value, expected_type):
            self.failures.fail(
                FailureKind.TYPE_MISMATCH,
                f"{name} outlet was not a {describe_type(expected_type)} "
                f"(got {type(value).__name__})",
            )
            return None
        return value
