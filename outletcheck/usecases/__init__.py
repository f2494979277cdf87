"""Use-case layer for outlet and action verification.

Each module coordinates the lookup and classifier ports and reports unmet
expectations through a failure sink without raising.
"""

from .resolve_action import ResolveAction
from .resolve_outlet import ResolveOutlet

__all__ = ["ResolveAction", "ResolveOutlet"]
