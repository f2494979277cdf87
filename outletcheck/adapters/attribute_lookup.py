from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

_MISSING = object()


class AttributeLookup:
    """Read outlets through Python attribute access.

    ``AttributeError`` raised by the attribute (or a property getter) means
    the outlet is absent; any other exception propagates.
    """

    def lookup(self, obj: object, name: str) -> Optional[object]:
        value = getattr(obj, name, _MISSING)
        if value is _MISSING:
            return None
        return value


@dataclass
class MappingLookup:
    """Read outlets from a property bag.

    Attributes:
        attribute: Name of the mapping attribute on the controller (for
            example ``"widgets"``). ``None`` treats the controller itself as
            the mapping.
    """

    attribute: Optional[str] = None

    def lookup(self, obj: object, name: str) -> Optional[object]:
        bag = obj if self.attribute is None else getattr(obj, self.attribute, None)
        if not isinstance(bag, Mapping):
            return None
        return bag.get(name)
