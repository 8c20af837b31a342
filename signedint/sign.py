"""The sign of a signed big integer."""

from __future__ import annotations

import enum
import functools
from typing import Any


@functools.total_ordering
class Sign(enum.Enum):
    """Sign of an integer, ordered MINUS < NO_SIGN < PLUS."""

    MINUS = -1
    NO_SIGN = 0
    PLUS = 1

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Sign):
            return NotImplemented
        return self.value < other.value

    def __neg__(self) -> Sign:
        return Sign(-self.value)

    def __mul__(self, other: Any) -> Sign:
        if not isinstance(other, Sign):
            return NotImplemented
        return Sign(self.value * other.value)

    @classmethod
    def of(cls, value: Any) -> Sign:
        """Return the sign of a number."""
        if value > 0:
            return cls.PLUS
        if value < 0:
            return cls.MINUS
        return cls.NO_SIGN