from __future__ import annotations

import math
from numbers import Real


class InvalidParameter(ValueError):
    def __init__(self, field: str, constraint: str) -> None:
        self.field = field
        self.constraint = constraint
        super().__init__(f"{field} {constraint}")


def _require_number(value: object, field: str) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameter(field, "must be a number")
    # ints are exact; math.isfinite overflows on ones past float range
    if not isinstance(value, int) and not math.isfinite(value):
        raise InvalidParameter(field, "must be finite")


def require_positive(value: float, field: str) -> None:
    _require_number(value, field)
    if not value > 0:
        raise InvalidParameter(field, "must be strictly positive")


def require_non_negative(value: float, field: str) -> None:
    _require_number(value, field)
    if not value >= 0:
        raise InvalidParameter(field, "must be non-negative")


def require_positive_int(value: int, field: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameter(field, "must be an integer")
    require_positive(value, field)
