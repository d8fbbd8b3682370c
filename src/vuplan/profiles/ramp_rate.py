from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, Iterator

from vuplan.config import ProfileType
from vuplan.errors import require_positive
from vuplan.profiles.base import ProfileBase
from vuplan.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RampRateProfile(ProfileBase):
    """Injection rate moving linearly from ``start_rate`` to ``end_rate`` users/sec.

    Users injected by time ``t`` follow ``u(t) = start_rate * t + a * t**2`` with
    ``a = (end_rate - start_rate) / (2 * duration_sec)``; the k-th user starts at
    the smallest non-negative ``t`` with ``u(t) == k``.
    """

    start_rate: float
    end_rate: float
    duration_sec: float
    user_count: int = field(init=False)

    profile_type: ClassVar[ProfileType] = ProfileType.RAMP_RATE

    def __post_init__(self) -> None:
        require_positive(self.start_rate, "start_rate")
        require_positive(self.end_rate, "end_rate")
        require_positive(self.duration_sec, "duration_sec")
        users = round((self.start_rate + self.end_rate) / 2 * self.duration_sec)
        object.__setattr__(self, "user_count", users)
        if self.start_rate == self.end_rate:
            logger.warning(
                "start_rate equals end_rate (%s users/sec): quadratic term vanishes, "
                "scheduling at constant rate",
                self.start_rate,
            )

    @property
    def acceleration(self) -> float:
        return (self.end_rate - self.start_rate) / (2 * self.duration_sec)

    def offsets(self) -> Iterator[float]:
        a = self.acceleration
        b = self.start_rate
        b2 = b * b
        for k in range(self.user_count):
            if a == 0:
                yield k / b
                continue
            delta = max(b2 + 4 * a * k, 0.0)
            # (-b + sqrt(delta)) / (2a), rationalized to stay exact as a -> 0
            yield 2 * k / (b + math.sqrt(delta))
