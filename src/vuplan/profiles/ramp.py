from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, Iterator

from vuplan.config import ProfileType
from vuplan.errors import require_non_negative, require_positive, require_positive_int
from vuplan.profiles.base import ProfileBase


@dataclass(frozen=True, slots=True)
class RampProfile(ProfileBase):
    users: int
    duration_sec: float
    user_count: int = field(init=False)

    profile_type: ClassVar[ProfileType] = ProfileType.RAMP

    def __post_init__(self) -> None:
        require_positive_int(self.users, "users")
        require_non_negative(self.duration_sec, "duration_sec")
        object.__setattr__(self, "user_count", self.users)

    @property
    def interval_sec(self) -> float:
        return self.duration_sec / max(self.users - 1, 1)

    def offsets(self) -> Iterator[float]:
        interval = self.interval_sec
        for k in range(self.users):
            # (users - 1) * interval may round past duration_sec
            yield min(k * interval, self.duration_sec)


@dataclass(frozen=True, slots=True)
class ConstantRateProfile(ProfileBase):
    rate: float
    duration_sec: float
    user_count: int = field(init=False)
    _ramp: RampProfile | None = field(init=False, repr=False, compare=False)

    profile_type: ClassVar[ProfileType] = ProfileType.CONSTANT_RATE

    def __post_init__(self) -> None:
        require_positive(self.rate, "rate")
        require_non_negative(self.duration_sec, "duration_sec")
        users = math.floor(self.duration_sec * self.rate)
        object.__setattr__(self, "user_count", users)
        ramp = RampProfile(users, self.duration_sec) if users > 0 else None
        object.__setattr__(self, "_ramp", ramp)

    def offsets(self) -> Iterator[float]:
        if self._ramp is None:
            return iter(())
        return self._ramp.offsets()
