from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterator

from vuplan.config import ProfileType
from vuplan.errors import require_non_negative, require_positive_int
from vuplan.profiles.base import InjectionProfile, ProfileBase, chained_offsets
from vuplan.profiles.idle import IdleProfile
from vuplan.profiles.ramp import RampProfile


@dataclass(frozen=True, slots=True)
class SteppedRampsProfile(ProfileBase):
    """Full ramps of ``users_per_ramp`` users, each followed by a pause, then a partial ramp.

    The partial ramp carries ``users % users_per_ramp`` users at the same
    spacing as a full ramp.
    """

    users: int
    users_per_ramp: int
    ramp_duration_sec: float
    pause_duration_sec: float
    user_count: int = field(init=False)
    duration_sec: float = field(init=False)

    profile_type: ClassVar[ProfileType] = ProfileType.STEPPED_RAMPS

    def __post_init__(self) -> None:
        require_positive_int(self.users, "users")
        require_positive_int(self.users_per_ramp, "users_per_ramp")
        require_non_negative(self.ramp_duration_sec, "ramp_duration_sec")
        require_non_negative(self.pause_duration_sec, "pause_duration_sec")
        object.__setattr__(self, "user_count", self.users)
        duration = self.full_ramps * (self.ramp_duration_sec + self.pause_duration_sec)
        if self.partial_users:
            duration += self.partial_duration_sec
        object.__setattr__(self, "duration_sec", duration)

    @property
    def full_ramps(self) -> int:
        return self.users // self.users_per_ramp

    @property
    def partial_users(self) -> int:
        return self.users % self.users_per_ramp

    @property
    def partial_duration_sec(self) -> float:
        interval = self.ramp_duration_sec / max(self.users_per_ramp - 1, 1)
        return interval * max(self.partial_users - 1, 1)

    def segments(self) -> Iterator[InjectionProfile]:
        if self.full_ramps:
            ramp = RampProfile(self.users_per_ramp, self.ramp_duration_sec)
            pause = IdleProfile(self.pause_duration_sec)
            for _ in range(self.full_ramps):
                yield ramp
                yield pause
        if self.partial_users:
            yield RampProfile(self.partial_users, self.partial_duration_sec)

    def offsets(self) -> Iterator[float]:
        # Segment shifts accumulate by addition while duration_sec multiplies.
        for offset in chained_offsets(self.segments()):
            yield min(offset, self.duration_sec)
