from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from vuplan.config import ProfileType
from vuplan.errors import require_non_negative
from vuplan.profiles.base import ProfileBase


@dataclass(frozen=True, slots=True)
class IdleProfile(ProfileBase):
    duration_sec: float

    profile_type: ClassVar[ProfileType] = ProfileType.IDLE

    def __post_init__(self) -> None:
        require_non_negative(self.duration_sec, "duration_sec")

    @property
    def user_count(self) -> int:
        return 0
