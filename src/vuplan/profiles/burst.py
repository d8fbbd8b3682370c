from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterator

from vuplan.config import ProfileType
from vuplan.errors import require_positive_int
from vuplan.profiles.base import ProfileBase


@dataclass(frozen=True, slots=True)
class BurstProfile(ProfileBase):
    users: int
    user_count: int = field(init=False)

    profile_type: ClassVar[ProfileType] = ProfileType.BURST

    def __post_init__(self) -> None:
        require_positive_int(self.users, "users")
        object.__setattr__(self, "user_count", self.users)

    @property
    def duration_sec(self) -> float:
        return 0.0

    def offsets(self) -> Iterator[float]:
        for _ in range(self.users):
            yield 0.0
