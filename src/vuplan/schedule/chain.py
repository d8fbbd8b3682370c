from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from vuplan.config import ScheduleConfig
from vuplan.profiles import InjectionProfile, chained_offsets, profile_for
from vuplan.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Injection:
    user_index: int
    offset_sec: float


@dataclass(frozen=True, slots=True)
class Schedule:
    """Start offsets of every virtual user, relative to simulation start.

    Iterating recomputes the offsets from the profiles, lazily and in
    non-decreasing order; ``total_users`` is known without iterating.
    """

    profiles: tuple[InjectionProfile, ...]
    total_users: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "total_users", sum(p.user_count for p in self.profiles))

    @property
    def duration_sec(self) -> float:
        return sum((p.duration_sec for p in self.profiles), 0.0)

    def __len__(self) -> int:
        return self.total_users

    def __iter__(self) -> Iterator[float]:
        return chained_offsets(self.profiles)

    def injections(self) -> Iterator[Injection]:
        for index, offset in enumerate(self):
            yield Injection(user_index=index, offset_sec=offset)


def chain(profiles: Iterable[InjectionProfile], continuation: Iterable[float] = ()) -> Iterator[float]:
    return chained_offsets(profiles, continuation)


def compose(profiles: Iterable[InjectionProfile]) -> Schedule:
    schedule = Schedule(tuple(profiles))
    logger.debug(
        "Composed %d profiles: %d users over %.3fs",
        len(schedule.profiles),
        schedule.total_users,
        schedule.duration_sec,
    )
    return schedule


def schedule_for(config: ScheduleConfig) -> Schedule:
    return compose(profile_for(p) for p in config.profiles)
