from __future__ import annotations

from typing import Iterable, Iterator, Protocol

from vuplan.config import ProfileType


class InjectionProfile(Protocol):
    """One injection shape: its own users plus a forward shift of whatever follows it."""

    profile_type: ProfileType

    @property
    def user_count(self) -> int:
        ...

    @property
    def duration_sec(self) -> float:
        ...

    def offsets(self) -> Iterator[float]:
        ...

    def produce(self, continuation: Iterable[float]) -> Iterator[float]:
        ...


class ProfileBase:
    __slots__ = ()

    def offsets(self) -> Iterator[float]:
        return iter(())

    def produce(self, continuation: Iterable[float]) -> Iterator[float]:
        yield from self.offsets()
        shift = self.duration_sec  # type: ignore[attr-defined]
        for offset in continuation:
            yield offset + shift


def chained_offsets(
    profiles: Iterable[InjectionProfile],
    continuation: Iterable[float] = (),
) -> Iterator[float]:
    """Yield the offsets of ``profiles`` laid end to end, then the shifted continuation.

    Equivalent to ``p0.produce(p1.produce(... pn.produce(continuation)))`` but
    walks the profiles in a flat loop, so the chain length never grows the
    generator stack.
    """
    shift = 0.0
    for profile in profiles:
        for offset in profile.offsets():
            yield shift + offset
        shift += profile.duration_sec
    for offset in continuation:
        yield shift + offset
