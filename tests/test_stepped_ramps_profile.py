from __future__ import annotations

from itertools import islice

import pytest

from vuplan.errors import InvalidParameter
from vuplan.profiles import IdleProfile, RampProfile, SteppedRampsProfile


def test_stepped_ramps_with_partial_remainder() -> None:
    profile = SteppedRampsProfile(7, 3, 4.0, 2.0)
    assert profile.user_count == 7
    assert profile.full_ramps == 2
    assert profile.partial_users == 1
    assert list(profile.offsets()) == pytest.approx([0.0, 2.0, 4.0, 6.0, 8.0, 10.0, 12.0])
    assert profile.duration_sec == pytest.approx(14.0)


def test_stepped_ramps_segments() -> None:
    segments = list(SteppedRampsProfile(7, 3, 4.0, 2.0).segments())
    assert segments == [
        RampProfile(3, 4.0),
        IdleProfile(2.0),
        RampProfile(3, 4.0),
        IdleProfile(2.0),
        RampProfile(1, 2.0),
    ]


def test_stepped_ramps_without_remainder_keeps_trailing_pause() -> None:
    profile = SteppedRampsProfile(6, 3, 4.0, 2.0)
    assert list(profile.produce([0.0])) == pytest.approx([0.0, 2.0, 4.0, 6.0, 8.0, 10.0, 12.0])


def test_partial_ramp_keeps_full_ramp_spacing() -> None:
    profile = SteppedRampsProfile(3, 5, 8.0, 1.0)
    assert profile.full_ramps == 0
    assert list(profile.offsets()) == pytest.approx([0.0, 2.0, 4.0])
    assert profile.duration_sec == pytest.approx(4.0)


def test_stepped_ramps_stream_huge_user_counts() -> None:
    profile = SteppedRampsProfile(10**12, 1, 1.0, 0.0)
    assert profile.user_count == 10**12
    assert list(islice(profile.offsets(), 3)) == [0.0, 1.0, 2.0]


@pytest.mark.parametrize(
    ("users", "users_per_ramp", "field"),
    [(0, 3, "users"), (5, 0, "users_per_ramp"), (-3, 1, "users")],
)
def test_stepped_ramps_validation(users: int, users_per_ramp: int, field: str) -> None:
    with pytest.raises(InvalidParameter) as info:
        SteppedRampsProfile(users, users_per_ramp, 1.0, 1.0)
    assert info.value.field == field
