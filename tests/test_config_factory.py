from __future__ import annotations

import json
from pathlib import Path

import pytest

from vuplan.config import ProfileConfig, ProfileType, ScheduleConfig, load_schedule_config
from vuplan.errors import InvalidParameter
from vuplan.profiles import BurstProfile, RampRateProfile, SteppedRampsProfile, profile_for
from vuplan.schedule import schedule_for


def _plan() -> ScheduleConfig:
    return ScheduleConfig(
        profiles=(
            ProfileConfig(ProfileType.BURST, {"users": 2}),
            ProfileConfig(ProfileType.IDLE, {"duration_sec": 1.0}),
            ProfileConfig(ProfileType.RAMP, {"users": 3, "duration_sec": 10.0}),
            ProfileConfig(ProfileType.CONSTANT_RATE, {"rate": 1.0, "duration_sec": 2.0}),
            ProfileConfig(ProfileType.RAMP_RATE, {"start_rate": 1.0, "end_rate": 3.0, "duration_sec": 1.0}),
            ProfileConfig(
                ProfileType.STEPPED_RAMPS,
                {"users": 5, "users_per_ramp": 2, "ramp_duration_sec": 1.0, "pause_duration_sec": 0.5},
            ),
        ),
        notes="smoke",
    )


def test_profile_for_builds_each_shape() -> None:
    assert profile_for(ProfileConfig(ProfileType.BURST, {"users": 3})) == BurstProfile(3)
    built = profile_for(
        ProfileConfig(ProfileType.RAMP_RATE, {"start_rate": 1.0, "end_rate": 2.0, "duration_sec": 4.0})
    )
    assert isinstance(built, RampRateProfile)
    stepped = profile_for(
        ProfileConfig(
            ProfileType.STEPPED_RAMPS,
            {"users": 7, "users_per_ramp": 3, "ramp_duration_sec": 4.0, "pause_duration_sec": 2.0},
        )
    )
    assert isinstance(stepped, SteppedRampsProfile)


def test_profile_for_rejects_unknown_params() -> None:
    with pytest.raises(InvalidParameter) as info:
        profile_for(ProfileConfig(ProfileType.BURST, {"users": 3, "duration_sec": 1.0}))
    assert info.value.field == "params"


def test_schedule_for_sums_users() -> None:
    schedule = schedule_for(_plan())
    assert schedule.total_users == 2 + 3 + 2 + 2 + 5
    assert len(list(schedule)) == schedule.total_users


def test_schedule_for_fails_fast_on_invalid_profile() -> None:
    config = ScheduleConfig(
        profiles=(
            ProfileConfig(ProfileType.BURST, {"users": 2}),
            ProfileConfig(ProfileType.RAMP, {"users": 0, "duration_sec": 10.0}),
        )
    )
    with pytest.raises(InvalidParameter, match="users must be strictly positive"):
        schedule_for(config)


def test_metadata_round_trip() -> None:
    config = _plan()
    restored = ScheduleConfig.from_metadata(json.loads(json.dumps(config.to_metadata())))
    assert restored.profiles == config.profiles
    assert restored.notes == "smoke"
    assert restored.created_at == config.created_at


def test_unknown_profile_type_is_rejected() -> None:
    with pytest.raises(InvalidParameter, match="type must be one of"):
        ScheduleConfig.from_metadata({"profiles": [{"type": "sawtooth", "params": {}}]})


def test_load_schedule_config(tmp_path: Path) -> None:
    plan = tmp_path / "plan.json"
    plan.write_text(
        json.dumps({"profiles": [{"type": "ramp", "params": {"users": 4, "duration_sec": 3}}]}),
        encoding="utf-8",
    )
    config = load_schedule_config(plan)
    assert config.profiles == (ProfileConfig(ProfileType.RAMP, {"users": 4, "duration_sec": 3}),)
    assert config.run_id is None


def test_profile_for_rejects_unknown_type() -> None:
    with pytest.raises(InvalidParameter) as info:
        profile_for(ProfileConfig("sawtooth", {}))  # type: ignore[arg-type]
    assert info.value.field == "type"
    assert "must be one of burst" in str(info.value)


def test_profile_entry_must_be_a_mapping() -> None:
    with pytest.raises(InvalidParameter) as info:
        ScheduleConfig.from_metadata({"profiles": [1]})
    assert info.value.field == "profile"


@pytest.mark.parametrize("created_at", [123, "yesterday"])
def test_created_at_must_be_iso_string(created_at: object) -> None:
    with pytest.raises(InvalidParameter) as info:
        ScheduleConfig.from_metadata({"profiles": [], "created_at": created_at})
    assert info.value.field == "created_at"
