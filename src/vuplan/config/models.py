from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

from vuplan.errors import InvalidParameter


class ProfileType(str, Enum):
    BURST = "burst"
    RAMP = "ramp"
    CONSTANT_RATE = "constant_rate"
    IDLE = "idle"
    RAMP_RATE = "ramp_rate"
    STEPPED_RAMPS = "stepped_ramps"


def unknown_type_constraint(raw_type: object) -> str:
    allowed = ", ".join(t.value for t in ProfileType)
    return f"must be one of {allowed}, got {raw_type!r}"


@dataclass(frozen=True, slots=True)
class ProfileConfig:
    profile_type: ProfileType
    params: Mapping[str, Any]

    def to_metadata(self) -> Mapping[str, Any]:
        return {"type": self.profile_type.value, "params": dict(self.params)}

    @classmethod
    def from_metadata(cls, data: Mapping[str, Any]) -> ProfileConfig:
        if not isinstance(data, Mapping):
            raise InvalidParameter("profile", f"must be a mapping, got {data!r}")
        raw_type = data.get("type")
        try:
            profile_type = ProfileType(raw_type)
        except (TypeError, ValueError):
            raise InvalidParameter("type", unknown_type_constraint(raw_type)) from None
        params = data.get("params", {})
        if not isinstance(params, Mapping):
            raise InvalidParameter("params", "must be a mapping")
        return cls(profile_type, dict(params))


@dataclass(frozen=True, slots=True)
class ScheduleConfig:
    profiles: tuple[ProfileConfig, ...]
    run_id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    notes: str = ""

    def to_metadata(self) -> Mapping[str, Any]:
        return {
            "run_id": self.run_id or "",
            "created_at": self.created_at.isoformat(),
            "notes": self.notes,
            "profiles": [p.to_metadata() for p in self.profiles],
        }

    @classmethod
    def from_metadata(cls, data: Mapping[str, Any]) -> ScheduleConfig:
        raw_profiles = data.get("profiles")
        if not isinstance(raw_profiles, list):
            raise InvalidParameter("profiles", "must be a list")
        profiles = tuple(ProfileConfig.from_metadata(p) for p in raw_profiles)
        created_at = data.get("created_at")
        kwargs: dict[str, Any] = {}
        if created_at:
            if not isinstance(created_at, str):
                raise InvalidParameter("created_at", "must be an ISO 8601 string")
            try:
                kwargs["created_at"] = datetime.fromisoformat(created_at)
            except ValueError:
                raise InvalidParameter("created_at", "must be an ISO 8601 string") from None
        return cls(
            profiles=profiles,
            run_id=data.get("run_id") or None,
            notes=data.get("notes", ""),
            **kwargs,
        )


def load_schedule_config(path: Path) -> ScheduleConfig:
    with path.open(encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, Mapping):
        raise InvalidParameter("plan", "must be a JSON object")
    return ScheduleConfig.from_metadata(data)
