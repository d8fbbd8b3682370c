from __future__ import annotations

from vuplan.config.models import (
    ProfileConfig,
    ProfileType,
    ScheduleConfig,
    load_schedule_config,
)

__all__ = [
    "ProfileConfig",
    "ProfileType",
    "ScheduleConfig",
    "load_schedule_config",
]
