from __future__ import annotations

from vuplan.schedule.chain import Injection, Schedule, chain, compose, schedule_for

__all__ = ["Injection", "Schedule", "chain", "compose", "schedule_for"]
