from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

import numpy as np
import pandas as pd

from vuplan.schedule import Schedule

# Gap percentiles keep every gap in memory; larger schedules skip them.
MAX_GAP_PERCENTILE_USERS = 1_000_000


@dataclass(frozen=True, slots=True)
class ScheduleSummary:
    total_users: int
    duration_sec: float
    first_offset_sec: float
    last_offset_sec: float
    peak_users_per_sec: int
    mean_users_per_sec: float
    p50_gap_ms: float | None
    p95_gap_ms: float | None
    p99_gap_ms: float | None


def per_second(schedule: Schedule) -> pd.DataFrame:
    counts: Counter[int] = Counter()
    for offset in schedule:
        counts[int(offset)] += 1
    seconds = range(max(counts) + 1) if counts else range(0)
    users = [counts.get(s, 0) for s in seconds]
    frame = pd.DataFrame({"second": list(seconds), "users": users}, dtype="int64")
    frame["cumulative_users"] = frame["users"].cumsum()
    return frame


def summarize(schedule: Schedule) -> ScheduleSummary:
    """Stream the schedule once; memory stays constant above ``MAX_GAP_PERCENTILE_USERS``."""
    keep_gaps = schedule.total_users <= MAX_GAP_PERCENTILE_USERS
    gaps_ms = np.empty(max(schedule.total_users - 1, 0) if keep_gaps else 0, dtype=float)
    count = 0
    first = last = 0.0
    current_second = -1
    in_second = peak = 0
    for offset in schedule:
        if count == 0:
            first = offset
        elif keep_gaps:
            gaps_ms[count - 1] = (offset - last) * 1000.0
        second = int(offset)
        if second != current_second:
            current_second, in_second = second, 0
        in_second += 1
        peak = max(peak, in_second)
        last = offset
        count += 1

    p50 = p95 = p99 = None
    if keep_gaps:
        if gaps_ms.size:
            p50, p95, p99 = (float(np.percentile(gaps_ms, q)) for q in (50, 95, 99))
        else:
            p50 = p95 = p99 = 0.0
    span = max(schedule.duration_sec, last)
    if count == 0:
        mean = 0.0
    else:
        mean = count / span if span > 0 else float(count)
    return ScheduleSummary(
        total_users=count,
        duration_sec=schedule.duration_sec,
        first_offset_sec=first,
        last_offset_sec=last,
        peak_users_per_sec=peak,
        mean_users_per_sec=mean,
        p50_gap_ms=p50,
        p95_gap_ms=p95,
        p99_gap_ms=p99,
    )
