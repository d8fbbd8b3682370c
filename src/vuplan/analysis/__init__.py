from __future__ import annotations

from vuplan.analysis.density import MAX_GAP_PERCENTILE_USERS, ScheduleSummary, per_second, summarize

__all__ = ["MAX_GAP_PERCENTILE_USERS", "ScheduleSummary", "per_second", "summarize"]
