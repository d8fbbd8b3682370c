from __future__ import annotations

import argparse
import logging
from itertools import islice
from pathlib import Path

from vuplan.analysis import MAX_GAP_PERCENTILE_USERS, ScheduleSummary, per_second, summarize
from vuplan.config import load_schedule_config
from vuplan.errors import InvalidParameter
from vuplan.schedule import schedule_for
from vuplan.utils.logger import configure_logger


def _print_summary(summary: ScheduleSummary) -> None:
    print(f"Total users: {summary.total_users}")
    print(f"Duration: {summary.duration_sec:.3f}s")
    print(f"Offsets: {summary.first_offset_sec:.3f}s .. {summary.last_offset_sec:.3f}s")
    print(f"Peak users/sec: {summary.peak_users_per_sec}")
    print(f"Mean users/sec: {summary.mean_users_per_sec:.3f}")
    if summary.p50_gap_ms is None:
        print(f"Gap p50/p95/p99: skipped above {MAX_GAP_PERCENTILE_USERS} users")
        return
    print(
        f"Gap p50/p95/p99: {summary.p50_gap_ms:.3f}/{summary.p95_gap_ms:.3f}/"
        f"{summary.p99_gap_ms:.3f} ms"
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Virtual user injection planner",
        epilog=(
            "The summary walks every offset once in constant memory; gap percentiles "
            f"are only computed for plans of at most {MAX_GAP_PERCENTILE_USERS} users."
        ),
    )
    parser.add_argument("plan", type=Path, help="JSON plan listing injection profiles")
    parser.add_argument("--per-second", action="store_true", help="Print users injected per second")
    parser.add_argument("--head", type=int, default=0, help="Print the first N injections")
    parser.add_argument(
        "--no-summary",
        action="store_true",
        help="Only print the total user count instead of walking the whole schedule",
    )
    parser.add_argument("--verbose", action="store_true")

    args = parser.parse_args(argv)
    logger = configure_logger(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = load_schedule_config(args.plan)
        schedule = schedule_for(config)
    except InvalidParameter as exc:
        parser.error(f"invalid plan: {exc}")
    except (OSError, ValueError) as exc:
        parser.error(f"cannot read plan {args.plan}: {exc}")

    logger.debug("Loaded %d profiles from %s", len(config.profiles), args.plan)
    if args.no_summary:
        print(f"Total users: {schedule.total_users}")
        print(f"Duration: {schedule.duration_sec:.3f}s")
    else:
        _print_summary(summarize(schedule))
    if args.per_second:
        print(per_second(schedule).to_string(index=False))
    for injection in islice(schedule.injections(), max(args.head, 0)):
        print(f"{injection.user_index}\t{injection.offset_sec:.6f}")


if __name__ == "__main__":
    main()
