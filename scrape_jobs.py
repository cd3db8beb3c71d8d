#!/usr/bin/env python3
"""
scrape_jobs.py: scrape every roster employer's ATS and store the job batch.

Runs one orchestrator pass without requiring the FastAPI server: Greenhouse,
Lever, Ashby and Workday boards are polled one at a time, titles are keyword
filtered, postings older than the configured recency window are dropped and the
batch is written to the store. Ctrl+C stops after the current employer and
keeps what was collected.

Usage:
    uv run python scrape_jobs.py [--merge]

Example:
    uv run python scrape_jobs.py --merge
"""

from __future__ import annotations

import asyncio
import os
import signal
import sys
import time

# Ensure the src/ directory is on the path so sponsorscout imports resolve
# when running this script directly from the repo root.
_SRC = os.path.join(os.path.dirname(__file__), "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

MAX_ERRORS_SHOWN = 10


async def main() -> None:
    flags = set(sys.argv[1:])
    if flags - {"--merge"}:
        print("Usage: uv run python scrape_jobs.py [--merge]")
        sys.exit(1)
    merge = "--merge" in flags
    start = time.time()

    # ------------------------------------------------------------------ imports
    # Deferred so sys.path manipulation above takes effect first.
    from sponsorscout.config import scraping_config, settings
    from sponsorscout.dependencies import build_orchestrator
    from sponsorscout.services.orchestrator import refresh_jobs
    from sponsorscout.services.repository import DataRepository
    from sponsorscout.services.storage import StorageError, create_store
    from sponsorscout.utils.logger import setup_logger

    setup_logger(settings.log_level)

    repository = DataRepository(create_store(settings))
    orchestrator = build_orchestrator(repository)

    cancel = asyncio.Event()
    try:
        asyncio.get_running_loop().add_signal_handler(signal.SIGINT, cancel.set)
    except NotImplementedError:
        pass  # Windows event loops; Ctrl+C aborts instead

    mode = "merge" if merge else "replace"
    print(f"🌐  Scraping  : tier rosters + built-in employer lists ({mode})")
    print(f"⏱️   Recency   : {scraping_config.recency_days} days")
    print()

    try:
        outcome = await refresh_jobs(
            orchestrator,
            repository,
            scraping_config.recency_days,
            merge=merge,
            cancel_event=cancel,
        )
    except StorageError as exc:
        print(f"❌  Storage failure: {exc}", file=sys.stderr)
        sys.exit(1)

    summary = outcome.summary
    elapsed = round(time.time() - start, 1)
    print()
    print("⚠️   Scrape cancelled, partial results stored" if summary.cancelled else "✅  Scrape complete!")
    print(f"    Employers : {summary.companies_scraped} scraped, {summary.companies_with_jobs} with jobs")
    print(f"    Jobs      : {summary.filtered_jobs} matched of {summary.total_jobs} found")
    print(f"    Retained  : {outcome.retained_jobs} ({outcome.removed_old_jobs} older than {scraping_config.recency_days} days)")
    print(f"    Stored    : {outcome.batch.total_jobs}")
    for tier, count in summary.tier_breakdown.items():
        print(f"    {tier:<9} : {count} jobs")
    print(f"    Time      : {elapsed}s")

    for note in summary.notes:
        print(f"    ℹ️  {note}")
    if summary.errors:
        print(f"    ❌  {len(summary.errors)} errors")
        for error in summary.errors[:MAX_ERRORS_SHOWN]:
            print(f"       - {error}")


if __name__ == "__main__":
    asyncio.run(main())
