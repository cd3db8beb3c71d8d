#!/usr/bin/env python3
"""
build_tiers.py: build the H-1B sponsor tier rosters from an LCA filings CSV.

Aggregates the DOL disclosure file by employer, ranks by priority score and
writes ``companies.json`` plus the four tier rosters under DATA_ROOT (configured
in .env, defaults to ./data). With ``--seed`` the rosters are also written to the
configured store (Upstash Redis when KV_REST_API_URL/KV_REST_API_TOKEN are set).

Usage:
    uv run python build_tiers.py <filings.csv> [--seed]

Example:
    uv run python build_tiers.py data/LCA_Disclosure_Data_FY2024.csv --seed
"""

from __future__ import annotations

import json
import os
import sys
import time

# Ensure the src/ directory is on the path so sponsorscout imports resolve
# when running this script directly from the repo root.
_SRC = os.path.join(os.path.dirname(__file__), "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

TOP_N = 10


def main() -> None:
    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    flags = {a for a in sys.argv[1:] if a.startswith("--")}
    if len(args) != 1 or flags - {"--seed"}:
        print("Usage: uv run python build_tiers.py <filings.csv> [--seed]")
        sys.exit(1)

    csv_path = args[0]
    seed = "--seed" in flags
    start = time.time()

    # ------------------------------------------------------------------ imports
    # Deferred so sys.path manipulation above takes effect first.
    from sponsorscout.config import settings, tiering_config
    from sponsorscout.services.company_dedupe import tier_counts
    from sponsorscout.services.repository import DataRepository
    from sponsorscout.services.storage import LocalFileStore, StorageError, create_store, tier_key
    from sponsorscout.services.tier_builder import TierBuilder, tier_documents
    from sponsorscout.utils.file_storage import save_file
    from sponsorscout.utils.logger import setup_logger
    from sponsorscout.utils.timestamp import utc_now_iso

    setup_logger(settings.log_level)

    print(f"📄  Filings   : {csv_path}")
    print(f"📁  Data root : {settings.data_root}")
    print()

    # ---------------------------------------------------------- step 1: build
    builder = TierBuilder(tiering_config)
    try:
        companies = builder.build_from_file(csv_path)
    except OSError as exc:
        print(f"❌  Cannot read filings file: {exc}", file=sys.stderr)
        sys.exit(1)

    if not companies:
        print(
            f"❌  No companies built from {builder.rows_seen} rows "
            f"({builder.rows_skipped} skipped). Is EMPLOYER_NAME present?",
            file=sys.stderr,
        )
        sys.exit(1)

    generated_at = utc_now_iso()
    counts = tier_counts(companies)
    documents = tier_documents(companies, generated_at)

    # ------------------------------------------------------ step 2: write files
    all_path = save_file(
        json.dumps(
            {
                "generatedAt": generated_at,
                "totalCompanies": len(companies),
                "tierCounts": counts,
                "companies": [c.to_document() for c in companies],
            },
            indent=2,
        ),
        "companies.json",
    )
    print(f"    ✓ All companies → {all_path}")

    local = DataRepository(LocalFileStore(settings.data_root))
    errors = local.seed_all(tiers=documents)
    for tier in documents:
        print(f"    ✓ {tier.value:<6} tier   → {local.store.path_for(tier_key(tier.value))}")

    # ------------------------------------------------------- step 3: seed store
    if seed:
        if not settings.redis_configured:
            print("⚠️   --seed given but Redis is not configured; local files only")
        else:
            try:
                errors += DataRepository(create_store(settings)).seed_all(tiers=documents)
            except StorageError as exc:
                print(f"❌  Seeding failed: {exc}", file=sys.stderr)
                sys.exit(1)
            print("    ✓ Seeded tier rosters into Redis")

    if errors:
        for error in errors:
            print(f"❌  {error}", file=sys.stderr)
        sys.exit(1)

    # ---------------------------------------------------------------- summary
    elapsed = round(time.time() - start, 1)
    print()
    print("✅  Tiers built!")
    print(f"    Rows      : {builder.rows_seen:,} ({builder.rows_skipped:,} skipped)")
    print(f"    Companies : {len(companies):,}")
    for tier, count in counts.items():
        print(f"    {tier:<9} : {count:,}")
    print(f"    Time      : {elapsed}s")
    print()
    print(f"    {'#':>3}  {'Company':<40} {'LCAs':>7} {'Approval':>9} {'Score':>9}  Tier")
    for rank, company in enumerate(companies[:TOP_N], start=1):
        print(
            f"    {rank:>3}  {company.name[:40]:<40} {company.lca_count:>7,} "
            f"{company.approval_rate:>9.0%} {company.priority_score:>9.2f}  {company.tier.value}"
        )


if __name__ == "__main__":
    main()
