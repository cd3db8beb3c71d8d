"""Service layer: storage, adapters, tiering and scrape orchestration."""

from sponsorscout.services.company_dedupe import dedupe_companies, tier_counts
from sponsorscout.services.job_filters import filter_jobs, filter_recent, merge_job_batches
from sponsorscout.services.orchestrator import ScrapeOrchestrator, refresh_jobs
from sponsorscout.services.repository import DataRepository
from sponsorscout.services.storage import (
    KeyValueStore,
    LocalFileStore,
    RedisStore,
    StorageError,
    create_store,
)
from sponsorscout.services.tier_builder import TierBuilder, priority_score, tier_documents

__all__ = [
    "DataRepository",
    "KeyValueStore",
    "LocalFileStore",
    "RedisStore",
    "ScrapeOrchestrator",
    "StorageError",
    "TierBuilder",
    "create_store",
    "dedupe_companies",
    "filter_jobs",
    "filter_recent",
    "merge_job_batches",
    "priority_score",
    "refresh_jobs",
    "tier_counts",
    "tier_documents",
]
