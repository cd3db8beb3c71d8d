"""Domain operations over the key-value store: job batches, tier rosters, career URLs."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from loguru import logger

from sponsorscout.schemas.company import ROSTER_TIERS, Company, Tier, TierData
from sponsorscout.schemas.job import Job, JobsData
from sponsorscout.services.job_filters import merge_job_batches
from sponsorscout.services.storage import JOBS_KEY, KeyValueStore, tier_key

# Keys left behind by older versions of the app
LEGACY_LINK_PREFIX = "company-links:"
LEGACY_COMPANIES_KEY = "data:companies"


class DataRepository:
    """
    Typed access to the stored documents.

    Every write is a single full-document ``set``. Field-level edits such as
    career URL changes are read-modify-write with no locking, so two concurrent
    editors of the same tier document can lose an update.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    # ------------------------------------------------------------------ jobs

    def get_jobs(self) -> JobsData | None:
        raw = self.store.get(JOBS_KEY)
        return JobsData.model_validate(raw) if raw is not None else None

    def set_jobs(self, data: JobsData) -> bool:
        return self.store.set(JOBS_KEY, data.to_document())

    def add_jobs(
        self,
        new_jobs: list[Job],
        now: datetime | None = None,
        summary: dict[str, Any] | None = None,
    ) -> JobsData:
        """
        Merge jobs into the stored batch by id and save it.

        The stored summary is kept unless a new ``summary`` is given.

        Returns:
            The merged batch that was written
        """
        merged = merge_job_batches(new_jobs, self.get_jobs(), now=now)
        if summary is not None:
            merged.summary = summary
        self.set_jobs(merged)
        return merged

    def delete_job(self, job_id: str) -> bool:
        """
        Remove one job from the stored batch.

        Returns:
            True if the job existed and the batch was rewritten
        """
        data = self.get_jobs()
        if data is None:
            return False
        remaining = [j for j in data.jobs if j.id != job_id]
        if len(remaining) == len(data.jobs):
            return False
        data.jobs = remaining
        data.total_jobs = len(remaining)
        return self.set_jobs(data)

    # ----------------------------------------------------------------- tiers

    def get_tier(self, tier: Tier) -> TierData | None:
        raw = self.store.get(tier_key(tier.value))
        return TierData.model_validate(raw) if raw is not None else None

    def set_tier(self, tier: Tier, data: TierData) -> bool:
        return self.store.set(tier_key(tier.value), data.to_document())

    def get_all_tiers(self) -> dict[Tier, TierData | None]:
        return {tier: self.get_tier(tier) for tier in ROSTER_TIERS}

    def get_company_from_tiers(self, company_id: str) -> tuple[Company, Tier] | None:
        """Find a company and the roster it lives in, searching top tier first."""
        for tier in ROSTER_TIERS:
            data = self.get_tier(tier)
            if data is None:
                continue
            for company in data.companies:
                if company.id == company_id:
                    return company, tier
        return None

    def update_company_in_tier(
        self, company_id: str, updates: dict[str, Any]
    ) -> tuple[Company, Tier] | None:
        """
        Apply field updates to a company and rewrite its tier document.

        Args:
            company_id: Company to update
            updates: Attribute names (snake_case) and new values

        Returns:
            The updated company and its tier, or None if it was not found
        """
        for tier in ROSTER_TIERS:
            data = self.get_tier(tier)
            if data is None:
                continue
            for index, company in enumerate(data.companies):
                if company.id == company_id:
                    updated = company.model_copy(update=updates)
                    data.companies[index] = updated
                    self.set_tier(tier, data)
                    return updated, tier
        return None

    # ----------------------------------------------------------- career URLs

    def get_career_urls(self, company_id: str) -> list[str] | None:
        found = self.get_company_from_tiers(company_id)
        return list(found[0].career_urls) if found else None

    def add_career_url(self, company_id: str, url: str) -> list[str] | None:
        """
        Append a career URL unless it is already present.

        Returns:
            The company's URLs after the change, or None if the company is unknown
        """
        current = self.get_career_urls(company_id)
        if current is None:
            return None
        if url in current:
            return current
        return self.set_career_urls(company_id, [*current, url])

    def remove_career_url(self, company_id: str, url: str) -> list[str] | None:
        current = self.get_career_urls(company_id)
        if current is None:
            return None
        return self.set_career_urls(company_id, [u for u in current if u != url])

    def set_career_urls(self, company_id: str, urls: list[str]) -> list[str] | None:
        """Replace a company's career URLs; blank entries are dropped."""
        cleaned = [u.strip() for u in urls if u.strip()]
        updated = self.update_company_in_tier(company_id, {"career_urls": cleaned})
        return list(updated[0].career_urls) if updated else None

    # ----------------------------------------------------------------- admin

    def seed_all(
        self,
        tiers: dict[Tier, TierData] | None = None,
        jobs: JobsData | None = None,
    ) -> list[str]:
        """
        Write tier rosters and/or a job batch in bulk.

        Returns:
            Error messages for documents that failed to save (empty on success)
        """
        errors: list[str] = []
        for tier, data in (tiers or {}).items():
            if not self.set_tier(tier, data):
                errors.append(f"Failed to seed {tier.value}-tier")
        if jobs is not None and not self.set_jobs(jobs):
            errors.append("Failed to seed jobs")
        return errors

    def clear_all(self) -> bool:
        for key in [JOBS_KEY, *(tier_key(t.value) for t in ROSTER_TIERS)]:
            self.store.delete(key)
        logger.warning("Cleared all stored jobs and tier rosters")
        return True

    def cleanup_unused_keys(self) -> list[str]:
        """
        Delete keys written by older versions of the app.

        Returns:
            The keys that were deleted
        """
        deleted: list[str] = []
        for key in self.store.list_keys_by_prefix(LEGACY_LINK_PREFIX):
            if self.store.delete(key):
                deleted.append(key)
        if self.store.delete(LEGACY_COMPANIES_KEY):
            deleted.append(LEGACY_COMPANIES_KEY)
        return deleted

    def get_data_stats(self) -> dict[str, Any]:
        jobs = self.get_jobs()
        has_tiers: dict[str, bool] = {}
        tier_counts: dict[str, int] = {}
        for tier, data in self.get_all_tiers().items():
            has_tiers[tier.value] = data is not None
            tier_counts[tier.value] = data.count if data else 0
        return {
            "hasJobs": jobs is not None,
            "hasTiers": has_tiers,
            "tierCounts": tier_counts,
            "jobsCount": jobs.total_jobs if jobs else 0,
            "totalCompanies": sum(tier_counts.values()),
        }
