"""Drive the ATS adapters across the employer rosters for one scrape run."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass, field

from loguru import logger

from sponsorscout.config import ScrapingConfig
from sponsorscout.schemas.company import ROSTER_TIERS, Company, Tier
from sponsorscout.schemas.job import Job, JobsData, Platform, ScrapeSummary
from sponsorscout.services.job_filters import (
    DEFAULT_EXCLUDED_KEYWORDS,
    DEFAULT_TARGET_ROLES,
    filter_jobs,
    filter_recent,
)
from sponsorscout.services.repository import DataRepository
from sponsorscout.services.sources.registry import AdapterRegistry
from sponsorscout.services.sources.rosters import SECONDARY_ROSTERS, RosterEntry
from sponsorscout.utils.timestamp import utc_now_iso


@dataclass
class RosterTarget:
    """One employer to scrape."""

    platform: Platform
    token: str
    company_id: str
    company_name: str
    tier: Tier | None = None


@dataclass
class _RunState:
    """Mutable accumulators for a single run."""

    jobs: list[Job] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)
    seen: set[tuple[Platform, str]] = field(default_factory=set)
    tier_breakdown: dict[str, int] = field(default_factory=dict)
    companies_scraped: int = 0
    companies_with_jobs: int = 0
    cancelled: bool = False


def roster_targets(companies_by_tier: Mapping[Tier, list[Company]]) -> list[RosterTarget]:
    """
    Turn tier rosters into scrape targets.

    Only companies with a non-custom platform and a platform token take part.
    """
    targets: list[RosterTarget] = []
    for tier in ROSTER_TIERS:
        for company in companies_by_tier.get(tier, []):
            if company.platform is None or company.platform is Platform.CUSTOM:
                continue
            token = company.platform_token()
            if not token:
                continue
            targets.append(
                RosterTarget(company.platform, token, company.id, company.name, tier)
            )
    return targets


def secondary_targets(
    rosters: Mapping[Platform, Mapping[str, RosterEntry]],
) -> list[RosterTarget]:
    return [
        RosterTarget(platform, token, entry.id, entry.name)
        for platform, entries in rosters.items()
        for token, entry in entries.items()
    ]


class ScrapeOrchestrator:
    """
    Sequential scrape of every roster employer.

    One adapter call at a time with a fixed pause after each call, so no ATS host
    is hit twice without that spacing. A failing employer only adds an entry to
    the error log; the run itself fails only when the tier rosters cannot be
    read at all.
    """

    def __init__(
        self,
        repository: DataRepository,
        registry: AdapterRegistry,
        config: ScrapingConfig | None = None,
        target_roles: list[str] | None = None,
        excluded_keywords: list[str] | None = None,
        secondary_rosters: Mapping[Platform, Mapping[str, RosterEntry]] | None = None,
    ) -> None:
        """
        Initialize the orchestrator.

        Args:
            repository: Source of the tier rosters
            registry: Platform to adapter dispatch table
            config: Scraping configuration (uses defaults if not provided)
            target_roles: Keyword filter roles (built-in defaults if None)
            excluded_keywords: Keyword filter exclusions (built-in defaults if None)
            secondary_rosters: Hard-coded employers per platform scraped after the
                tier rosters (built-in lists if None)
        """
        self.repository = repository
        self.registry = registry
        self.config = config or ScrapingConfig()
        self.target_roles = (
            list(DEFAULT_TARGET_ROLES) if target_roles is None else target_roles
        )
        self.excluded_keywords = (
            list(DEFAULT_EXCLUDED_KEYWORDS) if excluded_keywords is None else excluded_keywords
        )
        self.secondary_rosters = (
            SECONDARY_ROSTERS if secondary_rosters is None else secondary_rosters
        )

    def load_roster(self) -> list[RosterTarget]:
        """
        Read the four tier rosters from the store.

        Raises:
            StorageError: If the store cannot be read
        """
        companies_by_tier: dict[Tier, list[Company]] = {}
        for tier, data in self.repository.get_all_tiers().items():
            if data is None:
                logger.warning("No {}-tier roster stored; skipping", tier.value)
                continue
            companies_by_tier[tier] = data.companies
        return roster_targets(companies_by_tier)

    async def _scrape_target(self, target: RosterTarget, state: _RunState) -> None:
        key = (target.platform, target.token.lower())
        if key in state.seen:
            logger.debug("Already scraped {} {}", target.platform.value, target.token)
            return
        state.seen.add(key)

        adapter = self.registry.get(target.platform)
        state.companies_scraped += 1
        try:
            result = await adapter.fetch(target.token, target.company_id, target.company_name)
        except Exception as e:
            # Adapters are not supposed to raise; keep the run alive if one does
            logger.exception("{} adapter raised for {}", adapter.label, target.company_name)
            state.errors.append(f"{target.company_name}: {adapter.label} adapter error: {e}")
        else:
            if result.success:
                state.jobs.extend(result.jobs)
                if result.jobs:
                    state.companies_with_jobs += 1
                    if target.tier is not None:
                        tier = target.tier.value
                        state.tier_breakdown[tier] = (
                            state.tier_breakdown.get(tier, 0) + len(result.jobs)
                        )
                if result.note:
                    state.notes.append(f"{target.company_name}: {result.note}")
            else:
                state.errors.append(f"{target.company_name}: {result.error}")

        await asyncio.sleep(self.config.rate_limit_delay_seconds)

    async def run_all(
        self, cancel_event: asyncio.Event | None = None
    ) -> tuple[list[Job], ScrapeSummary]:
        """
        Scrape the tier rosters, then the secondary rosters, then keyword-filter.

        Args:
            cancel_event: Checked before each employer; when set, the run stops
                and returns what it has collected so far

        Returns:
            Filtered jobs and the run summary

        Raises:
            StorageError: If the tier rosters cannot be read
        """
        state = _RunState()
        # Store clients are synchronous; keep their I/O off the event loop
        roster = await asyncio.to_thread(self.load_roster)
        targets = roster + secondary_targets(self.secondary_rosters)
        logger.info("Scraping up to {} employers", len(targets))

        for target in targets:
            if cancel_event is not None and cancel_event.is_set():
                logger.warning("Scrape cancelled after {} employers", state.companies_scraped)
                state.cancelled = True
                break
            if target.platform not in self.registry:
                logger.debug("No adapter for {}; skipping {}", target.platform.value, target.company_name)
                continue
            await self._scrape_target(target, state)

        filtered = filter_jobs(state.jobs, self.target_roles, self.excluded_keywords)
        summary = ScrapeSummary(
            total_jobs=len(state.jobs),
            filtered_jobs=len(filtered),
            companies_scraped=state.companies_scraped,
            companies_with_jobs=state.companies_with_jobs,
            errors=state.errors,
            notes=state.notes,
            tier_breakdown=state.tier_breakdown,
            cancelled=state.cancelled,
            scraped_at=utc_now_iso(),
        )
        logger.info(
            "Scrape finished: {} of {} jobs matched, {} employers, {} errors",
            summary.filtered_jobs,
            summary.total_jobs,
            summary.companies_scraped,
            len(summary.errors),
        )
        return filtered, summary


@dataclass
class RefreshOutcome:
    """What a scrape-and-store pass produced."""

    summary: ScrapeSummary
    retained_jobs: int
    removed_old_jobs: int
    batch: JobsData


async def refresh_jobs(
    orchestrator: ScrapeOrchestrator,
    repository: DataRepository,
    recency_days: int,
    merge: bool = False,
    cancel_event: asyncio.Event | None = None,
) -> RefreshOutcome:
    """
    Run a scrape, drop stale postings and store the batch in one write.

    Args:
        orchestrator: Configured orchestrator
        repository: Where the batch is stored
        recency_days: Retention window for ``filter_recent``
        merge: Union with the stored batch instead of replacing it
        cancel_event: Forwarded to ``run_all``

    Returns:
        The run summary with retention counts and the stored batch
    """
    jobs, summary = await orchestrator.run_all(cancel_event=cancel_event)
    recent = filter_recent(jobs, recency_days)
    removed = len(jobs) - len(recent)
    logger.info("Removed {} jobs older than {} days", removed, recency_days)

    batch_summary = {
        **summary.to_document(),
        "retainedJobs": len(recent),
        "filteredOldJobs": removed,
    }
    if merge:
        batch = await asyncio.to_thread(repository.add_jobs, recent, summary=batch_summary)
    else:
        batch = JobsData(
            last_scraped=summary.scraped_at,
            total_jobs=len(recent),
            jobs=recent,
            summary=batch_summary,
        )
        await asyncio.to_thread(repository.set_jobs, batch)

    return RefreshOutcome(
        summary=summary,
        retained_jobs=len(recent),
        removed_old_jobs=removed,
        batch=batch,
    )
