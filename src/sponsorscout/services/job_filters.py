"""Keyword and recency filters plus batch merging for scraped jobs."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from sponsorscout.schemas.job import Job, JobsData
from sponsorscout.utils.timestamp import parse_timestamp, to_iso, utc_now

# Broad engineering, cloud, DevOps and ML titles
DEFAULT_TARGET_ROLES: tuple[str, ...] = (
    "software engineer",
    "software developer",
    "engineer",
    "developer",
    "sde",
    "swe",
    "backend",
    "systems engineer",
    "infrastructure",
    "platform engineer",
    "cloud engineer",
    "cloud architect",
    "solutions architect",
    "devops",
    "sre",
    "site reliability",
    "devsecops",
    "machine learning",
    "ml engineer",
    "ai engineer",
    "data scientist",
    "data engineer",
    "genai",
    "full stack",
    "fullstack",
    "frontend",
    "front end",
    "golang",
    "python",
    "typescript",
    "node.js",
    "aws",
    "gcp",
    "azure",
    "terraform",
    "kubernetes",
)

# Executive titles and non-technical roles
DEFAULT_EXCLUDED_KEYWORDS: tuple[str, ...] = (
    "senior director",
    "director",
    "vp",
    "vice president",
    "chief",
    "head of",
    "cto",
    "cio",
    "recruiter",
    "hr ",
    "sales",
    "marketing",
    "customer success",
)


def parse_keyword_list(raw: str | None, defaults: tuple[str, ...] | list[str]) -> list[str]:
    """
    Split a comma-separated keyword setting.

    Args:
        raw: Comma-separated keywords, or None when unset
        defaults: Keywords to use when ``raw`` is unset or blank

    Returns:
        Lower-cased, trimmed keywords with empty entries removed

    Examples:
        >>> parse_keyword_list(" Engineer, SRE ,,", ())
        ['engineer', 'sre']
    """
    if raw is None or not raw.strip():
        return [k.lower() for k in defaults]
    return [part.strip().lower() for part in raw.split(",") if part.strip()]


def filter_jobs(
    jobs: list[Job],
    target_roles: list[str],
    excluded_keywords: list[str],
) -> list[Job]:
    """
    Keep jobs whose title matches a target role and no excluded keyword.

    Matching is plain substring containment on the lower-cased title, so a role
    such as ``"sre"`` also matches inside unrelated words.

    Args:
        jobs: Jobs to classify
        target_roles: Role substrings, at least one of which must appear
        excluded_keywords: Substrings that disqualify a title

    Returns:
        The matching jobs in their original order
    """
    roles = [r.lower() for r in target_roles]
    excluded = [k.lower() for k in excluded_keywords]

    kept: list[Job] = []
    for job in jobs:
        title = job.title.lower()
        if any(role in title for role in roles) and not any(k in title for k in excluded):
            kept.append(job)
    return kept


def filter_recent(jobs: list[Job], days: int, now: datetime | None = None) -> list[Job]:
    """
    Drop jobs posted more than ``days`` days ago.

    Jobs without a usable ``posted_at`` are kept: an unknown date is not proof
    that a posting is stale.

    Args:
        jobs: Jobs to filter
        days: Retention window in days
        now: Reference time (defaults to the current UTC time)

    Returns:
        Jobs inside the window plus jobs with unknown posting dates
    """
    cutoff = (now or utc_now()) - timedelta(days=days)
    if cutoff.tzinfo is None:
        cutoff = cutoff.replace(tzinfo=timezone.utc)

    kept: list[Job] = []
    for job in jobs:
        posted = parse_timestamp(job.posted_at)
        if posted is None or posted >= cutoff:
            kept.append(job)
    return kept


def merge_job_batches(
    new_jobs: list[Job],
    existing: JobsData | None,
    now: datetime | None = None,
) -> JobsData:
    """
    Union a fresh scrape into a previously stored batch.

    Jobs are keyed by id; a new job replaces a stored job with the same id but
    keeps the stored job's position. Merging the same jobs twice gives the same
    batch as merging them once.

    Args:
        new_jobs: Jobs from the latest run
        existing: Previously stored batch, if any
        now: Timestamp for ``lastScraped`` (defaults to the current UTC time)

    Returns:
        The merged batch with a recomputed total
    """
    merged: dict[str, Job] = {}
    for job in existing.jobs if existing else []:
        merged[job.id] = job
    for job in new_jobs:
        merged[job.id] = job

    jobs = list(merged.values())
    return JobsData(
        last_scraped=to_iso(now or utc_now()),
        total_jobs=len(jobs),
        jobs=jobs,
        summary=existing.summary if existing else None,
    )
