"""Jobs API router - list, scrape and delete endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query

from sponsorscout.config import scraping_config
from sponsorscout.dependencies import get_orchestrator, get_repository
from sponsorscout.services.orchestrator import ScrapeOrchestrator, refresh_jobs
from sponsorscout.services.repository import DataRepository

router = APIRouter()


@router.get("/jobs")
def list_jobs(
    company: str | None = Query(default=None),
    location: str | None = Query(default=None),
    limit: int = Query(default=100, ge=1, le=5000),
    repository: DataRepository = Depends(get_repository),
) -> dict[str, Any]:
    """
    List the stored job batch.

    Args:
        company: Case-insensitive substring of the company name
        location: Case-insensitive substring of the job location
        limit: Maximum number of jobs returned

    Returns:
        Matching jobs with the batch metadata. ``totalJobs`` is the stored batch
        size and ``returnedJobs`` the number of jobs in this response after
        filtering and the limit. An empty payload with a message is returned
        when nothing has been scraped yet.
    """
    data = repository.get_jobs()
    if data is None:
        return {
            "jobs": [],
            "totalJobs": 0,
            "returnedJobs": 0,
            "lastScraped": None,
            "message": "No jobs found. Run a scrape first.",
        }

    jobs = data.jobs
    if company:
        needle = company.lower()
        jobs = [j for j in jobs if needle in j.company_name.lower()]
    if location:
        needle = location.lower()
        jobs = [j for j in jobs if needle in j.location.lower()]

    page = jobs[:limit]
    return {
        "jobs": [j.to_document() for j in page],
        "totalJobs": data.total_jobs,
        "returnedJobs": len(page),
        "lastScraped": data.last_scraped,
        "summary": data.summary,
    }


@router.post("/jobs/scrape")
async def scrape_jobs(
    merge: bool = Query(default=False),
    repository: DataRepository = Depends(get_repository),
    orchestrator: ScrapeOrchestrator = Depends(get_orchestrator),
) -> dict[str, Any]:
    """
    Scrape every roster employer, drop stale postings and store the batch.

    Args:
        merge: Union with the stored batch instead of replacing it

    Returns:
        Run summary with the retention counts.
    """
    outcome = await refresh_jobs(
        orchestrator,
        repository,
        scraping_config.recency_days,
        merge=merge,
    )
    return {
        "success": True,
        "summary": outcome.summary.to_document(),
        "retainedJobs": outcome.retained_jobs,
        "filteredOldJobs": outcome.removed_old_jobs,
        "storedJobs": outcome.batch.total_jobs,
    }


@router.delete("/jobs/{job_id}")
def delete_job(
    job_id: str,
    repository: DataRepository = Depends(get_repository),
) -> dict[str, Any]:
    """
    Remove one job from the stored batch.

    Raises:
        HTTPException 404: If the job is not in the batch.
    """
    if not repository.delete_job(job_id):
        raise HTTPException(status_code=404, detail="Job not found")
    return {"success": True, "jobId": job_id}
