"""Company roster router - tier rosters, combined company list and career URLs."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query

from sponsorscout.dependencies import get_repository
from sponsorscout.schemas.base import CamelModel
from sponsorscout.schemas.company import ROSTER_TIERS, Tier
from sponsorscout.services.company_dedupe import dedupe_companies, tier_counts
from sponsorscout.services.repository import DataRepository

router = APIRouter()


class CareerUrlRequest(CamelModel):
    """Schema for adding one career URL."""

    url: str


class CareerUrlsUpdate(CamelModel):
    """Schema for replacing all career URLs of a company."""

    urls: list[str]


def _career_urls_response(company_id: str, urls: list[str] | None) -> dict[str, Any]:
    if urls is None:
        raise HTTPException(status_code=404, detail="Company not found")
    return {"companyId": company_id, "careerUrls": urls}


@router.get("/tiers/{tier}")
def get_tier(
    tier: Tier,
    repository: DataRepository = Depends(get_repository),
) -> dict[str, Any]:
    """
    Get one stored tier roster.

    Raises:
        HTTPException 404: If the tier has not been seeded.
    """
    data = repository.get_tier(tier) if tier in ROSTER_TIERS else None
    if data is None:
        raise HTTPException(status_code=404, detail=f"No data for {tier.value} tier")
    return data.to_document()


@router.get("/companies")
def list_companies(repository: DataRepository = Depends(get_repository)) -> dict[str, Any]:
    """
    Combine the four tier rosters into one deduplicated list.

    Returns:
        Companies sorted by priority score, with per-tier counts.
    """
    combined = []
    for data in repository.get_all_tiers().values():
        if data is not None:
            combined.extend(data.companies)
    companies = dedupe_companies(combined)
    return {
        "companies": [c.to_document() for c in companies],
        "total": len(companies),
        "tierCounts": tier_counts(companies),
    }


@router.get("/companies/{company_id}/career-urls")
def get_career_urls(
    company_id: str,
    repository: DataRepository = Depends(get_repository),
) -> dict[str, Any]:
    return _career_urls_response(company_id, repository.get_career_urls(company_id))


@router.post("/companies/{company_id}/career-urls")
def add_career_url(
    company_id: str,
    request: CareerUrlRequest,
    repository: DataRepository = Depends(get_repository),
) -> dict[str, Any]:
    """
    Add a career URL to a company.

    Raises:
        HTTPException 400: If the URL is blank.
        HTTPException 404: If the company is not in any tier roster.
    """
    url = request.url.strip()
    if not url:
        raise HTTPException(status_code=400, detail="URL is required")
    return _career_urls_response(company_id, repository.add_career_url(company_id, url))


@router.put("/companies/{company_id}/career-urls")
def replace_career_urls(
    company_id: str,
    update: CareerUrlsUpdate,
    repository: DataRepository = Depends(get_repository),
) -> dict[str, Any]:
    return _career_urls_response(
        company_id, repository.set_career_urls(company_id, update.urls)
    )


@router.delete("/companies/{company_id}/career-urls")
def remove_career_url(
    company_id: str,
    url: str = Query(...),
    repository: DataRepository = Depends(get_repository),
) -> dict[str, Any]:
    return _career_urls_response(company_id, repository.remove_career_url(company_id, url))
