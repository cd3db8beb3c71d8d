"""Job-related Pydantic schemas."""

from enum import Enum
from typing import Any

from pydantic import ConfigDict, Field

from sponsorscout.schemas.base import CamelModel


class Platform(str, Enum):
    """ATS platform enumeration."""

    GREENHOUSE = "greenhouse"
    LEVER = "lever"
    ASHBY = "ashby"
    WORKDAY = "workday"
    CUSTOM = "custom"


class Job(CamelModel):
    """A single posting normalized from any ATS."""

    id: str
    company_id: str
    company_name: str
    title: str
    location: str = "Remote"
    department: str | None = None
    url: str
    posted_at: str | None = None
    scraped_at: str
    platform: Platform


class ScrapeResult(CamelModel):
    """Outcome of one adapter call."""

    success: bool
    jobs: list[Job] = Field(default_factory=list)
    error: str | None = None
    note: str | None = None


class ScrapeSummary(CamelModel):
    """Run-scoped summary of one orchestrator pass."""

    model_config = ConfigDict(frozen=True)

    total_jobs: int
    filtered_jobs: int
    companies_scraped: int
    companies_with_jobs: int
    errors: list[str] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)
    tier_breakdown: dict[str, int] = Field(default_factory=dict)
    cancelled: bool = False
    scraped_at: str


class JobsData(CamelModel):
    """Persisted job batch."""

    last_scraped: str
    total_jobs: int
    jobs: list[Job] = Field(default_factory=list)
    summary: dict[str, Any] | None = None
