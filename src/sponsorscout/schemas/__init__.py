"""Pydantic schemas package."""

from sponsorscout.schemas.company import ROSTER_TIERS, Company, Tier, TierData
from sponsorscout.schemas.job import Job, JobsData, Platform, ScrapeResult, ScrapeSummary

__all__ = [
    "Company",
    "Job",
    "JobsData",
    "Platform",
    "ROSTER_TIERS",
    "ScrapeResult",
    "ScrapeSummary",
    "Tier",
    "TierData",
]
