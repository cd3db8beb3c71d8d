"""Greenhouse job board adapter."""

import httpx

from sponsorscout.schemas.job import Job, Platform
from sponsorscout.services.sources.base import SourceAdapter

GREENHOUSE_API_BASE = "https://boards-api.greenhouse.io/v1/boards"


class GreenhouseAdapter(SourceAdapter):
    """
    Greenhouse Board API.

    API: https://boards-api.greenhouse.io/v1/boards/{board_token}/jobs
    """

    platform = Platform.GREENHOUSE
    label = "Greenhouse"

    def build_url(self, token: str) -> str:
        return f"{GREENHOUSE_API_BASE}/{token}/jobs"

    def parse(
        self,
        response: httpx.Response,
        token: str,
        company_id: str,
        company_name: str,
        scraped_at: str,
    ) -> list[Job]:
        data = response.json()

        jobs: list[Job] = []
        for item in data["jobs"]:
            location = (item.get("location") or {}).get("name") or "Remote"
            departments = item.get("departments") or []
            jobs.append(
                Job(
                    id=f"gh-{token}-{item['id']}",
                    company_id=company_id,
                    company_name=company_name,
                    title=item["title"],
                    location=location,
                    department=(departments[0] or {}).get("name") if departments else None,
                    url=item["absolute_url"],
                    posted_at=item.get("updated_at"),
                    scraped_at=scraped_at,
                    platform=self.platform,
                )
            )
        return jobs
