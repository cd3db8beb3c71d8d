"""Ashby job board adapter."""

import httpx

from sponsorscout.schemas.job import Job, Platform
from sponsorscout.services.sources.base import SourceAdapter

ASHBY_API_BASE = "https://api.ashbyhq.com/posting-api/job-board"


class AshbyAdapter(SourceAdapter):
    """
    Ashby public posting API.

    API: https://api.ashbyhq.com/posting-api/job-board/{org_name}
    """

    platform = Platform.ASHBY
    label = "Ashby"

    def build_url(self, token: str) -> str:
        return f"{ASHBY_API_BASE}/{token}"

    def parse(
        self,
        response: httpx.Response,
        token: str,
        company_id: str,
        company_name: str,
        scraped_at: str,
    ) -> list[Job]:
        data = response.json()

        return [
            Job(
                id=f"ashby-{token}-{item['id']}",
                company_id=company_id,
                company_name=company_name,
                title=item["title"],
                location=item.get("location") or "Remote",
                department=item.get("department") or None,
                url=item["jobPostingUrl"],
                posted_at=item.get("publishedAt"),
                scraped_at=scraped_at,
                platform=self.platform,
            )
            for item in data["jobs"]
        ]
