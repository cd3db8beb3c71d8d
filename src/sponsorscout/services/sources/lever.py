"""Lever postings adapter."""

import httpx

from sponsorscout.schemas.job import Job, Platform
from sponsorscout.services.sources.base import SourceAdapter
from sponsorscout.utils.timestamp import parse_timestamp, to_iso

LEVER_API_BASE = "https://api.lever.co/v0/postings"


class LeverAdapter(SourceAdapter):
    """
    Lever Postings API.

    API: https://api.lever.co/v0/postings/{company}?mode=json
    Returns a bare JSON array; ``createdAt`` is epoch milliseconds.
    """

    platform = Platform.LEVER
    label = "Lever"

    def build_url(self, token: str) -> str:
        return f"{LEVER_API_BASE}/{token}?mode=json"

    def parse(
        self,
        response: httpx.Response,
        token: str,
        company_id: str,
        company_name: str,
        scraped_at: str,
    ) -> list[Job]:
        data = response.json()
        if not isinstance(data, list):
            raise TypeError(f"expected a list of postings, got {type(data).__name__}")

        jobs: list[Job] = []
        for item in data:
            categories = item.get("categories") or {}
            created = parse_timestamp(item.get("createdAt"))
            jobs.append(
                Job(
                    id=f"lever-{token}-{item['id']}",
                    company_id=company_id,
                    company_name=company_name,
                    title=item["text"],
                    location=categories.get("location") or "Remote",
                    department=categories.get("team") or categories.get("department"),
                    url=item["hostedUrl"],
                    posted_at=to_iso(created) if created else None,
                    scraped_at=scraped_at,
                    platform=self.platform,
                )
            )
        return jobs
