"""Base class for ATS source adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod

import httpx
from loguru import logger

from sponsorscout.config import ScrapingConfig
from sponsorscout.schemas.job import Job, Platform, ScrapeResult
from sponsorscout.utils.timestamp import utc_now_iso


class SourceAdapter(ABC):
    """
    Fetches one employer's postings from one ATS and normalizes them to ``Job``.

    ``fetch`` never raises: HTTP errors, network errors and responses that do not
    have the expected shape all come back as a failed ``ScrapeResult`` whose
    message names the platform. There are no retries here; a failed employer is
    simply missing from the run.
    """

    platform: Platform
    label: str

    def __init__(
        self,
        config: ScrapingConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the adapter.

        Args:
            config: Scraping configuration (uses defaults if not provided)
            client: Shared HTTP client; a short-lived client is opened per call
                when omitted
        """
        self.config = config or ScrapingConfig()
        self.client = client

    @abstractmethod
    def build_url(self, token: str) -> str:
        """Endpoint for an employer's board token."""

    @abstractmethod
    def parse(
        self,
        response: httpx.Response,
        token: str,
        company_id: str,
        company_name: str,
        scraped_at: str,
    ) -> list[Job]:
        """
        Map the platform's response body to jobs.

        Raises:
            ValueError, KeyError, TypeError, AttributeError: If the body does not
                have the platform's documented shape
        """

    @property
    def headers(self) -> dict[str, str]:
        return {"Accept": "application/json", "User-Agent": self.config.user_agent}

    async def _get(self, url: str, headers: dict[str, str]) -> httpx.Response:
        """
        Issue one GET bounded by the configured timeout.

        Raises:
            httpx.HTTPError: On network failures and timeouts
        """
        if self.client is not None:
            return await self.client.get(
                url, headers=headers, timeout=self.config.timeout_seconds
            )
        async with httpx.AsyncClient(
            timeout=self.config.timeout_seconds, follow_redirects=True
        ) as client:
            return await client.get(url, headers=headers)

    def failure(self, message: str) -> ScrapeResult:
        logger.warning("{} scrape failed: {}", self.label, message)
        return ScrapeResult(success=False, error=message)

    async def fetch(self, token: str, company_id: str, company_name: str) -> ScrapeResult:
        """
        Fetch and normalize all postings for one employer.

        Args:
            token: Platform-specific board token
            company_id: Internal company id, copied onto every job
            company_name: Display name, copied onto every job

        Returns:
            Successful result with jobs, or a failed result with an error message
        """
        try:
            response = await self._get(self.build_url(token), self.headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return self.failure(f"Failed to scrape {self.label}: {str(e) or type(e).__name__}")

        if not response.is_success:
            return self.failure(
                f"{self.label} API error: {response.status_code} {response.reason_phrase}"
            )

        try:
            jobs = self.parse(response, token, company_id, company_name, utc_now_iso())
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            return self.failure(f"Failed to scrape {self.label}: {e}")

        logger.debug("{} {}: {} jobs", self.label, token, len(jobs))
        return ScrapeResult(success=True, jobs=jobs)
