"""Workday career site adapter."""

import re

import httpx
from bs4 import BeautifulSoup
from loguru import logger

from sponsorscout.schemas.job import Job, Platform, ScrapeResult
from sponsorscout.services.sources.base import SourceAdapter
from sponsorscout.services.sources.rosters import WORKDAY_COMPANIES

CAREER_SITE_PATH = "/en-US/External_Career_Site"

JOB_COUNT_PATTERN = re.compile(r"(\d+)\s*(?:jobs?|results?)", re.IGNORECASE)


def resolve_host(token: str) -> str | None:
    """
    Map a Workday token to its career site host.

    Args:
        token: Either a known company key (e.g. ``"nvidia"``) or a host name
            (e.g. ``"nvidia.wd5.myworkdayjobs.com"``)

    Returns:
        The host name, or None for an unknown company key
    """
    if "." in token:
        return token.strip().lower()
    site = WORKDAY_COMPANIES.get(token.strip().lower())
    return site.domain if site else None


def extract_text_from_html(html: str) -> str:
    """
    Extract visible text from HTML, removing scripts and styles.

    Args:
        html: Raw HTML content

    Returns:
        Whitespace-normalized text content
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    text = soup.get_text(separator="\n", strip=True)
    return "\n".join(line.strip() for line in text.splitlines() if line.strip())


class WorkdayAdapter(SourceAdapter):
    """
    Workday career sites.

    Workday has no public postings API and its career pages render with
    JavaScript, so this adapter only confirms that a site is reachable and
    advertises openings. It reports success with zero jobs and an informational
    note instead of failing the run.
    """

    platform = Platform.WORKDAY
    label = "Workday"

    def build_url(self, token: str) -> str:
        host = resolve_host(token)
        if host is None:
            raise KeyError(token)
        return f"https://{host}{CAREER_SITE_PATH}"

    @property
    def headers(self) -> dict[str, str]:
        return {"Accept": "text/html", "User-Agent": self.config.user_agent}

    def parse(
        self,
        response: httpx.Response,
        token: str,
        company_id: str,
        company_name: str,
        scraped_at: str,
    ) -> list[Job]:
        return []

    async def fetch(self, token: str, company_id: str, company_name: str) -> ScrapeResult:
        """
        Check a Workday career site for advertised openings.

        Args:
            token: Company key or career site host
            company_id: Internal company id
            company_name: Display name

        Returns:
            Success with no jobs (plus a note when openings are advertised), or a
            failed result for unknown companies and unreachable sites
        """
        try:
            url = self.build_url(token)
        except KeyError:
            return self.failure(f"Unknown Workday company: {token}")

        try:
            response = await self._get(url, self.headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return self.failure(f"Failed to scrape {self.label}: {str(e) or type(e).__name__}")

        if not response.is_success:
            return self.failure(
                f"{self.label} API error: {response.status_code} {response.reason_phrase}"
            )

        match = JOB_COUNT_PATTERN.search(extract_text_from_html(response.text))
        if match and int(match.group(1)) > 0:
            note = (
                f"Workday site reachable for {company_name} - "
                "full parsing requires browser automation"
            )
            logger.info(note)
            return ScrapeResult(success=True, note=note)

        return ScrapeResult(success=True)
