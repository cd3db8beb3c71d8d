"""Company Pydantic schemas."""

from enum import Enum
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from sponsorscout.schemas.base import CamelModel
from sponsorscout.schemas.job import Platform


class Tier(str, Enum):
    """Priority bucket enumeration, highest first."""

    TOP = "top"
    MIDDLE = "middle"
    LOWER = "lower"
    LOWEST = "lowest"
    BELOW50 = "below50"


# Tiers that are persisted as rosters and scraped
ROSTER_TIERS: tuple[Tier, ...] = (Tier.TOP, Tier.MIDDLE, Tier.LOWER, Tier.LOWEST)

_TOKEN_FIELDS: dict[Platform, str] = {
    Platform.GREENHOUSE: "greenhouse_id",
    Platform.LEVER: "lever_id",
    Platform.ASHBY: "ashby_id",
    Platform.WORKDAY: "workday_id",
}


class Company(CamelModel):
    """
    Employer record produced by the tier builder.

    ``career_urls`` is the only field edited after a build; everything else is
    regenerated on every rebuild. Unknown keys from stored documents are kept.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    city: str = ""
    state: str = ""
    lca_count: int = 0
    lca_q1: int = 0
    lca_q2: int = 0
    lca_q3: int = 0
    lca_q4: int = 0
    approval_rate: float = 0.0
    priority_score: float = 0.0
    tier: Tier
    career_urls: list[str] = Field(default_factory=list)
    poc_first_name: str | None = None
    poc_last_name: str | None = None
    poc_email: str | None = None
    poc_phone: str | None = None

    # Roster fields used by the scrape orchestrator
    platform: Platform | None = None
    greenhouse_id: str | None = None
    lever_id: str | None = None
    ashby_id: str | None = None
    workday_id: str | None = None

    @field_validator("platform", mode="before")
    @classmethod
    def unknown_platform_is_none(cls, value: Any) -> Any:
        """Platforms outside the closed set do not participate in scraping."""
        if isinstance(value, str) and value not in {p.value for p in Platform}:
            return None
        return value

    def platform_token(self) -> str | None:
        """
        Get the platform-specific board token for this company.

        Returns:
            The token for ``self.platform``, or None for custom/unset platforms
        """
        field_name = _TOKEN_FIELDS.get(self.platform) if self.platform else None
        if field_name is None:
            return None
        return getattr(self, field_name) or None


class TierData(CamelModel):
    """Persisted roster for one tier."""

    generated_at: str
    count: int
    tier: str
    companies: list[Company] = Field(default_factory=list)
