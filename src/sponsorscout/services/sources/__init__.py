"""ATS source adapters."""

from sponsorscout.services.sources.ashby import AshbyAdapter
from sponsorscout.services.sources.base import SourceAdapter
from sponsorscout.services.sources.greenhouse import GreenhouseAdapter
from sponsorscout.services.sources.lever import LeverAdapter
from sponsorscout.services.sources.registry import AdapterRegistry, UnsupportedPlatformError
from sponsorscout.services.sources.rosters import SECONDARY_ROSTERS, RosterEntry
from sponsorscout.services.sources.workday import WorkdayAdapter

__all__ = [
    "AdapterRegistry",
    "AshbyAdapter",
    "GreenhouseAdapter",
    "LeverAdapter",
    "RosterEntry",
    "SECONDARY_ROSTERS",
    "SourceAdapter",
    "UnsupportedPlatformError",
    "WorkdayAdapter",
]
