"""Platform to adapter dispatch table."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from sponsorscout.config import ScrapingConfig
from sponsorscout.schemas.job import Platform
from sponsorscout.services.sources.ashby import AshbyAdapter
from sponsorscout.services.sources.base import SourceAdapter
from sponsorscout.services.sources.greenhouse import GreenhouseAdapter
from sponsorscout.services.sources.lever import LeverAdapter
from sponsorscout.services.sources.workday import WorkdayAdapter


class UnsupportedPlatformError(Exception):
    """Raised when no adapter exists for a platform."""


class AdapterRegistry:
    """Explicit mapping from ``Platform`` to its adapter."""

    def __init__(self, adapters: Mapping[Platform, SourceAdapter]) -> None:
        if Platform.CUSTOM in adapters:
            raise UnsupportedPlatformError("custom career pages have no adapter")
        self._adapters = dict(adapters)

    @classmethod
    def default(
        cls,
        config: ScrapingConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> AdapterRegistry:
        """
        Build the registry with the four built-in ATS adapters.

        Args:
            config: Scraping configuration shared by every adapter
            client: Optional shared HTTP client

        Returns:
            AdapterRegistry covering Greenhouse, Lever, Ashby and Workday
        """
        adapter_classes = (GreenhouseAdapter, LeverAdapter, AshbyAdapter, WorkdayAdapter)
        return cls({a.platform: a(config=config, client=client) for a in adapter_classes})

    def __contains__(self, platform: Platform) -> bool:
        return platform in self._adapters

    def get(self, platform: Platform) -> SourceAdapter:
        """
        Look up the adapter for a platform.

        Raises:
            UnsupportedPlatformError: For ``custom`` or any unregistered platform
        """
        try:
            return self._adapters[platform]
        except KeyError:
            raise UnsupportedPlatformError(f"Unsupported platform: {platform}") from None
