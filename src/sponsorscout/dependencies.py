"""FastAPI dependencies shared by the routers."""

from functools import lru_cache

from fastapi import Depends

from sponsorscout.config import scraping_config, settings
from sponsorscout.services.job_filters import (
    DEFAULT_EXCLUDED_KEYWORDS,
    DEFAULT_TARGET_ROLES,
    parse_keyword_list,
)
from sponsorscout.services.orchestrator import ScrapeOrchestrator
from sponsorscout.services.repository import DataRepository
from sponsorscout.services.sources.registry import AdapterRegistry
from sponsorscout.services.storage import KeyValueStore, LocalFileStore, create_store


@lru_cache
def get_store() -> KeyValueStore:
    """Storage backend, chosen once per process."""
    return create_store(settings)


def get_repository() -> DataRepository:
    """
    Get a repository over the configured store.

    Tests override this dependency to point at a temporary directory.
    """
    return DataRepository(get_store())


def get_seed_source() -> DataRepository:
    """Local JSON files under the data root, copied into the store by the seed action."""
    return DataRepository(LocalFileStore(settings.data_root))


def build_orchestrator(repository: DataRepository) -> ScrapeOrchestrator:
    """Orchestrator wired from the global scraping config and keyword settings."""
    return ScrapeOrchestrator(
        repository=repository,
        registry=AdapterRegistry.default(config=scraping_config),
        config=scraping_config,
        target_roles=parse_keyword_list(settings.target_roles, DEFAULT_TARGET_ROLES),
        excluded_keywords=parse_keyword_list(
            settings.excluded_keywords, DEFAULT_EXCLUDED_KEYWORDS
        ),
    )


def get_orchestrator(
    repository: DataRepository = Depends(get_repository),
) -> ScrapeOrchestrator:
    return build_orchestrator(repository)
