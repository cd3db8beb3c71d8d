"""Admin router - store statistics and bulk seed/clear/cleanup actions."""

from __future__ import annotations

from enum import Enum
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from sponsorscout.dependencies import get_repository, get_seed_source
from sponsorscout.schemas.base import CamelModel
from sponsorscout.schemas.company import Tier, TierData
from sponsorscout.services.repository import DataRepository

router = APIRouter()


class DataAction(str, Enum):
    """Admin action enumeration."""

    SEED = "seed"
    CLEAR = "clear"
    CLEANUP = "cleanup"


class DataActionRequest(CamelModel):
    """Schema for an admin action."""

    action: DataAction


@router.get("/data")
def get_data_stats(repository: DataRepository = Depends(get_repository)) -> dict[str, Any]:
    return repository.get_data_stats()


@router.post("/data")
def run_data_action(
    request: DataActionRequest,
    repository: DataRepository = Depends(get_repository),
    seed_source: DataRepository = Depends(get_seed_source),
) -> dict[str, Any]:
    """
    Run an admin action against the store.

    ``seed`` copies the tier rosters and job batch found in the local data
    directory into the store; ``clear`` deletes all jobs and rosters;
    ``cleanup`` deletes keys left behind by older versions.

    Raises:
        HTTPException 404: If ``seed`` finds nothing to copy.
        HTTPException 500: If any seeded document fails to save.
    """
    if request.action is DataAction.SEED:
        tiers: dict[Tier, TierData] = {
            tier: data
            for tier, data in seed_source.get_all_tiers().items()
            if data is not None
        }
        jobs = seed_source.get_jobs()
        if not tiers and jobs is None:
            raise HTTPException(status_code=404, detail="No local data files to seed")
        errors = repository.seed_all(tiers=tiers, jobs=jobs)
        if errors:
            raise HTTPException(status_code=500, detail="; ".join(errors))
        return {
            "success": True,
            "message": f"Seeded {len(tiers)} tiers" + (" and jobs" if jobs is not None else ""),
            "stats": repository.get_data_stats(),
        }

    if request.action is DataAction.CLEAR:
        repository.clear_all()
        return {"success": True, "message": "All data cleared"}

    deleted = repository.cleanup_unused_keys()
    return {
        "success": True,
        "message": f"Removed {len(deleted)} unused keys",
        "deletedKeys": deleted,
    }
