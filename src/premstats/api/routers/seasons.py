"""
Seasons router.

Endpoints:
- GET / - All seasons
- GET /available - Seasons with at least one scored match
- GET /{season_id} - One season
- GET /{season_id}/summary - Totals, champion, relegated teams
"""

from typing import Any

from fastapi import APIRouter

from ...services import seasons as season_service
from ..dependencies import ProviderDependency

router = APIRouter()


@router.get("")
async def list_seasons(provider: ProviderDependency) -> list[dict[str, Any]]:
    return [s.model_dump(mode="json") for s in season_service.list_seasons(provider)]


@router.get("/available")
async def list_available_seasons(provider: ProviderDependency) -> list[dict[str, Any]]:
    return [s.model_dump(mode="json") for s in season_service.get_available_seasons(provider)]


@router.get("/{season_id}")
async def get_season(season_id: int, provider: ProviderDependency) -> dict[str, Any]:
    return season_service.require_season(provider, season_id).model_dump(mode="json")


@router.get("/{season_id}/summary")
async def get_season_summary(season_id: int, provider: ProviderDependency) -> dict[str, Any]:
    """
    Summary statistics for a season.

    ``relegated`` is omitted until the season has a full set of scored
    matches; it is never inferred from a partial table.
    """
    summary = season_service.get_season_summary(provider, season_id)
    return summary.model_dump(mode="json", exclude_none=True)
