"""Standings router - league tables computed from match results."""

from typing import Any

from fastapi import APIRouter

from ...services.standings import get_standings
from ..dependencies import ProviderDependency

router = APIRouter()


@router.get("/{season_id}")
async def get_season_standings(season_id: int, provider: ProviderDependency) -> dict[str, Any]:
    """
    League table for a season.

    Ordered by points, goal difference, goals scored, then team name.
    Every team gets a distinct position.
    """
    return get_standings(provider, season_id).model_dump(mode="json")
