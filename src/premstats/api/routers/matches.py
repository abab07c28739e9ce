"""Matches router."""

from typing import Annotated, Any

from fastapi import APIRouter, Query

from ...services.matches import get_match, list_matches
from ..dependencies import ProviderDependency

router = APIRouter()


@router.get("")
async def get_matches(
    provider: ProviderDependency,
    season: Annotated[int | None, Query(description="Season ID filter")] = None,
    team: Annotated[int | None, Query(description="Team ID filter (home or away)")] = None,
    limit: Annotated[int, Query(ge=0, le=500)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> list[dict[str, Any]]:
    """Matches newest first, each with a derived status (completed, pending, scheduled)."""
    matches = list_matches(provider, season_id=season, team_id=team, limit=limit, offset=offset)
    return [m.model_dump(mode="json") for m in matches]


@router.get("/{match_id}")
async def get_match_info(match_id: int, provider: ProviderDependency) -> dict[str, Any]:
    """A single match with its derived status. 404 if it doesn't exist."""
    return get_match(provider, match_id).model_dump(mode="json")
