"""Team API endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Query

from ...services.teams import get_team, get_team_season_stats, list_teams
from ..dependencies import ProviderDependency

router = APIRouter()


@router.get("")
async def get_teams(
    provider: ProviderDependency,
    season: Annotated[int | None, Query(description="Season ID filter")] = None,
) -> list[dict[str, Any]]:
    """All teams, or the teams that played in a season."""
    return [t.model_dump(mode="json") for t in list_teams(provider, season)]


@router.get("/{team_id}/stats")
async def get_team_stats(
    team_id: int,
    provider: ProviderDependency,
    season: Annotated[int, Query(description="Season ID")],
) -> dict[str, Any]:
    """
    A team's record for one season.

    Includes win percentage and points per game. A team with no matches in
    the season gets a zeroed record.

    Raises:
        NotFoundError: 404 if the team or season doesn't exist
    """
    return get_team_season_stats(provider, team_id, season).model_dump(mode="json")


@router.get("/{team_id}")
async def get_team_info(team_id: int, provider: ProviderDependency) -> dict[str, Any]:
    """A single team. 404 if it doesn't exist."""
    return get_team(provider, team_id).model_dump(mode="json")
