"""Players router - player directory, player detail and top scorers."""

from typing import Annotated, Any

from fastapi import APIRouter, Query

from ...core.config import get_settings
from ...services.players import (
    get_player_detail,
    get_top_scorers,
    list_nationalities,
    list_players,
    list_positions,
)
from ..dependencies import ProviderDependency

router = APIRouter()


@router.get("")
async def get_players(
    provider: ProviderDependency,
    search: Annotated[str | None, Query(description="Case-insensitive name search")] = None,
    position: Annotated[str | None, Query(description="Exact position filter")] = None,
    nationality: Annotated[str | None, Query(description="Exact nationality filter")] = None,
    limit: Annotated[int, Query(ge=1, le=100)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> dict[str, Any]:
    """
    Players ordered by name.

    The response echoes the applied filters; `total` counts all matching
    players before paging.
    """
    page = list_players(
        provider,
        search=search,
        position=position,
        nationality=nationality,
        limit=limit,
        offset=offset,
    )
    return {
        **page.model_dump(mode="json"),
        "filters": {"search": search, "position": position, "nationality": nationality},
    }


@router.get("/top-scorers")
async def top_scorers(
    provider: ProviderDependency,
    season: Annotated[int, Query(description="Season ID")],
    limit: Annotated[int | None, Query(ge=1, le=100)] = None,
) -> list[dict[str, Any]]:
    limit = limit or get_settings().top_scorers_limit
    return [s.model_dump(mode="json") for s in get_top_scorers(provider, season, limit)]


@router.get("/positions")
async def positions(provider: ProviderDependency) -> list[str]:
    return list_positions(provider)


@router.get("/nationalities")
async def nationalities(provider: ProviderDependency) -> list[str]:
    return list_nationalities(provider)


@router.get("/{player_id}")
async def get_player(
    player_id: int,
    provider: ProviderDependency,
    season: Annotated[int | None, Query(description="Season ID (defaults to latest)")] = None,
) -> dict[str, Any]:
    """
    A player with one season line.

    Raises:
        NotFoundError: 404 if the player (or the requested season) doesn't exist
    """
    return get_player_detail(provider, player_id, season).model_dump(mode="json")
