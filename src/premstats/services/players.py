"""Player service - player directory, player detail, top scorers and search."""

import logging
from typing import Optional

from ..analytics.scorers import DEFAULT_TOP_SCORERS_LIMIT, rank_top_scorers
from ..core.models import PlayerDetail, PlayerPage, SearchResult, TopScorer
from ..exceptions import PlayerNotFoundError
from ..repositories.base import MatchFactProvider
from .seasons import require_season

logger = logging.getLogger(__name__)

DEFAULT_PLAYER_PAGE_SIZE = 50
DEFAULT_SEARCH_LIMIT = 20


def get_top_scorers(
    provider: MatchFactProvider,
    season_id: int,
    limit: int = DEFAULT_TOP_SCORERS_LIMIT,
) -> list[TopScorer]:
    """
    Ranked top scorers for a season.

    Raises:
        SeasonNotFoundError: If the season doesn't exist.
    """
    require_season(provider, season_id)
    return rank_top_scorers(provider.list_player_stats(season_id), limit)


def list_players(
    provider: MatchFactProvider,
    search: Optional[str] = None,
    position: Optional[str] = None,
    nationality: Optional[str] = None,
    limit: int = DEFAULT_PLAYER_PAGE_SIZE,
    offset: int = 0,
) -> PlayerPage:
    """
    Players ordered by name, filtered and paged.

    `total` counts every player matching the filters, before paging.
    """
    players = provider.list_players(search=search, position=position, nationality=nationality)
    return PlayerPage(
        players=players[offset:offset + limit],
        total=len(players),
        limit=limit,
        offset=offset,
    )


def get_player_detail(
    provider: MatchFactProvider,
    player_id: int,
    season_id: Optional[int] = None,
) -> PlayerDetail:
    """
    A player and one season line.

    Without season_id the line for the player's latest season is used.
    A season the player has no line for gives `stats=None`.

    Raises:
        PlayerNotFoundError: If the player doesn't exist.
        SeasonNotFoundError: If season_id is given and doesn't exist.
    """
    player = provider.get_player(player_id)
    if player is None:
        raise PlayerNotFoundError(player_id)

    history = provider.list_player_history(player_id)
    if season_id is not None:
        require_season(provider, season_id)
        stats = next((line for line in history if line.season_id == season_id), None)
        return PlayerDetail(player=player, stats=stats)

    if not history:
        return PlayerDetail(player=player)

    years = {line.season_id: provider.season_year(line.season_id) for line in history}
    latest = max(history, key=lambda line: (years[line.season_id] or 0, line.season_id))
    return PlayerDetail(player=player, stats=latest)


def list_positions(provider: MatchFactProvider) -> list[str]:
    """Distinct recorded positions, sorted."""
    return sorted({p.position for p in provider.list_players() if p.position})


def list_nationalities(provider: MatchFactProvider) -> list[str]:
    """Distinct recorded nationalities, sorted."""
    return sorted({p.nationality for p in provider.list_players() if p.nationality})


def search(
    provider: MatchFactProvider,
    query: str,
    limit: int = DEFAULT_SEARCH_LIMIT,
) -> list[SearchResult]:
    """
    Players and teams whose name contains `query` (case-insensitive).

    Results are ordered by type (players before teams) then name. Players
    carry their position as subtitle, teams their stadium.
    """
    needle = query.strip().casefold()
    results = [
        SearchResult(type="player", id=p.id, name=p.name, subtitle=p.position)
        for p in provider.list_players(search=needle)
    ]
    results.extend(
        SearchResult(type="team", id=t.id, name=t.name, subtitle=t.stadium)
        for t in provider.list_teams()
        if needle in t.name.casefold()
    )
    results.sort(key=lambda r: (r.type, r.name, r.id))
    logger.debug("Search %r matched %d results", query, len(results))
    return results[:limit]
