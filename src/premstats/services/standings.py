"""Standings service - league tables computed from a season's matches."""

import logging

from ..analytics.standings import build_standings
from ..core.models import StandingsTable
from ..repositories.base import MatchFactProvider
from .seasons import require_season

logger = logging.getLogger(__name__)


def get_standings(provider: MatchFactProvider, season_id: int) -> StandingsTable:
    """
    League table for a season.

    A season without matches yields an empty table.

    Raises:
        SeasonNotFoundError: If the season doesn't exist.
    """
    season = require_season(provider, season_id)
    matches = provider.list_matches(season_id=season_id)
    teams = provider.list_teams_in_season(season_id)

    standings = build_standings(matches, teams, season_id=season.id, season_name=season.name)
    logger.info(f"Standings for {season.name}: {len(standings)} teams")
    return standings
