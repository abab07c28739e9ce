"""Team service - team listings and per-season team records."""

import logging
from typing import Optional

from ..analytics.team_stats import compute_team_season_stats
from ..core.models import Team, TeamSeasonStats
from ..exceptions import TeamNotFoundError
from ..repositories.base import MatchFactProvider
from .seasons import require_season

logger = logging.getLogger(__name__)


def list_teams(provider: MatchFactProvider, season_id: Optional[int] = None) -> list[Team]:
    """
    All teams, or the teams that played in a season.

    Raises:
        SeasonNotFoundError: If season_id is given and doesn't exist.
    """
    if season_id is None:
        return provider.list_teams()
    require_season(provider, season_id)
    return provider.list_teams_in_season(season_id)


def get_team(provider: MatchFactProvider, team_id: int) -> Team:
    """Fetch a team or raise TeamNotFoundError."""
    team = provider.get_team(team_id)
    if team is None:
        raise TeamNotFoundError(team_id)
    return team


def get_team_season_stats(
    provider: MatchFactProvider,
    team_id: int,
    season_id: int,
) -> TeamSeasonStats:
    """
    A team's record for one season.

    A team that didn't play in the season gets a zeroed record, not an error.

    Raises:
        TeamNotFoundError: If the team doesn't exist.
        SeasonNotFoundError: If the season doesn't exist.
    """
    team = get_team(provider, team_id)
    season = require_season(provider, season_id)

    matches = provider.list_matches(season_id=season_id, team_id=team_id)
    return compute_team_season_stats(team.id, team.name, season.id, season.name, matches)
