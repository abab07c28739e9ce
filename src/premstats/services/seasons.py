"""
Season service - season lookups and season summaries.

Routers and CLI call this instead of talking to a provider directly.
"""

import logging

from ..analytics.season_summary import summarize_season
from ..analytics.standings import build_standings
from ..core.models import Season, SeasonSummary
from ..exceptions import SeasonNotFoundError
from ..repositories.base import MatchFactProvider

logger = logging.getLogger(__name__)


def require_season(provider: MatchFactProvider, season_id: int) -> Season:
    """Fetch a season or raise SeasonNotFoundError."""
    season = provider.get_season(season_id)
    if season is None:
        raise SeasonNotFoundError(season_id)
    return season


def list_seasons(provider: MatchFactProvider) -> list[Season]:
    """All seasons ordered by id."""
    return sorted(provider.list_seasons(), key=lambda s: s.id)


def get_available_seasons(provider: MatchFactProvider) -> list[Season]:
    """Seasons that have at least one scored match, ordered by id."""
    scored_ids = {m.season_id for m in provider.list_matches() if m.is_scored}
    return [s for s in list_seasons(provider) if s.id in scored_ids]


def get_season_summary(provider: MatchFactProvider, season_id: int) -> SeasonSummary:
    """
    Summary statistics for a season.

    Args:
        provider: Match fact provider.
        season_id: Season identifier.

    Returns:
        SeasonSummary with totals, champion and (policy permitting) relegated teams.

    Raises:
        SeasonNotFoundError: If the season doesn't exist.
    """
    season = require_season(provider, season_id)
    matches = provider.list_matches(season_id=season_id)
    teams = provider.list_teams_in_season(season_id)

    standings = build_standings(matches, teams, season_id=season.id, season_name=season.name)
    return summarize_season(standings, matches)
