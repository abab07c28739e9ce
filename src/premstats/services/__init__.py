"""
Services module for PremStats.

This module joins providers to the analytics engine:
- seasons: season lookups and summaries
- standings: league tables
- teams: team listings and team season records
- matches: match listings with derived status
- players: player directory, player detail, top scorers and search
- reports: data completeness report

Usage:
    from premstats.services import get_standings, get_season_summary
    from premstats.services import get_completeness_report
"""

from .matches import get_match, list_matches
from .players import (
    get_player_detail,
    get_top_scorers,
    list_nationalities,
    list_players,
    list_positions,
    search,
)
from .reports import get_completeness_report, get_season_completeness
from .seasons import get_available_seasons, get_season_summary, list_seasons, require_season
from .standings import get_standings
from .teams import get_team, get_team_season_stats, list_teams

__all__ = [
    # Seasons
    "get_available_seasons",
    "get_season_summary",
    "list_seasons",
    "require_season",
    # Standings
    "get_standings",
    # Teams
    "get_team",
    "get_team_season_stats",
    "list_teams",
    # Matches
    "get_match",
    "list_matches",
    # Players
    "get_player_detail",
    "get_top_scorers",
    "list_nationalities",
    "list_players",
    "list_positions",
    "search",
    # Reports
    "get_completeness_report",
    "get_season_completeness",
]
