"""
PremStats

Premier League statistics derived from stored match facts: league tables,
team season records, season summaries, top scorers and a data completeness
report. Served over HTTP (FastAPI) and a small CLI.

Usage:
    from premstats import InMemoryMatchProvider, get_standings

    provider = InMemoryMatchProvider.from_json_file("season.json")
    table = get_standings(provider, season_id=32)
"""

from .exceptions import NotFoundError, PremStatsError, SeasonNotFoundError, TeamNotFoundError
from .repositories import InMemoryMatchProvider, MatchFactProvider, PostgresMatchProvider
from .services import (
    get_completeness_report,
    get_season_completeness,
    get_season_summary,
    get_standings,
    get_team_season_stats,
    get_top_scorers,
)

__version__ = "1.0.0"

__all__ = [
    # Exceptions
    "NotFoundError",
    "PremStatsError",
    "SeasonNotFoundError",
    "TeamNotFoundError",
    # Providers
    "InMemoryMatchProvider",
    "MatchFactProvider",
    "PostgresMatchProvider",
    # Services
    "get_completeness_report",
    "get_season_completeness",
    "get_season_summary",
    "get_standings",
    "get_team_season_stats",
    "get_top_scorers",
]
