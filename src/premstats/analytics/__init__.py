"""
Derived analytics engine.

Pure, synchronous computations over snapshots of match facts:
- standings: league table with deterministic tie-breaking
- team_stats: a single team's season record
- season_summary: totals, champion, relegation (policy-gated)
- completeness: per-season data quality, eras, best/worst rankings
- scorers: top scorer ranking
- matches: derived match status

Nothing here performs I/O; callers fetch facts from a MatchFactProvider.
"""

from .completeness import (
    best_and_worst_seasons,
    build_completeness_report,
    build_season_completeness,
    calculate_overall_stats,
    classify_quality,
    expected_matches,
    generate_era_stats,
)
from .matches import derive_match_status, to_match_view
from .scorers import rank_top_scorers
from .season_summary import relegated_teams, summarize_season
from .standings import apply_result, build_standings
from .team_stats import compute_team_record, compute_team_season_stats

__all__ = [
    # Standings
    "apply_result",
    "build_standings",
    # Team stats
    "compute_team_record",
    "compute_team_season_stats",
    # Season summary
    "relegated_teams",
    "summarize_season",
    # Completeness
    "best_and_worst_seasons",
    "build_completeness_report",
    "build_season_completeness",
    "calculate_overall_stats",
    "classify_quality",
    "expected_matches",
    "generate_era_stats",
    # Scorers
    "rank_top_scorers",
    # Matches
    "derive_match_status",
    "to_match_view",
]
