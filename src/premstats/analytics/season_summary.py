"""
Season summary facts derived from the league table.

Relegation is a policy question, not an arithmetic one: the bottom of a
partial table says nothing about who went down. It is only reported once the
season has RELEGATION_MATCH_THRESHOLD scored matches.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..core.models import MatchFact, SeasonSummary, StandingsTable
from ..core.types import RELEGATION_MATCH_THRESHOLD, RELEGATION_SPOTS

logger = logging.getLogger(__name__)


def relegated_teams(
    standings: StandingsTable,
    scored_matches: int,
    spots: int = RELEGATION_SPOTS,
) -> Optional[list[str]]:
    """
    Bottom `spots` teams of the table, worst first.

    Returns None below the relegation threshold.
    """
    if scored_matches < RELEGATION_MATCH_THRESHOLD:
        return None
    bottom = standings.table[-spots:] if spots > 0 else []
    return [entry.team_name for entry in reversed(bottom)]


def summarize_season(
    standings: StandingsTable,
    matches: Iterable[MatchFact],
) -> SeasonSummary:
    """
    Aggregate facts for one season.

    Args:
        standings: The season's table (from build_standings).
        matches: The season's match facts; unscored matches are ignored.

    Returns:
        SeasonSummary with totals over scored matches, champion and
        (when the policy allows it) relegated teams.
    """
    total_matches = 0
    total_goals = 0
    for match in matches:
        if not match.is_scored:
            continue
        total_matches += 1
        total_goals += match.home_score + match.away_score

    avg = total_goals / total_matches if total_matches else 0.0
    leader = standings.leader

    relegated = relegated_teams(standings, total_matches)
    if relegated is None:
        logger.debug(
            "Season %s has %d scored matches (< %d), relegation not reported",
            standings.season_id,
            total_matches,
            RELEGATION_MATCH_THRESHOLD,
        )

    return SeasonSummary(
        season_id=standings.season_id,
        season=standings.season,
        total_matches=total_matches,
        total_goals=total_goals,
        avg_goals_per_match=avg,
        champion=leader.team_name if leader else None,
        relegated=relegated,
    )
