"""Top scorer ranking over per-season player lines."""

from __future__ import annotations

from typing import Iterable

from ..core.models import PlayerSeasonStats, TopScorer

DEFAULT_TOP_SCORERS_LIMIT = 20


def rank_top_scorers(
    stats: Iterable[PlayerSeasonStats],
    limit: int = DEFAULT_TOP_SCORERS_LIMIT,
) -> list[TopScorer]:
    """
    Rank players by goals, then assists, then name.

    Players without a goal are left out. A non-positive limit falls back to
    the default.
    """
    if limit <= 0:
        limit = DEFAULT_TOP_SCORERS_LIMIT

    scorers = [s for s in stats if s.goals > 0]
    scorers.sort(key=lambda s: (-s.goals, -s.assists, s.player_name, s.player_id))

    return [
        TopScorer(
            rank=rank,
            player_id=s.player_id,
            player_name=s.player_name,
            team_id=s.team_id,
            team_name=s.team_name,
            goals=s.goals,
            assists=s.assists,
            appearances=s.appearances,
            nationality=s.nationality,
            position=s.position,
        )
        for rank, s in enumerate(scorers[:limit], start=1)
    ]
