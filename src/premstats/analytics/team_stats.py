"""Single-team season record, using the same accumulation rule as the league table."""

from __future__ import annotations

from typing import Iterable

from ..core.models import MatchFact, TeamRecord, TeamSeasonStats
from .standings import apply_result


def compute_team_record(
    team_id: int,
    team_name: str,
    matches: Iterable[MatchFact],
) -> TeamRecord:
    """
    Accumulate one team's record from its fixtures.

    Matches that don't involve the team, and unscored matches, are ignored.
    A team with no scored matches gets a zeroed record (win percentage and
    points per game both 0).
    """
    record = TeamRecord(team_id=team_id, team_name=team_name)

    for match in matches:
        if not match.is_scored or not match.involves(team_id):
            continue
        if match.home_team_id == team_id:
            apply_result(record, match.home_score, match.away_score)
        else:
            apply_result(record, match.away_score, match.home_score)

    return record


def compute_team_season_stats(
    team_id: int,
    team_name: str,
    season_id: int,
    season_name: str,
    matches: Iterable[MatchFact],
) -> TeamSeasonStats:
    """Team record for one season, tagged with the season it belongs to."""
    season_matches = [m for m in matches if m.season_id == season_id]
    record = compute_team_record(team_id, team_name, season_matches)
    return TeamSeasonStats(
        **record.model_dump(include=set(TeamRecord.model_fields)),
        season_id=season_id,
        season=season_name,
    )
