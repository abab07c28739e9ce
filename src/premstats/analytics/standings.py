"""
League table aggregation.

Converts a season's match facts into a ranked table of per-team records.
All computation happens in Python over an immutable snapshot of facts, so the
same rules apply regardless of which provider supplied them:

- Only scored matches (both scores present) count toward any statistic
- Every team that appears in the season gets a row, even with zero scored matches
- Ordering: points, goal difference, goals for (all descending), then team name
- Positions are dense and unique (1..N), even for exact ties
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional

from ..core.models import MatchFact, StandingsEntry, StandingsTable, Team, TeamRecord

logger = logging.getLogger(__name__)

_RECORD_FIELDS = set(TeamRecord.model_fields)


def apply_result(record: TeamRecord, scored: int, conceded: int) -> None:
    """
    Fold one side of a scored match into a team record.

    Exactly one of won/drawn/lost is incremented.
    """
    record.played += 1
    record.goals_for += scored
    record.goals_against += conceded
    if scored > conceded:
        record.won += 1
    elif scored < conceded:
        record.lost += 1
    else:
        record.drawn += 1


def accumulate_match(records: Mapping[int, TeamRecord], match: MatchFact) -> bool:
    """
    Apply a match to both participants' records.

    Returns False (and changes nothing) for unscored matches.
    """
    if not match.is_scored:
        return False

    home = records.get(match.home_team_id)
    away = records.get(match.away_team_id)
    if home is not None:
        apply_result(home, match.home_score, match.away_score)
    if away is not None:
        apply_result(away, match.away_score, match.home_score)
    return True


def standings_sort_key(record: TeamRecord) -> tuple:
    """Sort key for league ordering (team id settles identical names)."""
    return (
        -record.points,
        -record.goal_difference,
        -record.goals_for,
        record.team_name,
        record.team_id,
    )


def _resolve_team_names(
    matches: Iterable[MatchFact],
    teams: Optional[Iterable[Team]],
) -> dict[int, str]:
    """Collect every participating team id with its best known display name."""
    names: dict[int, str] = {}

    for match in matches:
        for team_id, name in (
            (match.home_team_id, match.home_team),
            (match.away_team_id, match.away_team),
        ):
            if not names.get(team_id):
                names[team_id] = name or ""

    # Roster names win over names carried on match rows
    for team in teams or ():
        names[team.id] = team.name

    return {
        team_id: name or f"Team {team_id}"
        for team_id, name in names.items()
    }


def rank_records(records: Iterable[TeamRecord]) -> list[StandingsEntry]:
    """Order records and assign dense 1-based positions."""
    ordered = sorted(records, key=standings_sort_key)
    return [
        StandingsEntry(**record.model_dump(include=_RECORD_FIELDS), position=index)
        for index, record in enumerate(ordered, start=1)
    ]


def build_standings(
    matches: Iterable[MatchFact],
    teams: Optional[Iterable[Team]] = None,
    season_id: Optional[int] = None,
    season_name: Optional[str] = None,
) -> StandingsTable:
    """
    Build the league table for one season.

    Args:
        matches: The season's match facts, in any order.
        teams: Teams registered in the season. Each gets a zeroed starting
            record even if none of its matches are scored.
        season_id: Season identifier echoed on the result.
        season_name: Season display name echoed on the result.

    Returns:
        StandingsTable; empty when the season has no matches and no teams.
    """
    matches = list(matches)
    names = _resolve_team_names(matches, teams)

    records: dict[int, TeamRecord] = {
        team_id: TeamRecord(team_id=team_id, team_name=name)
        for team_id, name in names.items()
    }

    scored = 0
    for match in matches:
        if accumulate_match(records, match):
            scored += 1

    table = rank_records(records.values())
    logger.debug(
        "Built standings for season %s: %d teams from %d scored matches (%d total)",
        season_id,
        len(table),
        scored,
        len(matches),
    )

    return StandingsTable(season_id=season_id, season=season_name, table=table)
