"""
PostgreSQL implementation of the match fact provider.

Only fetches raw facts; every aggregate (standings, completeness, rankings)
is computed by the analytics engine in Python.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

from ..core.models import (
    ActivityLog,
    GoalFact,
    MatchFact,
    Player,
    PlayerSeasonStats,
    Season,
    Team,
)
from ..core.types import (
    GOALS_TABLE,
    MATCHES_TABLE,
    PLAYERS_TABLE,
    PLAYER_STATS_TABLE,
    SEASONS_TABLE,
    TEAMS_TABLE,
)
from .base import MatchFactProvider

if TYPE_CHECKING:
    from ..pg_connection import PostgresDB

logger = logging.getLogger(__name__)


_MATCH_COLUMNS = """
    m.id AS match_id,
    m.season_id,
    m.home_team_id,
    m.away_team_id,
    ht.name AS home_team,
    awt.name AS away_team,
    m.home_score,
    m.away_score,
    m.half_time_home,
    m.half_time_away,
    m.match_date,
    m.referee,
    m.created_at
"""

_TEAM_COLUMNS = "t.id, t.name, t.short_name, t.stadium, t.founded"

_PLAYER_COLUMNS = "p.id, p.name, p.date_of_birth::text AS date_of_birth, p.nationality, p.position"

_PLAYER_STATS_COLUMNS = """
    ps.player_id,
    p.name AS player_name,
    ps.team_id,
    t.name AS team_name,
    ps.season_id,
    COALESCE(ps.appearances, 0) AS appearances,
    COALESCE(ps.goals, 0) AS goals,
    COALESCE(ps.assists, 0) AS assists,
    p.nationality,
    p.position
"""


class PostgresMatchProvider(MatchFactProvider):
    """MatchFactProvider reading from the league PostgreSQL schema."""

    def __init__(self, db: "PostgresDB"):
        """
        Args:
            db: PostgresDB (or any handle exposing fetchone/fetchall returning dicts)
        """
        self.db = db

    def list_matches(
        self,
        season_id: Optional[int] = None,
        team_id: Optional[int] = None,
    ) -> list[MatchFact]:
        conditions = []
        params: list[Any] = []

        if season_id is not None:
            conditions.append("m.season_id = %s")
            params.append(season_id)
        if team_id is not None:
            conditions.append("(m.home_team_id = %s OR m.away_team_id = %s)")
            params.extend([team_id, team_id])

        where = f"WHERE {' AND '.join(conditions)}" if conditions else ""
        query = f"""
            SELECT {_MATCH_COLUMNS}
            FROM {MATCHES_TABLE} m
            JOIN {TEAMS_TABLE} ht ON m.home_team_id = ht.id
            JOIN {TEAMS_TABLE} awt ON m.away_team_id = awt.id
            {where}
            ORDER BY m.match_date DESC, m.id DESC
        """
        rows = self.db.fetchall(query, tuple(params))
        return [MatchFact.model_validate(row) for row in rows]

    def get_match(self, match_id: int) -> Optional[MatchFact]:
        query = f"""
            SELECT {_MATCH_COLUMNS}
            FROM {MATCHES_TABLE} m
            JOIN {TEAMS_TABLE} ht ON m.home_team_id = ht.id
            JOIN {TEAMS_TABLE} awt ON m.away_team_id = awt.id
            WHERE m.id = %s
        """
        row = self.db.fetchone(query, (match_id,))
        return MatchFact.model_validate(row) if row else None

    def list_teams_in_season(self, season_id: int) -> list[Team]:
        query = f"""
            SELECT DISTINCT {_TEAM_COLUMNS}
            FROM {TEAMS_TABLE} t
            JOIN {MATCHES_TABLE} m ON (t.id = m.home_team_id OR t.id = m.away_team_id)
            WHERE m.season_id = %s
            ORDER BY t.name ASC
        """
        rows = self.db.fetchall(query, (season_id,))
        return [Team.model_validate(row) for row in rows]

    def season_year(self, season_id: int) -> Optional[int]:
        row = self.db.fetchone(f"SELECT year FROM {SEASONS_TABLE} WHERE id = %s", (season_id,))
        return row["year"] if row else None

    def get_season(self, season_id: int) -> Optional[Season]:
        row = self.db.fetchone(
            f"SELECT id, year, name, created_at FROM {SEASONS_TABLE} WHERE id = %s",
            (season_id,),
        )
        return Season.model_validate(row) if row else None

    def get_season_by_year(self, year: int) -> Optional[Season]:
        row = self.db.fetchone(
            f"SELECT id, year, name, created_at FROM {SEASONS_TABLE} WHERE year = %s ORDER BY id LIMIT 1",
            (year,),
        )
        return Season.model_validate(row) if row else None

    def list_seasons(self) -> list[Season]:
        rows = self.db.fetchall(
            f"SELECT id, year, name, created_at FROM {SEASONS_TABLE} ORDER BY id ASC"
        )
        return [Season.model_validate(row) for row in rows]

    def get_team(self, team_id: int) -> Optional[Team]:
        row = self.db.fetchone(
            f"SELECT {_TEAM_COLUMNS} FROM {TEAMS_TABLE} t WHERE t.id = %s",
            (team_id,),
        )
        return Team.model_validate(row) if row else None

    def list_teams(self) -> list[Team]:
        rows = self.db.fetchall(f"SELECT {_TEAM_COLUMNS} FROM {TEAMS_TABLE} t ORDER BY t.name ASC")
        return [Team.model_validate(row) for row in rows]

    def list_goals(self, season_id: Optional[int] = None) -> list[GoalFact]:
        if season_id is None:
            rows = self.db.fetchall(
                f"SELECT g.id AS goal_id, g.match_id, g.player_id, g.created_at FROM {GOALS_TABLE} g"
            )
        else:
            rows = self.db.fetchall(
                f"""
                SELECT g.id AS goal_id, g.match_id, g.player_id, g.created_at
                FROM {GOALS_TABLE} g
                JOIN {MATCHES_TABLE} m ON g.match_id = m.id
                WHERE m.season_id = %s
                """,
                (season_id,),
            )
        return [GoalFact.model_validate(row) for row in rows]

    def list_player_stats(self, season_id: int) -> list[PlayerSeasonStats]:
        query = f"""
            SELECT {_PLAYER_STATS_COLUMNS}
            FROM {PLAYER_STATS_TABLE} ps
            JOIN {PLAYERS_TABLE} p ON ps.player_id = p.id
            JOIN {TEAMS_TABLE} t ON ps.team_id = t.id
            WHERE ps.season_id = %s
        """
        rows = self.db.fetchall(query, (season_id,))
        return [PlayerSeasonStats.model_validate(row) for row in rows]

    def list_recent_activity(self, since: datetime, limit: int = 20) -> list[ActivityLog]:
        query = f"""
            SELECT
                g.created_at AS date,
                'Goal Import' AS activity,
                s.name AS season,
                'Goals added to ' || ht.name || ' vs ' || awt.name AS details,
                COUNT(*) AS goals_added,
                'Data Import' AS source
            FROM {GOALS_TABLE} g
            JOIN {MATCHES_TABLE} m ON g.match_id = m.id
            JOIN {SEASONS_TABLE} s ON m.season_id = s.id
            JOIN {TEAMS_TABLE} ht ON m.home_team_id = ht.id
            JOIN {TEAMS_TABLE} awt ON m.away_team_id = awt.id
            WHERE g.created_at >= %s
            GROUP BY g.created_at, s.name, ht.name, awt.name
            ORDER BY g.created_at DESC
            LIMIT %s
        """
        rows = self.db.fetchall(query, (since, limit))
        return [ActivityLog.model_validate(row) for row in rows]

    def get_player(self, player_id: int) -> Optional[Player]:
        row = self.db.fetchone(
            f"SELECT {_PLAYER_COLUMNS} FROM {PLAYERS_TABLE} p WHERE p.id = %s",
            (player_id,),
        )
        return Player.model_validate(row) if row else None

    def list_players(
        self,
        search: Optional[str] = None,
        position: Optional[str] = None,
        nationality: Optional[str] = None,
    ) -> list[Player]:
        conditions = []
        params: list[Any] = []

        if search:
            conditions.append("p.name ILIKE %s")
            params.append(f"%{search.strip()}%")
        if position is not None:
            conditions.append("p.position = %s")
            params.append(position)
        if nationality is not None:
            conditions.append("p.nationality = %s")
            params.append(nationality)

        where = f"WHERE {' AND '.join(conditions)}" if conditions else ""
        query = f"""
            SELECT {_PLAYER_COLUMNS}
            FROM {PLAYERS_TABLE} p
            {where}
            ORDER BY p.name ASC, p.id ASC
        """
        rows = self.db.fetchall(query, tuple(params))
        return [Player.model_validate(row) for row in rows]

    def list_player_history(self, player_id: int) -> list[PlayerSeasonStats]:
        query = f"""
            SELECT {_PLAYER_STATS_COLUMNS}
            FROM {PLAYER_STATS_TABLE} ps
            JOIN {PLAYERS_TABLE} p ON ps.player_id = p.id
            JOIN {TEAMS_TABLE} t ON ps.team_id = t.id
            WHERE ps.player_id = %s
        """
        rows = self.db.fetchall(query, (player_id,))
        return [PlayerSeasonStats.model_validate(row) for row in rows]
