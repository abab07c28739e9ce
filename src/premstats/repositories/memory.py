"""
In-memory provider over a fixed snapshot of facts.

Used by tests and by the CLI's fixture mode. The snapshot is copied on
construction and never mutated.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Optional

from ..core.models import (
    ActivityLog,
    GoalFact,
    MatchFact,
    Player,
    PlayerSeasonStats,
    Season,
    Team,
    as_utc,
)
from .base import MatchFactProvider

logger = logging.getLogger(__name__)


class InMemoryMatchProvider(MatchFactProvider):
    """MatchFactProvider backed by plain lists."""

    def __init__(
        self,
        seasons: Iterable[Season] = (),
        teams: Iterable[Team] = (),
        matches: Iterable[MatchFact] = (),
        goals: Iterable[GoalFact] = (),
        player_stats: Iterable[PlayerSeasonStats] = (),
        activity: Iterable[ActivityLog] = (),
        players: Iterable[Player] = (),
    ):
        self._seasons = {s.id: s for s in seasons}
        self._teams = {t.id: t for t in teams}
        self._matches = tuple(matches)
        self._goals = tuple(goals)
        self._player_stats = tuple(player_stats)
        self._activity = tuple(activity)
        self._players = {p.id: p for p in players}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InMemoryMatchProvider":
        """Build a provider from a fixture dict (keys match the constructor)."""
        return cls(
            seasons=[Season.model_validate(s) for s in data.get("seasons", [])],
            teams=[Team.model_validate(t) for t in data.get("teams", [])],
            matches=[MatchFact.model_validate(m) for m in data.get("matches", [])],
            goals=[GoalFact.model_validate(g) for g in data.get("goals", [])],
            player_stats=[PlayerSeasonStats.model_validate(p) for p in data.get("player_stats", [])],
            activity=[ActivityLog.model_validate(a) for a in data.get("activity", [])],
            players=[Player.model_validate(p) for p in data.get("players", [])],
        )

    @classmethod
    def from_json_file(cls, path: str | Path) -> "InMemoryMatchProvider":
        """Load a JSON fixture file."""
        path = Path(path)
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
        provider = cls.from_dict(data)
        logger.info(
            "Loaded fixture %s: %d seasons, %d matches",
            path,
            len(provider._seasons),
            len(provider._matches),
        )
        return provider

    def list_matches(
        self,
        season_id: Optional[int] = None,
        team_id: Optional[int] = None,
    ) -> list[MatchFact]:
        return [
            m
            for m in self._matches
            if (season_id is None or m.season_id == season_id)
            and (team_id is None or m.involves(team_id))
        ]

    def get_match(self, match_id: int) -> Optional[MatchFact]:
        return next((m for m in self._matches if m.match_id == match_id), None)

    def list_teams_in_season(self, season_id: int) -> list[Team]:
        team_ids: set[int] = set()
        names: dict[int, str] = {}
        for m in self.list_matches(season_id=season_id):
            team_ids.update((m.home_team_id, m.away_team_id))
            if m.home_team:
                names.setdefault(m.home_team_id, m.home_team)
            if m.away_team:
                names.setdefault(m.away_team_id, m.away_team)

        teams = []
        for team_id in team_ids:
            team = self._teams.get(team_id)
            if team is None:
                team = Team(id=team_id, name=names.get(team_id, f"Team {team_id}"))
            teams.append(team)
        return sorted(teams, key=lambda t: t.name)

    def season_year(self, season_id: int) -> Optional[int]:
        season = self._seasons.get(season_id)
        return season.year if season else None

    def get_season(self, season_id: int) -> Optional[Season]:
        return self._seasons.get(season_id)

    def list_seasons(self) -> list[Season]:
        return sorted(self._seasons.values(), key=lambda s: s.id)

    def get_team(self, team_id: int) -> Optional[Team]:
        return self._teams.get(team_id)

    def list_teams(self) -> list[Team]:
        return sorted(self._teams.values(), key=lambda t: t.name)

    def list_goals(self, season_id: Optional[int] = None) -> list[GoalFact]:
        if season_id is None:
            return list(self._goals)
        match_ids = {m.match_id for m in self.list_matches(season_id=season_id)}
        return [g for g in self._goals if g.match_id in match_ids]

    def list_player_stats(self, season_id: int) -> list[PlayerSeasonStats]:
        return [p for p in self._player_stats if p.season_id == season_id]

    def list_recent_activity(self, since: datetime, limit: int = 20) -> list[ActivityLog]:
        since = as_utc(since)
        recent = [a for a in self._activity if a.date >= since]
        recent.sort(key=lambda a: a.date, reverse=True)
        return recent[:limit]

    def get_player(self, player_id: int) -> Optional[Player]:
        return self._players.get(player_id)

    def list_players(
        self,
        search: Optional[str] = None,
        position: Optional[str] = None,
        nationality: Optional[str] = None,
    ) -> list[Player]:
        needle = search.strip().casefold() if search else ""
        players = [
            p
            for p in self._players.values()
            if (not needle or needle in p.name.casefold())
            and (position is None or p.position == position)
            and (nationality is None or p.nationality == nationality)
        ]
        return sorted(players, key=lambda p: (p.name, p.id))

    def list_player_history(self, player_id: int) -> list[PlayerSeasonStats]:
        return [p for p in self._player_stats if p.player_id == player_id]
