"""
Base repository protocols.

Defines the read contract the analytics engine consumes, enabling
database-agnostic data access. Implementations only read; there is no write
path.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from ..core.models import (
    ActivityLog,
    GoalFact,
    MatchFact,
    Player,
    PlayerSeasonStats,
    Season,
    Team,
)


class MatchFactProvider(ABC):
    """
    Abstract interface for league fact access.

    Ordering of returned sequences is not part of the contract; the engine
    sorts wherever order matters.
    """

    @abstractmethod
    def list_matches(
        self,
        season_id: Optional[int] = None,
        team_id: Optional[int] = None,
    ) -> list[MatchFact]:
        """
        List matches, optionally filtered.

        Args:
            season_id: Only matches of this season
            team_id: Only matches where this team is home or away

        Returns:
            List of match facts (scored and unscored)
        """
        ...

    @abstractmethod
    def get_match(self, match_id: int) -> Optional[MatchFact]:
        """Find a match by ID."""
        ...

    @abstractmethod
    def list_teams_in_season(self, season_id: int) -> list[Team]:
        """
        Teams that appear (home or away) in a season's matches.

        Args:
            season_id: Season identifier

        Returns:
            List of teams, empty for a season without matches
        """
        ...

    @abstractmethod
    def season_year(self, season_id: int) -> Optional[int]:
        """Starting year of a season, or None if the season is unknown."""
        ...

    @abstractmethod
    def get_season(self, season_id: int) -> Optional[Season]:
        """Find a season by ID."""
        ...

    @abstractmethod
    def list_seasons(self) -> list[Season]:
        """All seasons on record."""
        ...

    @abstractmethod
    def get_team(self, team_id: int) -> Optional[Team]:
        """Find a team by ID."""
        ...

    @abstractmethod
    def list_teams(self) -> list[Team]:
        """All teams on record."""
        ...

    @abstractmethod
    def list_goals(self, season_id: Optional[int] = None) -> list[GoalFact]:
        """Recorded goals, optionally restricted to one season."""
        ...

    @abstractmethod
    def list_player_stats(self, season_id: int) -> list[PlayerSeasonStats]:
        """Per-player season lines for a season."""
        ...

    @abstractmethod
    def get_player(self, player_id: int) -> Optional[Player]:
        """Find a player by ID."""
        ...

    @abstractmethod
    def list_players(
        self,
        search: Optional[str] = None,
        position: Optional[str] = None,
        nationality: Optional[str] = None,
    ) -> list[Player]:
        """
        Players ordered by name.

        Args:
            search: Case-insensitive substring of the player name
            position: Exact position
            nationality: Exact nationality
        """
        ...

    @abstractmethod
    def list_player_history(self, player_id: int) -> list[PlayerSeasonStats]:
        """Every season line recorded for a player."""
        ...

    @abstractmethod
    def list_recent_activity(self, since: datetime, limit: int = 20) -> list[ActivityLog]:
        """
        Data import activity newer than `since`, most recent first.

        Optional upstream data: callers must tolerate failures here.
        """
        ...

    def get_season_by_year(self, year: int) -> Optional[Season]:
        """Find a season by its starting year."""
        for season in self.list_seasons():
            if season.year == year:
                return season
        return None
