"""
Pydantic models for league entities and derived analytics.

These models are used for:
- Match/goal/player facts handed to the analytics engine by a provider
- Result structures produced by the engine (tables, summaries, reports)
- API response serialization
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, computed_field, field_validator

from .types import POINTS_FOR_DRAW, POINTS_FOR_WIN, QualityLevel


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive timestamps as UTC so every stored instant is comparable."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# =============================================================================
# Reference Data
# =============================================================================


class Season(BaseModel):
    """Season registry entry."""

    id: int
    year: int
    name: str
    created_at: Optional[datetime] = None

    @field_validator("created_at")
    @classmethod
    def created_at_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class Team(BaseModel):
    """Team master record."""

    id: int
    name: str
    short_name: Optional[str] = None
    stadium: Optional[str] = None
    founded: Optional[int] = None


# =============================================================================
# Facts
# =============================================================================


class MatchFact(BaseModel):
    """One completed or scheduled fixture."""

    match_id: int
    season_id: int
    home_team_id: int
    away_team_id: int
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    match_date: datetime
    home_team: Optional[str] = None
    away_team: Optional[str] = None
    half_time_home: Optional[int] = None
    half_time_away: Optional[int] = None
    referee: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator("match_date", "created_at")
    @classmethod
    def timestamps_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)

    @property
    def is_scored(self) -> bool:
        """A match counts toward statistics only when both scores are recorded."""
        return self.home_score is not None and self.away_score is not None

    def involves(self, team_id: int) -> bool:
        return team_id in (self.home_team_id, self.away_team_id)


class GoalFact(BaseModel):
    """A recorded goal event (only its existence and scorer matter here)."""

    goal_id: int
    match_id: int
    player_id: Optional[int] = None
    created_at: Optional[datetime] = None

    @field_validator("created_at")
    @classmethod
    def created_at_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class Player(BaseModel):
    """Player master record."""

    id: int
    name: str
    date_of_birth: Optional[str] = None
    nationality: Optional[str] = None
    position: Optional[str] = None


class PlayerSeasonStats(BaseModel):
    """A player's aggregated line for one season and team."""

    player_id: int
    player_name: str
    team_id: int
    team_name: str
    season_id: int
    appearances: int = 0
    goals: int = 0
    assists: int = 0
    nationality: Optional[str] = None
    position: Optional[str] = None


class ActivityLog(BaseModel):
    """Recent data import activity."""

    date: datetime
    activity: str
    season: str
    details: str
    goals_added: int = 0
    source: str = ""

    @field_validator("date")
    @classmethod
    def date_as_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


# =============================================================================
# Standings
# =============================================================================


class TeamRecord(BaseModel):
    """Accumulated per-team statistics for one season."""

    team_id: int
    team_name: str
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0

    @computed_field
    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against

    @computed_field
    @property
    def points(self) -> int:
        return self.won * POINTS_FOR_WIN + self.drawn * POINTS_FOR_DRAW

    @computed_field
    @property
    def win_percentage(self) -> float:
        if self.played == 0:
            return 0.0
        return self.won / self.played * 100

    @computed_field
    @property
    def points_per_game(self) -> float:
        if self.played == 0:
            return 0.0
        return self.points / self.played


class StandingsEntry(TeamRecord):
    """A team's row in the league table."""

    position: int = Field(ge=1)


class StandingsTable(BaseModel):
    """The complete league table for a season."""

    season_id: Optional[int] = None
    season: Optional[str] = None
    table: list[StandingsEntry] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.table)

    @property
    def leader(self) -> Optional[StandingsEntry]:
        return self.table[0] if self.table else None


class TeamSeasonStats(TeamRecord):
    """A single team's record for one season."""

    season_id: int
    season: str


class SeasonSummary(BaseModel):
    """Aggregate facts for a season."""

    season_id: Optional[int] = None
    season: Optional[str] = None
    total_matches: int = 0
    total_goals: int = 0
    avg_goals_per_match: float = 0.0
    champion: Optional[str] = None
    # None means "not determined" (too few scored matches), never "nobody".
    relegated: Optional[list[str]] = None


class TopScorer(BaseModel):
    """A ranked top scorer entry."""

    rank: int
    player_id: int
    player_name: str
    team_id: int
    team_name: str
    goals: int
    assists: int
    appearances: int
    nationality: Optional[str] = None
    position: Optional[str] = None


class MatchView(MatchFact):
    """A match as exposed to clients, with its derived status."""

    status: str


class PlayerPage(BaseModel):
    """One page of a filtered player listing."""

    players: list[Player] = Field(default_factory=list)
    total: int = 0
    limit: int
    offset: int = 0


class PlayerDetail(BaseModel):
    """A player with their most recent (or requested) season line."""

    player: Player
    stats: Optional[PlayerSeasonStats] = None


class SearchResult(BaseModel):
    """A player or team matching a name search."""

    type: str
    id: int
    name: str
    subtitle: Optional[str] = None


# =============================================================================
# Completeness Report
# =============================================================================


class SeasonCompleteness(BaseModel):
    """Per-season data completeness snapshot."""

    season_id: int
    year: int
    name: str = ""
    total_matches: int = 0
    matches_with_scores: int = 0
    matches_with_goals: int = 0
    total_goals: int = 0
    unique_players: int = 0
    teams_count: int = 0
    expected_matches: int = 0
    match_completeness: float = Field(default=0.0, ge=0, le=100)
    goal_completeness: float = Field(default=0.0, ge=0, le=100)
    season_progress: float = 0.0
    quality_level: QualityLevel = QualityLevel.NO_DATA
    quality_icon: str = ""
    season_start: Optional[datetime] = None
    season_end: Optional[datetime] = None
    last_updated: Optional[datetime] = None

    @property
    def has_data(self) -> bool:
        return self.total_matches > 0


class OverallStats(BaseModel):
    """Report-wide completeness statistics."""

    total_seasons: int = 0
    seasons_with_data: int = 0
    total_matches: int = 0
    total_goals: int = 0
    total_players: int = 0
    excellent_seasons: int = 0
    good_seasons: int = 0
    partial_seasons: int = 0
    minimal_seasons: int = 0
    no_data_seasons: int = 0
    avg_match_completeness: float = 0.0
    avg_goal_completeness: float = 0.0


class EraStats(BaseModel):
    """Completeness aggregated over one historical era."""

    name: str
    label: str
    year_range: str
    start_year: int
    end_year: int
    seasons_total: int = 0
    seasons_with_data: int = 0
    avg_goal_completeness: float = 0.0
    total_goals: int = 0
    total_matches: int = 0


class CompletenessReport(BaseModel):
    """The full data completeness report."""

    overall_stats: OverallStats
    season_data: list[SeasonCompleteness] = Field(default_factory=list)
    era_stats: list[EraStats] = Field(default_factory=list)
    best_seasons: list[SeasonCompleteness] = Field(default_factory=list)
    worst_seasons: list[SeasonCompleteness] = Field(default_factory=list)
    recent_activity: list[ActivityLog] = Field(default_factory=list)
    unavailable_sections: list[str] = Field(default_factory=list)
    generated_at: datetime
