"""
Shared types and league policy constants.

Central registry for the fixed historical eras and the league-format policies
(expected fixture counts, relegation threshold). Update ERA_REGISTRY when a new
era is added to the reporting calendar.
"""

from dataclasses import dataclass
from enum import Enum


class MatchStatus(str, Enum):
    """Derived status of a fixture."""
    completed = "completed"
    pending = "pending"
    scheduled = "scheduled"


class QualityLevel(str, Enum):
    """Data-quality label assigned from a season's goal completeness."""
    EXCELLENT = "Excellent"
    GOOD = "Good"
    PARTIAL = "Partial"
    MINIMAL = "Minimal"
    NO_DATA = "No Data"


QUALITY_ICONS: dict[QualityLevel, str] = {
    QualityLevel.EXCELLENT: "🌟",
    QualityLevel.GOOD: "✅",
    QualityLevel.PARTIAL: "🔄",
    QualityLevel.MINIMAL: "⚠️",
    QualityLevel.NO_DATA: "❌",
}

# Ordered thresholds on goal completeness, first match wins.
# Anything not caught here (0 or below) is NO_DATA.
QUALITY_THRESHOLDS: list[tuple[float, QualityLevel]] = [
    (95.0, QualityLevel.EXCELLENT),
    (80.0, QualityLevel.GOOD),
    (50.0, QualityLevel.PARTIAL),
]


# =============================================================================
# League format policy
# =============================================================================

POINTS_FOR_WIN = 3
POINTS_FOR_DRAW = 1

# Policy constant: a full 20-team double round robin (20 * 19).
# Relegation is only reported once a season has this many scored matches.
RELEGATION_MATCH_THRESHOLD = 380
RELEGATION_SPOTS = 3

FIRST_LEAGUE_YEAR = 1992
TWENTY_TWO_TEAM_LAST_YEAR = 1994
MATCHES_22_TEAM_SEASON = 462  # 22 teams, 42 matches each
MATCHES_20_TEAM_SEASON = 380  # 20 teams, 38 matches each


@dataclass(frozen=True)
class Era:
    """A fixed historical year range used for longitudinal reporting."""

    name: str
    label: str
    start_year: int
    end_year: int

    @property
    def year_range(self) -> str:
        return f"{self.start_year}-{self.end_year}"

    def contains(self, year: int) -> bool:
        return self.start_year <= year <= self.end_year


# Non-overlapping, inclusive ranges. Seasons outside every range are not
# assigned to any era.
ERA_REGISTRY: list[Era] = [
    Era(name="Early", label="Early Premier League", start_year=1992, end_year=1999),
    Era(name="Golden", label="Golden Era", start_year=2000, end_year=2009),
    Era(name="Modern", label="Modern Era", start_year=2010, end_year=2019),
    Era(name="Recent", label="Recent Era", start_year=2020, end_year=2025),
]


# =============================================================================
# Table names
# =============================================================================

SEASONS_TABLE = "seasons"
TEAMS_TABLE = "teams"
MATCHES_TABLE = "matches"
GOALS_TABLE = "goals"
PLAYERS_TABLE = "players"
PLAYER_STATS_TABLE = "player_stats"
