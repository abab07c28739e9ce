"""
Core module for PremStats.

This module provides the foundational components:
- Configuration management (config.py)
- Data models (models.py)
- Enumerations and league policy constants (types.py)

Usage:
    from premstats.core import Settings, get_settings
    from premstats.core import MatchFact, TeamRecord, StandingsTable
    from premstats.core import QualityLevel, ERA_REGISTRY
"""

# Configuration
from .config import Settings, get_settings

# Types
from .types import (
    ERA_REGISTRY,
    Era,
    MatchStatus,
    QualityLevel,
    RELEGATION_MATCH_THRESHOLD,
)

# Models
from .models import (
    ActivityLog,
    CompletenessReport,
    EraStats,
    GoalFact,
    MatchFact,
    MatchView,
    OverallStats,
    Player,
    PlayerDetail,
    PlayerPage,
    PlayerSeasonStats,
    SearchResult,
    Season,
    SeasonCompleteness,
    SeasonSummary,
    StandingsEntry,
    StandingsTable,
    Team,
    TeamRecord,
    TeamSeasonStats,
    TopScorer,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Types
    "ERA_REGISTRY",
    "Era",
    "MatchStatus",
    "QualityLevel",
    "RELEGATION_MATCH_THRESHOLD",
    # Models
    "ActivityLog",
    "CompletenessReport",
    "EraStats",
    "GoalFact",
    "MatchFact",
    "MatchView",
    "OverallStats",
    "Player",
    "PlayerDetail",
    "PlayerPage",
    "PlayerSeasonStats",
    "SearchResult",
    "Season",
    "SeasonCompleteness",
    "SeasonSummary",
    "StandingsEntry",
    "StandingsTable",
    "Team",
    "TeamRecord",
    "TeamSeasonStats",
    "TopScorer",
]
