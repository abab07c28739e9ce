"""
Pytest configuration for premstats tests.

Fixtures build in-memory providers over a small three-team season so every
test runs without a database.
"""

from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone

import pytest

from premstats.core.models import MatchFact
from premstats.repositories.memory import InMemoryMatchProvider

KICKOFF = datetime(2015, 8, 8, 15, 0, tzinfo=timezone.utc)


def pytest_configure(config):
    """Load a local .env (if any) without overriding the environment."""
    env_file = os.path.join(os.path.dirname(__file__), "..", ".env")
    if os.path.exists(env_file):
        with open(env_file) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    key = key.strip()
                    value = value.strip().strip('"').strip("'")
                    if key not in os.environ:
                        os.environ[key] = value


def _make_match(
    match_id: int,
    home: int,
    away: int,
    home_score: int | None = None,
    away_score: int | None = None,
    season_id: int = 1,
    day: int = 0,
    **kwargs,
) -> MatchFact:
    return MatchFact(
        match_id=match_id,
        season_id=season_id,
        home_team_id=home,
        away_team_id=away,
        home_score=home_score,
        away_score=away_score,
        match_date=KICKOFF + timedelta(days=day),
        **kwargs,
    )


@pytest.fixture
def make_match():
    """Factory for MatchFact rows with a fixed kickoff base date."""
    return _make_match


@pytest.fixture
def abc_matches():
    """A beats B 2-1, A draws C 1-1, B beats C 3-0."""
    return [
        _make_match(1, 1, 2, 2, 1, home_team="Team A", away_team="Team B"),
        _make_match(2, 1, 3, 1, 1, day=7, home_team="Team A", away_team="Team C"),
        _make_match(3, 2, 3, 3, 0, day=14, home_team="Team B", away_team="Team C"),
    ]


@pytest.fixture
def league_data():
    """JSON-compatible snapshot: one played season (2015) and one empty season (1993)."""
    return {
        "seasons": [
            {"id": 1, "year": 2015, "name": "2015/16"},
            {"id": 2, "year": 1993, "name": "1993/94"},
        ],
        "teams": [
            {"id": 1, "name": "Team A", "short_name": "A", "stadium": "Alpha Park"},
            {"id": 2, "name": "Team B", "short_name": "B"},
            {"id": 3, "name": "Team C", "short_name": "C"},
            {"id": 4, "name": "Team D", "short_name": "D"},
        ],
        "matches": [
            {"match_id": 1, "season_id": 1, "home_team_id": 1, "away_team_id": 2,
             "home_score": 2, "away_score": 1, "match_date": "2015-08-08T15:00:00Z"},
            {"match_id": 2, "season_id": 1, "home_team_id": 1, "away_team_id": 3,
             "home_score": 1, "away_score": 1, "match_date": "2015-08-15T15:00:00Z"},
            {"match_id": 3, "season_id": 1, "home_team_id": 2, "away_team_id": 3,
             "home_score": 3, "away_score": 0, "match_date": "2015-08-22T15:00:00Z"},
            {"match_id": 4, "season_id": 1, "home_team_id": 2, "away_team_id": 1,
             "match_date": "2015-09-07T15:00:00Z"},
        ],
        "goals": [
            {"goal_id": 1, "match_id": 1, "player_id": 10},
            {"goal_id": 2, "match_id": 1, "player_id": 12},
            {"goal_id": 3, "match_id": 1, "player_id": 11},
            {"goal_id": 4, "match_id": 2, "player_id": 10},
            {"goal_id": 5, "match_id": 2, "player_id": 13,
             "created_at": "2015-11-28T09:30:00Z"},
        ],
        "players": [
            {"id": 10, "name": "Alan Smith", "nationality": "England", "position": "Forward",
             "date_of_birth": "1962-09-21"},
            {"id": 11, "name": "Brian Jones", "nationality": "Wales", "position": "Midfielder"},
            {"id": 12, "name": "Carl Brown", "nationality": "England", "position": "Midfielder"},
            {"id": 14, "name": "Dan Green", "nationality": "Ireland", "position": "Defender"},
            {"id": 15, "name": "Eric Teamson", "nationality": "Scotland"},
        ],
        "player_stats": [
            {"player_id": 10, "player_name": "Alan Smith", "team_id": 1, "team_name": "Team A",
             "season_id": 1, "appearances": 3, "goals": 2, "assists": 1},
            {"player_id": 11, "player_name": "Brian Jones", "team_id": 2, "team_name": "Team B",
             "season_id": 1, "appearances": 3, "goals": 1, "assists": 0},
            {"player_id": 12, "player_name": "Carl Brown", "team_id": 1, "team_name": "Team A",
             "season_id": 1, "appearances": 2, "goals": 1, "assists": 2},
            {"player_id": 14, "player_name": "Dan Green", "team_id": 3, "team_name": "Team C",
             "season_id": 1, "appearances": 3, "goals": 0, "assists": 1},
            {"player_id": 10, "player_name": "Alan Smith", "team_id": 2, "team_name": "Team B",
             "season_id": 2, "appearances": 30, "goals": 9, "assists": 4},
        ],
        "activity": [
            {"date": "2015-11-28T09:30:00Z", "activity": "Goal Import", "season": "2015/16",
             "details": "Goals added to Team A vs Team C", "goals_added": 1,
             "source": "Data Import"},
        ],
    }


@pytest.fixture
def provider(league_data):
    return InMemoryMatchProvider.from_dict(league_data)


@pytest.fixture
def mixed_tz_data(league_data):
    """The fixture snapshot with some timestamps stored without a UTC offset."""
    league_data["matches"][1]["match_date"] = "2015-08-15T15:00:00"
    league_data["activity"][0]["date"] = "2015-11-28T09:30:00"
    return league_data


@pytest.fixture
def mixed_tz_provider(mixed_tz_data):
    return InMemoryMatchProvider.from_dict(mixed_tz_data)
