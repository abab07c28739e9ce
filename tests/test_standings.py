"""Tests for league table aggregation."""

import random

from premstats.analytics.standings import apply_result, build_standings
from premstats.core.models import Team, TeamRecord


class TestApplyResult:
    def test_win_draw_loss(self):
        record = TeamRecord(team_id=1, team_name="Team A")
        apply_result(record, 2, 0)
        apply_result(record, 1, 1)
        apply_result(record, 0, 3)

        assert (record.won, record.drawn, record.lost) == (1, 1, 1)
        assert record.played == 3
        assert record.goals_for == 3
        assert record.goals_against == 4
        assert record.goal_difference == -1
        assert record.points == 4


class TestBuildStandings:
    def test_three_team_scenario(self, abc_matches):
        standings = build_standings(abc_matches)
        rows = [(e.team_name, e.played, e.won, e.drawn, e.lost, e.points) for e in standings.table]

        assert rows == [
            ("Team A", 2, 1, 1, 0, 4),
            ("Team B", 2, 1, 0, 1, 3),
            ("Team C", 2, 0, 1, 1, 1),
        ]
        assert [e.position for e in standings.table] == [1, 2, 3]
        assert standings.leader.team_name == "Team A"

    def test_totals_balance(self, abc_matches):
        standings = build_standings(abc_matches)
        draws = sum(1 for m in abc_matches if m.home_score == m.away_score)
        decisive = sum(1 for m in abc_matches if m.home_score != m.away_score)

        assert sum(e.won for e in standings.table) == decisive
        assert sum(e.lost for e in standings.table) == decisive
        assert sum(e.drawn for e in standings.table) == 2 * draws
        assert sum(e.goals_for for e in standings.table) == sum(
            e.goals_against for e in standings.table
        )
        for entry in standings.table:
            assert entry.played == entry.won + entry.drawn + entry.lost

    def test_order_independent(self, make_match):
        matches = [
            make_match(i, home, away, hs, as_)
            for i, (home, away, hs, as_) in enumerate(
                [(1, 2, 1, 0), (3, 4, 1, 0), (2, 1, 1, 0), (4, 3, 1, 0), (1, 3, 2, 2), (2, 4, 0, 0)],
                start=1,
            )
        ]
        teams = [Team(id=i, name=name) for i, name in enumerate(["Delta", "Alpha", "Charlie", "Bravo"], 1)]
        expected = build_standings(matches, teams).model_dump()

        shuffled = list(matches)
        for seed in range(5):
            random.Random(seed).shuffle(shuffled)
            assert build_standings(shuffled, teams).model_dump() == expected

    def test_exact_ties_break_on_name(self, make_match):
        teams = [Team(id=1, name="Zulu"), Team(id=2, name="Alpha")]
        standings = build_standings([make_match(1, 1, 2, 1, 1)], teams)

        assert [e.team_name for e in standings.table] == ["Alpha", "Zulu"]
        assert [e.position for e in standings.table] == [1, 2]

    def test_goals_for_breaks_goal_difference_tie(self, make_match):
        teams = [Team(id=1, name="A"), Team(id=2, name="B"), Team(id=3, name="C"), Team(id=4, name="D")]
        matches = [
            make_match(1, 1, 3, 3, 2),  # A: +1, 3 scored
            make_match(2, 2, 4, 1, 0),  # B: +1, 1 scored
        ]
        standings = build_standings(matches, teams)

        assert [e.team_name for e in standings.table[:2]] == ["A", "B"]

    def test_unscored_matches_ignored(self, abc_matches, make_match):
        pending = make_match(9, 1, 2, day=60, home_team="Team A", away_team="Team B")
        with_pending = build_standings(abc_matches + [pending])

        assert with_pending.model_dump() == build_standings(abc_matches).model_dump()

    def test_roster_team_without_matches_gets_zeroed_row(self, abc_matches):
        teams = [Team(id=1, name="Team A"), Team(id=4, name="Team D")]
        standings = build_standings(abc_matches, teams)

        team_d = next(e for e in standings.table if e.team_id == 4)
        assert team_d.played == 0
        assert team_d.points == 0
        assert team_d.win_percentage == 0
        assert team_d.points_per_game == 0
        assert len(standings) == 4

    def test_missing_names_fall_back_to_id(self, make_match):
        standings = build_standings([make_match(1, 7, 8, 0, 1)])
        assert [e.team_name for e in standings.table] == ["Team 8", "Team 7"]

    def test_empty_season(self):
        standings = build_standings([], season_id=5, season_name="2030/31")

        assert standings.table == []
        assert standings.leader is None
        assert standings.season_id == 5
