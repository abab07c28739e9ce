"""Tests for the data completeness reporter."""

import random
from datetime import datetime, timezone

import pytest

from premstats.analytics.completeness import (
    best_and_worst_seasons,
    build_completeness_report,
    build_season_completeness,
    calculate_overall_stats,
    classify_quality,
    expected_matches,
    generate_era_stats,
)
from premstats.core.models import GoalFact, Season, SeasonCompleteness
from premstats.core.types import QualityLevel

NOW = datetime(2015, 12, 1, tzinfo=timezone.utc)


def _season_record(season_id, year, goal_completeness, total_matches=10):
    return SeasonCompleteness(
        season_id=season_id,
        year=year,
        name=f"{year}/{(year + 1) % 100:02d}",
        total_matches=total_matches,
        total_goals=total_matches * 2,
        goal_completeness=goal_completeness,
    )


class TestPolicies:
    @pytest.mark.parametrize(
        "year,expected",
        [(1992, 462), (1993, 462), (1994, 462), (1995, 380), (2015, 380), (1980, 0), (1991, 0)],
    )
    def test_expected_matches(self, year, expected):
        assert expected_matches(year) == expected

    @pytest.mark.parametrize(
        "value,level",
        [
            (100.0, QualityLevel.EXCELLENT),
            (95.0, QualityLevel.EXCELLENT),
            (94.999, QualityLevel.GOOD),
            (80.0, QualityLevel.GOOD),
            (79.999, QualityLevel.PARTIAL),
            (50.0, QualityLevel.PARTIAL),
            (49.999, QualityLevel.MINIMAL),
            (0.001, QualityLevel.MINIMAL),
            (0.0, QualityLevel.NO_DATA),
        ],
    )
    def test_quality_boundaries(self, value, level):
        assert classify_quality(value) == level


class TestSeasonCompleteness:
    def test_metrics(self, provider):
        season = provider.get_season(1)
        record = build_season_completeness(season, provider.list_matches(1), provider.list_goals(1))

        assert record.total_matches == 4
        assert record.matches_with_scores == 3
        assert record.matches_with_goals == 2
        assert record.total_goals == 5
        assert record.unique_players == 4
        assert record.teams_count == 3
        assert record.expected_matches == 380
        assert record.match_completeness == pytest.approx(75.0)
        assert record.goal_completeness == pytest.approx(50.0)
        assert record.season_progress == pytest.approx(4 / 380 * 100)
        assert record.quality_level == QualityLevel.PARTIAL
        assert record.quality_icon == "🔄"
        assert record.season_start == datetime(2015, 8, 8, 15, tzinfo=timezone.utc)
        assert record.season_end == datetime(2015, 9, 7, 15, tzinfo=timezone.utc)
        assert record.last_updated == datetime(2015, 11, 28, 9, 30, tzinfo=timezone.utc)

    def test_goals_on_unscored_matches_ignored(self, make_match):
        season = Season(id=1, year=2015, name="2015/16")
        matches = [make_match(1, 1, 2, 1, 0), make_match(2, 2, 1)]
        goals = [GoalFact(goal_id=1, match_id=1, player_id=5), GoalFact(goal_id=2, match_id=2, player_id=6)]

        record = build_season_completeness(season, matches, goals)

        assert record.matches_with_goals == 1
        assert record.total_goals == 1
        assert record.unique_players == 1
        assert record.goal_completeness <= record.match_completeness

    def test_empty_season(self):
        record = build_season_completeness(Season(id=3, year=1980, name="1980/81"), [])

        assert record.total_matches == 0
        assert record.match_completeness == 0.0
        assert record.goal_completeness == 0.0
        assert record.season_progress == 0.0
        assert record.quality_level == QualityLevel.NO_DATA
        assert record.season_start is None


class TestRollups:
    def test_single_member_eras(self):
        seasons = [
            _season_record(1, 1993, 100.0),
            _season_record(2, 2005, 50.0),
            _season_record(3, 2015, 0.0),
            _season_record(4, 2022, 80.0),
        ]
        eras = generate_era_stats(seasons)

        assert [e.name for e in eras] == ["Early", "Golden", "Modern", "Recent"]
        assert [e.seasons_total for e in eras] == [1, 1, 1, 1]
        assert [e.avg_goal_completeness for e in eras] == [100.0, 50.0, 0.0, 80.0]
        assert eras[0].year_range == "1992-1999"
        assert eras[0].label == "Early Premier League"

    def test_era_average_skips_empty_seasons(self):
        seasons = [_season_record(1, 2011, 60.0), _season_record(2, 2012, 0.0, total_matches=0)]
        modern = generate_era_stats(seasons)[2]

        assert modern.seasons_total == 2
        assert modern.seasons_with_data == 1
        assert modern.avg_goal_completeness == 60.0

    def test_out_of_range_years_excluded(self):
        eras = generate_era_stats([_season_record(1, 1985, 90.0), _season_record(2, 2030, 90.0)])
        assert all(e.seasons_total == 0 for e in eras)

    def test_overall_stats(self):
        seasons = [
            _season_record(1, 2015, 100.0),
            _season_record(2, 2016, 60.0),
            _season_record(3, 2017, 0.0, total_matches=0),
        ]
        seasons[0].quality_level = QualityLevel.EXCELLENT
        seasons[1].quality_level = QualityLevel.PARTIAL

        stats = calculate_overall_stats(seasons)

        assert stats.total_seasons == 3
        assert stats.seasons_with_data == 2
        assert stats.excellent_seasons == 1
        assert stats.partial_seasons == 1
        assert stats.no_data_seasons == 1
        assert stats.avg_goal_completeness == pytest.approx(80.0)

    def test_best_and_worst_fewer_than_five(self):
        seasons = [_season_record(1, 2015, 40.0), _season_record(2, 2016, 90.0)]
        best, worst = best_and_worst_seasons(seasons)

        assert [s.season_id for s in best] == [2, 1]
        assert [s.season_id for s in worst] == [1, 2]

    def test_best_and_worst_skip_empty_seasons(self):
        seasons = [_season_record(1, 2015, 0.0, total_matches=0), _season_record(2, 2016, 10.0)]
        best, worst = best_and_worst_seasons(seasons)

        assert [s.season_id for s in best] == [2]
        assert [s.season_id for s in worst] == [2]


class TestCompletenessReport:
    def _ranking_inputs(self, make_match):
        # Season i has i scored matches; the first with_goals[i] of them carry a goal
        seasons = [Season(id=i, year=2000 + i, name=f"Season {i}") for i in range(1, 9)]
        with_goals = {1: 1, 2: 1, 3: 3, 4: 2, 5: 5, 6: 3, 7: 0, 8: 8}
        matches, goals = [], []
        match_id = 1
        for season in seasons:
            for n in range(season.id):
                matches.append(make_match(match_id, 1, 2, 1, 0, season_id=season.id))
                if n < with_goals[season.id]:
                    goals.append(GoalFact(goal_id=match_id, match_id=match_id, player_id=1))
                match_id += 1
        return seasons, matches, goals

    def test_ranking_round_trip(self, make_match):
        seasons, matches, goals = self._ranking_inputs(make_match)
        first = build_completeness_report(seasons, matches, goals, now=NOW)

        shuffled_seasons = list(seasons)
        shuffled_matches = list(matches)
        random.Random(7).shuffle(shuffled_seasons)
        random.Random(7).shuffle(shuffled_matches)
        second = build_completeness_report(shuffled_seasons, shuffled_matches, goals, now=NOW)

        assert [s.season_id for s in first.best_seasons] == [s.season_id for s in second.best_seasons]
        assert [s.season_id for s in first.worst_seasons] == [s.season_id for s in second.worst_seasons]
        assert len(first.best_seasons) == 5
        # Ties keep year order
        assert [s.season_id for s in first.best_seasons] == [1, 3, 5, 8, 2]
        assert [s.season_id for s in first.worst_seasons] == [7, 2, 4, 6, 1]

    def test_full_report(self, provider):
        report = build_completeness_report(
            provider.list_seasons(),
            provider.list_matches(),
            provider.list_goals(),
            activity_loader=lambda: provider.list_recent_activity(NOW.replace(day=24, month=11)),
            now=NOW,
        )

        assert [s.year for s in report.season_data] == [1993, 2015]
        assert report.overall_stats.total_seasons == 2
        assert report.overall_stats.seasons_with_data == 1
        assert report.overall_stats.no_data_seasons == 1
        assert len(report.recent_activity) == 1
        assert report.unavailable_sections == []
        assert report.generated_at == NOW

    def test_mixed_offsets(self, mixed_tz_provider):
        report = build_completeness_report(
            mixed_tz_provider.list_seasons(),
            mixed_tz_provider.list_matches(),
            mixed_tz_provider.list_goals(),
            activity_loader=lambda: mixed_tz_provider.list_recent_activity(NOW.replace(day=24, month=11)),
            now=NOW,
        )

        season = report.season_data[1]
        assert season.season_start == datetime(2015, 8, 8, 15, tzinfo=timezone.utc)
        assert season.season_end == datetime(2015, 9, 7, 15, tzinfo=timezone.utc)
        assert len(report.recent_activity) == 1
        assert report.unavailable_sections == []

    def test_failing_activity_loader(self, provider):
        def broken():
            raise RuntimeError("activity table unavailable")

        report = build_completeness_report(
            provider.list_seasons(),
            provider.list_matches(),
            provider.list_goals(),
            activity_loader=broken,
            now=NOW,
        )

        assert report.recent_activity == []
        assert report.unavailable_sections == ["recent_activity"]
        assert len(report.season_data) == 2

    def test_empty_input(self):
        report = build_completeness_report([], [], now=NOW)

        assert report.season_data == []
        assert report.best_seasons == []
        assert report.overall_stats.avg_goal_completeness == 0.0
        assert all(e.seasons_total == 0 for e in report.era_stats)
