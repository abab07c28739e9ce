"""
Data completeness reporting.

Measures, per season, how much of the expected data is actually present and
rolls the per-season records up into overall statistics, era buckets and
best/worst rankings.

Methodology:
- match_completeness = matches with both scores / matches on record
- goal_completeness = scored matches with at least one recorded goal / matches on record
- season_progress = matches on record / matches the league format expects
- Quality level is a function of goal completeness alone

Every ratio is 0 when its denominator is 0; nothing here raises on empty input.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional, Sequence

from ..core.models import (
    ActivityLog,
    CompletenessReport,
    EraStats,
    GoalFact,
    MatchFact,
    OverallStats,
    Season,
    SeasonCompleteness,
)
from ..core.types import (
    ERA_REGISTRY,
    FIRST_LEAGUE_YEAR,
    MATCHES_20_TEAM_SEASON,
    MATCHES_22_TEAM_SEASON,
    QUALITY_ICONS,
    QUALITY_THRESHOLDS,
    TWENTY_TWO_TEAM_LAST_YEAR,
    Era,
    QualityLevel,
)

logger = logging.getLogger(__name__)

DEFAULT_RANKING_SIZE = 5

RECENT_ACTIVITY_SECTION = "recent_activity"


# =============================================================================
# Policies
# =============================================================================


def expected_matches(year: int) -> int:
    """
    Number of fixtures the league format expects for a season.

    462 for the 22-team seasons (1992-1994), 380 from 1995 onward,
    0 before the league existed.
    """
    if year < FIRST_LEAGUE_YEAR:
        return 0
    if year <= TWENTY_TWO_TEAM_LAST_YEAR:
        return MATCHES_22_TEAM_SEASON
    return MATCHES_20_TEAM_SEASON


def classify_quality(goal_completeness: float) -> QualityLevel:
    """Quality label for a goal completeness percentage. Total over all floats."""
    for threshold, level in QUALITY_THRESHOLDS:
        if goal_completeness >= threshold:
            return level
    if goal_completeness > 0:
        return QualityLevel.MINIMAL
    return QualityLevel.NO_DATA


def _percentage(numerator: int, denominator: int) -> float:
    if denominator <= 0:
        return 0.0
    return numerator / denominator * 100


# =============================================================================
# Per-season metrics
# =============================================================================


def build_season_completeness(
    season: Season,
    matches: Iterable[MatchFact],
    goals: Iterable[GoalFact] = (),
) -> SeasonCompleteness:
    """
    Compute the completeness record for one season.

    Args:
        season: Season reference data (id, year, name).
        matches: Every match on record for the season, scored or not.
        goals: Recorded goals; goals for matches outside the season are ignored.
    """
    matches = [m for m in matches if m.season_id == season.id]
    scored_ids = {m.match_id for m in matches if m.is_scored}
    season_goals = [g for g in goals if g.match_id in scored_ids]

    total_matches = len(matches)
    matches_with_scores = len(scored_ids)
    matches_with_goals = len({g.match_id for g in season_goals})
    unique_players = len({g.player_id for g in season_goals if g.player_id is not None})

    team_ids: set[int] = set()
    for match in matches:
        team_ids.add(match.home_team_id)
        team_ids.add(match.away_team_id)

    dates = [m.match_date for m in matches]
    stamps = [g.created_at for g in season_goals if g.created_at]
    stamps.extend(m.created_at for m in matches if m.created_at)
    if season.created_at:
        stamps.append(season.created_at)

    expected = expected_matches(season.year)
    goal_completeness = _percentage(matches_with_goals, total_matches)
    quality = classify_quality(goal_completeness)

    return SeasonCompleteness(
        season_id=season.id,
        year=season.year,
        name=season.name,
        total_matches=total_matches,
        matches_with_scores=matches_with_scores,
        matches_with_goals=matches_with_goals,
        total_goals=len(season_goals),
        unique_players=unique_players,
        teams_count=len(team_ids),
        expected_matches=expected,
        match_completeness=_percentage(matches_with_scores, total_matches),
        goal_completeness=goal_completeness,
        season_progress=_percentage(total_matches, expected),
        quality_level=quality,
        quality_icon=QUALITY_ICONS[quality],
        season_start=min(dates) if dates else None,
        season_end=max(dates) if dates else None,
        last_updated=max(stamps) if stamps else None,
    )


# =============================================================================
# Roll-ups
# =============================================================================


_QUALITY_COUNTERS = {
    QualityLevel.EXCELLENT: "excellent_seasons",
    QualityLevel.GOOD: "good_seasons",
    QualityLevel.PARTIAL: "partial_seasons",
    QualityLevel.MINIMAL: "minimal_seasons",
    QualityLevel.NO_DATA: "no_data_seasons",
}


def calculate_overall_stats(seasons: Sequence[SeasonCompleteness]) -> OverallStats:
    """Fold per-season records into report-wide totals and averages."""
    stats = OverallStats(total_seasons=len(seasons))
    match_sum = 0.0
    goal_sum = 0.0

    for season in seasons:
        stats.total_matches += season.total_matches
        stats.total_goals += season.total_goals
        stats.total_players += season.unique_players

        if season.has_data:
            stats.seasons_with_data += 1
            match_sum += season.match_completeness
            goal_sum += season.goal_completeness

        counter = _QUALITY_COUNTERS[season.quality_level]
        setattr(stats, counter, getattr(stats, counter) + 1)

    if stats.seasons_with_data:
        stats.avg_match_completeness = match_sum / stats.seasons_with_data
        stats.avg_goal_completeness = goal_sum / stats.seasons_with_data

    return stats


def generate_era_stats(
    seasons: Sequence[SeasonCompleteness],
    eras: Sequence[Era] = ERA_REGISTRY,
) -> list[EraStats]:
    """
    Aggregate seasons into the fixed historical eras.

    Average goal completeness only counts member seasons that have matches.
    Seasons outside every era are left out.
    """
    result = []
    for era in eras:
        members = [s for s in seasons if era.contains(s.year)]
        with_data = [s for s in members if s.has_data]

        avg = 0.0
        if with_data:
            avg = sum(s.goal_completeness for s in with_data) / len(with_data)

        result.append(
            EraStats(
                name=era.name,
                label=era.label,
                year_range=era.year_range,
                start_year=era.start_year,
                end_year=era.end_year,
                seasons_total=len(members),
                seasons_with_data=len(with_data),
                avg_goal_completeness=avg,
                total_goals=sum(s.total_goals for s in members),
                total_matches=sum(s.total_matches for s in members),
            )
        )
    return result


def best_and_worst_seasons(
    seasons: Sequence[SeasonCompleteness],
    size: int = DEFAULT_RANKING_SIZE,
) -> tuple[list[SeasonCompleteness], list[SeasonCompleteness]]:
    """
    Top and bottom seasons by goal completeness.

    Only seasons with matches qualify. Both sorts are stable, so exact ties
    keep their input order.
    """
    with_data = [s for s in seasons if s.has_data]
    best = sorted(with_data, key=lambda s: s.goal_completeness, reverse=True)
    worst = sorted(with_data, key=lambda s: s.goal_completeness)
    return best[:size], worst[:size]


# =============================================================================
# Report
# =============================================================================


def _load_recent_activity(
    loader: Optional[Callable[[], list[ActivityLog]]],
) -> Optional[list[ActivityLog]]:
    """Run the optional activity loader; None means the section is unavailable."""
    if loader is None:
        return []
    try:
        return list(loader())
    except Exception as e:
        logger.warning(f"Recent activity unavailable, continuing without it: {e}")
        return None


def build_completeness_report(
    seasons: Iterable[Season],
    matches: Iterable[MatchFact],
    goals: Iterable[GoalFact] = (),
    activity_loader: Optional[Callable[[], list[ActivityLog]]] = None,
    ranking_size: int = DEFAULT_RANKING_SIZE,
    now: Optional[datetime] = None,
) -> CompletenessReport:
    """
    Build the full data completeness report.

    Args:
        seasons: All seasons on record.
        matches: All matches on record (any season).
        goals: All recorded goals.
        activity_loader: Optional callable returning recent import activity.
            If it fails the report is still produced with that section empty
            and listed in ``unavailable_sections``.
        ranking_size: How many best/worst seasons to list.
        now: Report timestamp (defaults to the current UTC time).

    Returns:
        CompletenessReport.
    """
    matches_by_season: dict[int, list[MatchFact]] = {}
    for match in matches:
        matches_by_season.setdefault(match.season_id, []).append(match)

    goals_by_match: dict[int, list[GoalFact]] = {}
    for goal in goals:
        goals_by_match.setdefault(goal.match_id, []).append(goal)

    # Canonical order makes rankings independent of provider ordering
    ordered = sorted(seasons, key=lambda s: (s.year, s.id))

    season_data = []
    for season in ordered:
        season_matches = matches_by_season.get(season.id, [])
        season_goals = [
            goal
            for match in season_matches
            for goal in goals_by_match.get(match.match_id, [])
        ]
        season_data.append(build_season_completeness(season, season_matches, season_goals))

    best, worst = best_and_worst_seasons(season_data, ranking_size)

    unavailable = []
    activity = _load_recent_activity(activity_loader)
    if activity is None:
        unavailable.append(RECENT_ACTIVITY_SECTION)
        activity = []

    report = CompletenessReport(
        overall_stats=calculate_overall_stats(season_data),
        season_data=season_data,
        era_stats=generate_era_stats(season_data),
        best_seasons=best,
        worst_seasons=worst,
        recent_activity=activity,
        unavailable_sections=unavailable,
        generated_at=now or datetime.now(tz=timezone.utc),
    )

    logger.info(
        "Completeness report generated: %d seasons, %d with data",
        report.overall_stats.total_seasons,
        report.overall_stats.seasons_with_data,
    )
    return report
