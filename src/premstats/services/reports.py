"""
Report service - data completeness report.

Recent activity is optional upstream data: if it fails to load, the report is
still produced with that section empty (see build_completeness_report).
Failures fetching seasons, matches or goals propagate unchanged.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from ..analytics.completeness import build_completeness_report, build_season_completeness
from ..core.config import Settings, get_settings
from ..core.models import CompletenessReport, SeasonCompleteness
from ..exceptions import SeasonNotFoundError
from ..repositories.base import MatchFactProvider

logger = logging.getLogger(__name__)


def get_completeness_report(
    provider: MatchFactProvider,
    settings: Optional[Settings] = None,
    now: Optional[datetime] = None,
) -> CompletenessReport:
    """
    Build the full completeness report from provider data.

    Args:
        provider: Match fact provider.
        settings: Report settings (activity window, ranking size).
        now: Reference time for the activity window and report timestamp.
    """
    settings = settings or get_settings()
    now = now or datetime.now(tz=timezone.utc)
    since = now - timedelta(days=settings.activity_window_days)

    logger.info("Generating data completeness report...")

    return build_completeness_report(
        seasons=provider.list_seasons(),
        matches=provider.list_matches(),
        goals=provider.list_goals(),
        activity_loader=lambda: provider.list_recent_activity(since, settings.activity_limit),
        ranking_size=settings.report_ranking_size,
        now=now,
    )


def get_season_completeness(provider: MatchFactProvider, year: int) -> SeasonCompleteness:
    """
    Completeness record for the season starting in `year`.

    Raises:
        SeasonNotFoundError: If no season starts in that year.
    """
    season = provider.get_season_by_year(year)
    if season is None:
        raise SeasonNotFoundError(year)

    return build_season_completeness(
        season,
        provider.list_matches(season_id=season.id),
        provider.list_goals(season_id=season.id),
    )
