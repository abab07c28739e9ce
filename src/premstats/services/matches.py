"""Match service - match listings and lookups with derived status."""

from datetime import datetime
from typing import Optional

from ..analytics.matches import to_match_view
from ..core.models import MatchView
from ..exceptions import MatchNotFoundError
from ..repositories.base import MatchFactProvider


def list_matches(
    provider: MatchFactProvider,
    season_id: Optional[int] = None,
    team_id: Optional[int] = None,
    limit: int = 50,
    offset: int = 0,
    now: Optional[datetime] = None,
) -> list[MatchView]:
    """
    Matches newest first, with a status derived from scores and date.

    Args:
        provider: Match fact provider.
        season_id: Optional season filter.
        team_id: Optional team filter (home or away).
        limit: Page size (0 for no limit).
        offset: Rows to skip.
        now: Reference time for pending/scheduled (defaults to now).
    """
    matches = provider.list_matches(season_id=season_id, team_id=team_id)
    matches.sort(key=lambda m: (m.match_date, m.match_id), reverse=True)

    page = matches[offset:offset + limit] if limit > 0 else matches[offset:]
    return [to_match_view(m, now) for m in page]


def get_match(
    provider: MatchFactProvider,
    match_id: int,
    now: Optional[datetime] = None,
) -> MatchView:
    """
    A single match with its derived status.

    Raises:
        MatchNotFoundError: If the match doesn't exist.
    """
    match = provider.get_match(match_id)
    if match is None:
        raise MatchNotFoundError(match_id)
    return to_match_view(match, now)
