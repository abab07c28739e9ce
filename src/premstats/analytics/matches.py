"""Derived match status. Status is never stored, only computed from scores and date."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from ..core.models import MatchFact, MatchView, as_utc
from ..core.types import MatchStatus


def derive_match_status(match: MatchFact, now: Optional[datetime] = None) -> MatchStatus:
    """
    completed if both scores are recorded, otherwise pending when the date
    has passed and scheduled when it hasn't.

    Match dates are always UTC-aware; a naive `now` is read as UTC.
    """
    if match.is_scored:
        return MatchStatus.completed

    now = as_utc(now) if now is not None else datetime.now(tz=timezone.utc)
    if match.match_date < now:
        return MatchStatus.pending
    return MatchStatus.scheduled


def to_match_view(match: MatchFact, now: Optional[datetime] = None) -> MatchView:
    return MatchView(**match.model_dump(), status=derive_match_status(match, now).value)
