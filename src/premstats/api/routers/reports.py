"""
Reports router - data completeness.

Endpoints:
- GET /completeness - Full report (overall, per season, eras, best/worst, recent activity)
- GET /completeness/season?year= - One season's completeness record
"""

from typing import Annotated, Any

from fastapi import APIRouter, Query, Response

from ...services.reports import get_completeness_report, get_season_completeness
from ..dependencies import ProviderDependency
from ..errors import ValidationError

router = APIRouter()

MIN_REPORT_YEAR = 1888


@router.get("/completeness")
async def completeness_report(provider: ProviderDependency, response: Response) -> dict[str, Any]:
    """
    Live data completeness report.

    If recent activity can't be loaded the report is still returned, with
    ``recent_activity`` empty and listed in ``unavailable_sections``.
    """
    report = get_completeness_report(provider)
    response.headers["Cache-Control"] = "no-cache"
    return report.model_dump(mode="json")


@router.get("/completeness/season")
async def season_completeness(
    provider: ProviderDependency,
    year: Annotated[int, Query(description="Season starting year")],
) -> dict[str, Any]:
    if year < MIN_REPORT_YEAR:
        raise ValidationError(
            message="Invalid year parameter",
            detail=f"Received: {year}",
        )
    return get_season_completeness(provider, year).model_dump(mode="json")
