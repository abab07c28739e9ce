"""Search router - name search across players and teams."""

from typing import Annotated, Any

from fastapi import APIRouter, Query

from ...services.players import search
from ..dependencies import ProviderDependency
from ..errors import ValidationError

router = APIRouter()


@router.get("")
async def search_all(
    provider: ProviderDependency,
    q: Annotated[str, Query(description="Name fragment")] = "",
    limit: Annotated[int, Query(ge=1, le=50)] = 20,
) -> dict[str, Any]:
    """Players and teams whose name contains `q`, players first."""
    if not q.strip():
        raise ValidationError("Search query is required")
    results = search(provider, q, limit)
    return {"query": q, "results": [r.model_dump(mode="json") for r in results]}
