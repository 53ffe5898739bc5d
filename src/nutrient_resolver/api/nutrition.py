"""Nutrition API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request, status

from nutrient_resolver.api.models import ResolveRequest, ResolveResponse

if TYPE_CHECKING:
    from nutrient_resolver.containers import AppContainer

router = APIRouter(prefix="/nutrition", tags=["nutrition"])


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.post("/resolve", dependencies=[Depends(require_token)])
async def resolve_nutrition(
    payload: ResolveRequest, request: Request
) -> ResolveResponse:
    """Resolve nutrients for a consumed quantity of a food."""
    container: AppContainer = request.app.state.container
    try:
        serving = await container.resolution_service.resolve(
            user_id=payload.user_id,
            food_name=payload.food_name,
            quantity=payload.quantity,
            unit=payload.unit,
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    if serving is None:
        return ResolveResponse(status="unavailable")
    return ResolveResponse(status="ok", nutrients=serving.as_payload())


@router.get("/suggestions", dependencies=[Depends(require_token)])
async def food_suggestions(
    request: Request,
    user_id: UUID,
    query: str = "",
    limit: int = Query(default=10, ge=1, le=50),
) -> dict[str, list[str]]:
    """Return stored food names matching a partial query."""
    container: AppContainer = request.app.state.container
    return {"suggestions": container.food_store.suggest(user_id, query, limit)}
