from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.config import get_settings
from app.schemas.player import PlayerDetailResponse, PlayerListResponse
from app.services.players import PLAYER_ORDERS, get_player_detail, list_players
from app.utils.pagination import next_page

settings = get_settings()

router = APIRouter(prefix="/players", tags=["players"])


@router.get("", response_model=PlayerListResponse)
async def get_players(
    name: str | None = None,
    team_id: int | None = None,
    position: str | None = None,
    order: str = Query(default="apps", description="apps, goals or assists"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_limit, ge=1, le=settings.max_page_limit),
    db: AsyncSession = Depends(get_db),
):
    """Get players ranked by career appearances, goals or assists."""
    if order not in PLAYER_ORDERS:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid order. Available: {', '.join(PLAYER_ORDERS)}",
        )

    items, total = await list_players(
        db,
        name=name,
        team_id=team_id,
        position=position,
        order=order,
        page=page,
        limit=limit,
    )
    return {"items": items, "total": total, "next_page": next_page(page, limit, total)}


@router.get("/{player_id}", response_model=PlayerDetailResponse)
async def get_player(player_id: int, db: AsyncSession = Depends(get_db)):
    """Get player by ID with per-season stats."""
    player = await get_player_detail(db, player_id)
    if player is None:
        raise HTTPException(status_code=404, detail="Player not found")
    return player
