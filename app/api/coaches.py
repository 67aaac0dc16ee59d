from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.config import get_settings
from app.schemas.coach import CoachDetailResponse, CoachListResponse
from app.services.coaches import COACH_ORDERS, get_coach_detail, list_coaches
from app.utils.pagination import next_page

settings = get_settings()

router = APIRouter(prefix="/coaches", tags=["coaches"])


@router.get("", response_model=CoachListResponse)
async def get_coaches(
    search: str | None = None,
    order: str = Query(default="name", description="name, total, wins or win_rate"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_limit, ge=1, le=settings.max_page_limit),
    db: AsyncSession = Depends(get_db),
):
    """Get coaches with their head-coach match record."""
    if order not in COACH_ORDERS:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid order. Available: {', '.join(COACH_ORDERS)}",
        )

    items, total = await list_coaches(db, search=search, order=order, page=page, limit=limit)
    return {"items": items, "total": total, "next_page": next_page(page, limit, total)}


@router.get("/{coach_id}", response_model=CoachDetailResponse)
async def get_coach(coach_id: int, db: AsyncSession = Depends(get_db)):
    coach = await get_coach_detail(db, coach_id)
    if coach is None:
        raise HTTPException(status_code=404, detail="Coach not found")
    return coach
