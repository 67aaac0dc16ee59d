"""Season endpoints: list, detail, standings, matches."""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.api.deps import get_db
from app.config import get_settings
from app.models import Match, MatchStatus, Season
from app.schemas.match import MatchListResponse, MatchResponse
from app.schemas.season import SeasonListResponse, SeasonResponse, StandingsResponse
from app.services.standings import read_standings
from app.utils.pagination import next_page, page_offset

settings = get_settings()

router = APIRouter(prefix="/seasons", tags=["seasons"])


async def _get_season_or_404(db: AsyncSession, season_id: int) -> Season:
    season = await db.get(Season, season_id)
    if not season:
        raise HTTPException(status_code=404, detail="Season not found")
    return season


@router.get("", response_model=SeasonListResponse)
async def get_seasons(db: AsyncSession = Depends(get_db)):
    """Get all seasons, newest first."""
    result = await db.execute(
        select(Season).order_by(Season.year.desc().nulls_last(), Season.id.desc())
    )
    seasons = result.scalars().all()
    return {
        "items": [SeasonResponse.model_validate(s) for s in seasons],
        "total": len(seasons),
    }


@router.get("/{season_id}", response_model=SeasonResponse)
async def get_season(season_id: int, db: AsyncSession = Depends(get_db)):
    season = await _get_season_or_404(db, season_id)
    return SeasonResponse.model_validate(season)


@router.get("/{season_id}/standings", response_model=StandingsResponse)
async def get_season_standings(season_id: int, db: AsyncSession = Depends(get_db)):
    """Regenerated league table for a season."""
    season = await _get_season_or_404(db, season_id)
    return {
        "season_id": season.id,
        "season_name": season.name,
        "standings": await read_standings(db, season_id),
    }


@router.get("/{season_id}/matches", response_model=MatchListResponse)
async def get_season_matches(
    season_id: int,
    status: MatchStatus | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_limit, ge=1, le=settings.max_page_limit),
    db: AsyncSession = Depends(get_db),
):
    """Matches of a season in date order, optionally by status."""
    await _get_season_or_404(db, season_id)

    filters = [Match.season_id == season_id]
    if status is not None:
        filters.append(Match.status == status)

    total = (await db.execute(select(func.count(Match.id)).where(*filters))).scalar_one()
    result = await db.execute(
        select(Match)
        .where(*filters)
        .options(selectinload(Match.home_team), selectinload(Match.away_team))
        .order_by(Match.match_date.asc().nulls_last(), Match.id)
        .offset(page_offset(page, limit))
        .limit(limit)
    )
    return {
        "items": [MatchResponse.model_validate(m) for m in result.scalars().all()],
        "total": total,
        "next_page": next_page(page, limit, total),
    }
