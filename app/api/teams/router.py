from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.api.deps import get_db
from app.config import get_settings
from app.models import Player, PlayerMatchStats, Standing, Team, TeamSeason
from app.schemas.team import TeamDetailResponse, TeamListResponse, TeamSeasonStandingEntry
from app.services.standings import read_team_season_standings
from app.utils.pagination import next_page, page_offset

settings = get_settings()

router = APIRouter(prefix="/teams", tags=["teams"])

REPRESENTATIVE_PLAYERS = 3


async def _representative_players(db: AsyncSession, team_id: int) -> list[dict]:
    """Players with the most match rows for the team."""
    appearances = func.count(PlayerMatchStats.id).label("appearances")
    result = await db.execute(
        select(Player.id, Player.name, Player.jersey_number, appearances)
        .join(PlayerMatchStats, PlayerMatchStats.player_id == Player.id)
        .where(PlayerMatchStats.team_id == team_id)
        .group_by(Player.id, Player.name, Player.jersey_number)
        .order_by(appearances.desc(), Player.id)
        .limit(REPRESENTATIVE_PLAYERS)
    )
    return [
        {
            "id": row.id,
            "name": row.name,
            "jersey_number": row.jersey_number,
            "appearances": row.appearances,
        }
        for row in result.all()
    ]


async def _championships(db: AsyncSession, team_id: int) -> list[dict]:
    """Seasons the team finished first in, counted once the season has ended."""
    today = date.today()
    result = await db.execute(
        select(Standing)
        .where(Standing.team_id == team_id, Standing.position == 1)
        .options(selectinload(Standing.season))
        .order_by(Standing.season_id)
    )
    return [
        {"id": s.season.id, "name": s.season.name, "year": s.season.year}
        for s in result.scalars().all()
        if s.season and s.season.end_date is not None and s.season.end_date <= today
    ]


async def _build_team(db: AsyncSession, team: Team) -> dict:
    seasons = sorted(
        (ts.season for ts in team.team_seasons if ts.season is not None),
        key=lambda s: s.id,
    )
    championships = await _championships(db, team.id)
    return {
        "id": team.id,
        "name": team.name,
        "logo": team.logo,
        "founded_year": team.founded_year,
        "description": team.description,
        "seasons": [{"id": s.id, "name": s.name, "year": s.year} for s in seasons],
        "representative_players": await _representative_players(db, team.id),
        "championships": championships,
        "championships_count": len(championships),
    }


@router.get("", response_model=TeamListResponse)
async def get_teams(
    season_id: int | None = None,
    name: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_limit, ge=1, le=settings.max_page_limit),
    db: AsyncSession = Depends(get_db),
):
    """Get teams, optionally filtered by season membership and name."""
    filters = []
    if season_id is not None:
        filters.append(
            Team.id.in_(select(TeamSeason.team_id).where(TeamSeason.season_id == season_id))
        )
    if name:
        filters.append(Team.name.ilike(f"%{name}%"))

    total = (await db.execute(select(func.count(Team.id)).where(*filters))).scalar_one()

    result = await db.execute(
        select(Team)
        .where(*filters)
        .options(selectinload(Team.team_seasons).selectinload(TeamSeason.season))
        .order_by(Team.name, Team.id)
        .offset(page_offset(page, limit))
        .limit(limit)
    )
    teams = result.scalars().all()

    items = [await _build_team(db, team) for team in teams]
    return {"items": items, "total": total, "next_page": next_page(page, limit, total)}


@router.get("/{team_id}", response_model=TeamDetailResponse)
async def get_team(team_id: int, db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        select(Team)
        .where(Team.id == team_id)
        .options(selectinload(Team.team_seasons).selectinload(TeamSeason.season))
    )
    team = result.scalar_one_or_none()
    if not team:
        raise HTTPException(status_code=404, detail="Team not found")
    return await _build_team(db, team)


@router.get("/{team_id}/season-standings", response_model=list[TeamSeasonStandingEntry])
async def get_team_season_standings(team_id: int, db: AsyncSession = Depends(get_db)):
    """Every season with the team's final position and points, if it took part."""
    team = await db.get(Team, team_id)
    if not team:
        raise HTTPException(status_code=404, detail="Team not found")
    return await read_team_season_standings(db, team_id)
