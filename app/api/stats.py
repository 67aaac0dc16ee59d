from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.config import get_settings
from app.models import Player
from app.schemas.stats import (
    GoalkeeperRankingsResponse,
    PlayerVsTeamsResponse,
    ScoringRankingsResponse,
    TeamRankingsResponse,
)
from app.services.rankings import (
    GOALKEEPER_SORTS,
    SCORING_SORTS,
    TEAM_SORTS,
    get_goalkeeper_rankings,
    get_player_vs_teams,
    get_scoring_rankings,
    get_team_rankings,
)
from app.utils.pagination import next_page, paginate

settings = get_settings()

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/team-rankings", response_model=TeamRankingsResponse)
async def team_rankings(
    season_id: int | None = None,
    sort_by: str = Query(default="win_rate"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_limit, ge=1, le=settings.max_page_limit),
    db: AsyncSession = Depends(get_db),
):
    """Rank teams over all matches with a score, optionally within one season."""
    if sort_by not in TEAM_SORTS:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid sort_by. Available: {', '.join(TEAM_SORTS)}",
        )

    rankings = await get_team_rankings(db, season_id, sort_by)
    total = len(rankings)
    return {
        "season_id": season_id,
        "sort_by": sort_by,
        "items": paginate(rankings, page, limit),
        "total": total,
        "next_page": next_page(page, limit, total),
    }


@router.get("/scoring-rankings", response_model=ScoringRankingsResponse)
async def scoring_rankings(
    season_id: int | None = None,
    sort_by: str = Query(default="attack_points"),
    min_matches: int = Query(default=3, ge=0),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_limit, ge=1, le=settings.max_page_limit),
    db: AsyncSession = Depends(get_db),
):
    """Rank players by goals, assists and attack points (goals + assists)."""
    if sort_by not in SCORING_SORTS:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid sort_by. Available: {', '.join(SCORING_SORTS)}",
        )

    rankings = await get_scoring_rankings(db, season_id, sort_by, min_matches)
    total = len(rankings)
    return {
        "season_id": season_id,
        "sort_by": sort_by,
        "min_matches": min_matches,
        "items": paginate(rankings, page, limit),
        "total": total,
        "next_page": next_page(page, limit, total),
    }


@router.get("/goalkeeper-rankings", response_model=GoalkeeperRankingsResponse)
async def goalkeeper_rankings(
    season_id: int | None = None,
    sort_by: str = Query(default="goals_conceded_per_match"),
    min_matches: int = Query(default=3, ge=0),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_limit, ge=1, le=settings.max_page_limit),
    db: AsyncSession = Depends(get_db),
):
    """Rank goalkeepers by goals conceded, clean sheets and save percentage."""
    if sort_by not in GOALKEEPER_SORTS:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid sort_by. Available: {', '.join(GOALKEEPER_SORTS)}",
        )

    rankings = await get_goalkeeper_rankings(db, season_id, sort_by, min_matches)
    total = len(rankings)
    return {
        "season_id": season_id,
        "sort_by": sort_by,
        "min_matches": min_matches,
        "items": paginate(rankings, page, limit),
        "total": total,
        "next_page": next_page(page, limit, total),
    }


@router.get("/player-vs-team", response_model=PlayerVsTeamsResponse)
async def player_vs_team(
    player_id: int,
    season_id: int | None = None,
    db: AsyncSession = Depends(get_db),
):
    """A player's goals and assists against each opponent."""
    player = await db.get(Player, player_id)
    if not player:
        raise HTTPException(status_code=404, detail="Player not found")

    return {
        "player_id": player.id,
        "player_name": player.name,
        "profile_image_url": player.profile_image_url,
        "season_id": season_id,
        "team_records": await get_player_vs_teams(db, player_id, season_id),
    }
