import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.schemas.stats import RegenerationResponse, RestoreH2HResponse
from app.services.regeneration import (
    StatsRegenerationOrchestrator,
    UnknownStatsTypeError,
    collect_player_stats_debug,
    parse_stats_type,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stats", tags=["admin-stats"])


@router.post("/regenerate", response_model=RegenerationResponse)
async def regenerate_stats(
    season_id: int | None = Query(default=None),
    type: str = Query(
        default="all",
        description="all, standings, player_stats, team_stats, team_seasons or h2h",
    ),
    db: AsyncSession = Depends(get_db),
):
    """Delete and rebuild derived stats tables from the match data."""
    try:
        stats_type = parse_stats_type(type)
    except UnknownStatsTypeError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    try:
        report = await StatsRegenerationOrchestrator(db).regenerate(season_id, stats_type)
    except Exception as exc:
        logger.exception(f"Stats regeneration failed (season={season_id}, type={type})")
        raise HTTPException(
            status_code=500,
            detail={"error": "Failed to regenerate stats", "details": str(exc)},
        )

    return RegenerationResponse(
        message="Stats regenerated successfully",
        results=report.results,
        season_id=season_id,
        type=stats_type.value,
        notices=report.notices,
    )


@router.post("/restore-h2h", response_model=RestoreH2HResponse)
async def restore_h2h(db: AsyncSession = Depends(get_db)):
    """Rebuild only the all-time head-to-head table."""
    try:
        summary = await StatsRegenerationOrchestrator(db).restore_h2h()
    except Exception as exc:
        logger.exception("H2H restore failed")
        raise HTTPException(
            status_code=500,
            detail={"error": "Failed to restore H2H stats", "details": str(exc)},
        )

    return RestoreH2HResponse(
        message="H2H stats restored",
        total_matches_processed=summary.total_matches_processed,
        skipped_matches=summary.skipped_matches,
        h2h_pairs_created=summary.h2h_pairs_created,
        expected_pairs=summary.expected_pairs,
    )


@router.get("/player-stats-debug")
async def player_stats_debug(
    season_id: int | None = Query(default=None),
    player_id: int | None = Query(default=None),
    db: AsyncSession = Depends(get_db),
):
    """Stored player season rows next to a fresh rollup of recent match rows."""
    return await collect_player_stats_debug(db, season_id=season_id, player_id=player_id)
