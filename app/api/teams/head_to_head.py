from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.models import H2HPairStats, Team
from app.schemas.head_to_head import H2HOverallStats, HeadToHeadResponse

router = APIRouter(prefix="/teams", tags=["teams"])


def orient_pair(pair: H2HPairStats | None, team1_id: int) -> H2HOverallStats:
    """Turn a stored (small, large) pair row into team1-vs-team2 numbers."""
    if pair is None:
        return H2HOverallStats()

    if pair.team_small_id == team1_id:
        return H2HOverallStats(
            total_matches=pair.total_matches,
            team1_wins=pair.small_wins,
            draws=pair.draws,
            team2_wins=pair.large_wins,
            team1_goals=pair.small_goals,
            team2_goals=pair.large_goals,
        )
    return H2HOverallStats(
        total_matches=pair.total_matches,
        team1_wins=pair.large_wins,
        draws=pair.draws,
        team2_wins=pair.small_wins,
        team1_goals=pair.large_goals,
        team2_goals=pair.small_goals,
    )


@router.get("/{team1_id}/vs/{team2_id}/head-to-head", response_model=HeadToHeadResponse)
async def get_head_to_head(
    team1_id: int,
    team2_id: int,
    db: AsyncSession = Depends(get_db),
):
    """All-time head-to-head record between two teams, from team1's side."""
    if team1_id == team2_id:
        raise HTTPException(status_code=400, detail="Teams must be different")

    team1 = await db.get(Team, team1_id)
    team2 = await db.get(Team, team2_id)
    if not team1 or not team2:
        raise HTTPException(status_code=404, detail="Team not found")

    small_id, large_id = sorted((team1_id, team2_id))
    result = await db.execute(
        select(H2HPairStats).where(
            H2HPairStats.team_small_id == small_id,
            H2HPairStats.team_large_id == large_id,
        )
    )
    pair = result.scalar_one_or_none()

    return HeadToHeadResponse(
        team1={"id": team1.id, "name": team1.name, "logo": team1.logo},
        team2={"id": team2.id, "name": team2.name, "logo": team2.logo},
        overall=orient_pair(pair, team1_id),
    )
