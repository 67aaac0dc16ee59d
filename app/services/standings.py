"""Standings reads: stored season tables and a team's season-by-season history."""

from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models import Season, Standing, TeamSeasonStats


async def read_standings(db: AsyncSession, season_id: int) -> list[dict]:
    """Read the regenerated standings of a season in table order."""
    result = await db.execute(
        select(Standing)
        .where(Standing.season_id == season_id)
        .options(selectinload(Standing.team))
        .order_by(Standing.position)
    )
    return [
        {
            "position": s.position,
            "team": {
                "id": s.team_id,
                "name": s.team.name if s.team else "",
                "logo": s.team.logo if s.team else None,
            },
            "matches_played": s.matches_played,
            "wins": s.wins,
            "draws": s.draws,
            "losses": s.losses,
            "goals_for": s.goals_for,
            "goals_against": s.goals_against,
            "goal_difference": s.goal_difference,
            "points": s.points,
        }
        for s in result.scalars().all()
    ]


async def read_team_season_standings(
    db: AsyncSession, team_id: int, today: date | None = None
) -> list[dict]:
    """
    One entry per season for a team.

    The standings row gives position and points. Seasons without one fall
    back to the team's season stats (no position), and otherwise the team
    is reported as not having taken part.
    """
    today = today or date.today()

    seasons = (await db.execute(select(Season).order_by(Season.id))).scalars().all()

    standings_result = await db.execute(select(Standing).where(Standing.team_id == team_id))
    standings = {s.season_id: s for s in standings_result.scalars().all()}

    stats_result = await db.execute(
        select(TeamSeasonStats).where(TeamSeasonStats.team_id == team_id)
    )
    stats = {s.season_id: s for s in stats_result.scalars().all()}

    entries = []
    for season in seasons:
        entry = {
            "season_id": season.id,
            "season_name": season.name,
            "year": season.year,
            "category": season.category,
            "participated": False,
            "position": None,
            "matches_played": 0,
            "points": 0,
            "is_season_ended": season.end_date is not None and season.end_date <= today,
        }
        standing = standings.get(season.id)
        fallback = stats.get(season.id)
        if standing is not None:
            entry.update(
                participated=True,
                position=standing.position,
                matches_played=standing.matches_played,
                points=standing.points,
            )
        elif fallback is not None:
            entry.update(
                participated=True,
                matches_played=fallback.matches_played,
                points=fallback.points,
            )
        entries.append(entry)
    return entries
