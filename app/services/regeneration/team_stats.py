"""
Team season stats and season membership regeneration.
"""
import logging

from sqlalchemy import select, union

from app.models import Match, Standing, TeamSeason, TeamSeasonStats
from app.services.regeneration.base import BaseAggregator

logger = logging.getLogger(__name__)

PROJECTED_FIELDS = (
    "season_id",
    "team_id",
    "matches_played",
    "wins",
    "draws",
    "losses",
    "goals_for",
    "goals_against",
    "points",
)


class TeamSeasonStatsAggregator(BaseAggregator):
    """
    Copies the standings rows in scope into team_season_stats.

    Must run after the standings are rebuilt for the same scope.
    """

    model = TeamSeasonStats

    async def _rebuild(self, season_id: int | None) -> int:
        query = select(Standing).order_by(Standing.season_id, Standing.position)
        if season_id is not None:
            query = query.where(Standing.season_id == season_id)

        result = await self.db.execute(query)
        standings = result.scalars().all()

        created = 0
        for standing in standings:
            values = {field: getattr(standing, field) for field in PROJECTED_FIELDS}
            if await self._create_row(**values):
                created += 1

        logger.info(f"Team season stats rebuilt: {created}/{len(standings)} rows created")
        return created


class TeamSeasonAggregator(BaseAggregator):
    """
    Rebuilds team_seasons from the fixture list.

    Every team that appears as home or away side of any match in a season
    is a member of that season, whatever the match status.
    """

    model = TeamSeason

    async def _rebuild(self, season_id: int | None) -> int:
        conditions = [
            Match.season_id.is_not(None),
            Match.home_team_id.is_not(None),
            Match.away_team_id.is_not(None),
        ]
        if season_id is not None:
            conditions.append(Match.season_id == season_id)

        home = select(Match.season_id, Match.home_team_id.label("team_id")).where(*conditions)
        away = select(Match.season_id, Match.away_team_id.label("team_id")).where(*conditions)
        pairs = union(home, away).subquery()

        result = await self.db.execute(
            select(pairs.c.season_id, pairs.c.team_id).order_by(
                pairs.c.season_id, pairs.c.team_id
            )
        )
        memberships = result.all()

        created = 0
        for membership in memberships:
            if await self._create_row(
                season_id=membership.season_id,
                team_id=membership.team_id,
            ):
                created += 1

        logger.info(f"Team seasons rebuilt: {created}/{len(memberships)} rows created")
        return created
