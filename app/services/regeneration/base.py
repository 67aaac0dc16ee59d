"""
Base class and utilities for the stats regeneration services.

Every derived table (standings, season stats, memberships, head-to-head)
is rebuilt the same way: delete the rows in scope, replay the source rows,
insert the new rows one by one. The shared parts live here.
"""
import enum
import logging
from typing import Any

from sqlalchemy import delete
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base

logger = logging.getLogger(__name__)


# ==================== Match outcome ====================

POINTS_FOR_WIN = 3
POINTS_FOR_DRAW = 1


class Outcome(str, enum.Enum):
    HOME = "home"
    AWAY = "away"
    DRAW = "draw"


def resolve_outcome(
    home_score: int | None,
    away_score: int | None,
    penalty_home_score: int | None = None,
    penalty_away_score: int | None = None,
) -> Outcome:
    """
    Decide who won a match.

    A level score is settled by the shootout when both penalty scores are
    recorded; the away side takes it unless the home side scored more
    penalties. A level score without a shootout is a draw.
    """
    home = home_score or 0
    away = away_score or 0

    if home > away:
        return Outcome.HOME
    if home < away:
        return Outcome.AWAY

    if penalty_home_score is not None and penalty_away_score is not None:
        if penalty_home_score > penalty_away_score:
            return Outcome.HOME
        return Outcome.AWAY

    return Outcome.DRAW


# ==================== Stats type selector ====================

class StatsType(str, enum.Enum):
    ALL = "all"
    STANDINGS = "standings"
    PLAYER_STATS = "player_stats"
    TEAM_STATS = "team_stats"
    TEAM_SEASONS = "team_seasons"
    H2H = "h2h"


class UnknownStatsTypeError(ValueError):
    """Raised when a regeneration is requested for an unknown stats type."""


def parse_stats_type(value: Any) -> StatsType:
    """Parse a stats type selector from a string or enum member."""
    if isinstance(value, StatsType):
        return value
    try:
        return StatsType(value)
    except ValueError:
        allowed = ", ".join(t.value for t in StatsType)
        raise UnknownStatsTypeError(f"Unknown stats type {value!r}. Available: {allowed}")


# ==================== Base Aggregator ====================

class BaseAggregator:
    """
    Base class for all derived-table aggregators.

    Subclasses set ``model`` and implement ``_rebuild``, which reads the
    source rows for the scope and inserts the new derived rows through
    ``_create_row``.

    One ``run`` is one database transaction: the delete and every insert
    commit together, or the whole run is rolled back when an unexpected
    error escapes. Rows rejected by the database on insert are skipped
    without aborting the run.
    """

    model: type[Base]

    def __init__(self, db: AsyncSession):
        """
        Initialize the aggregator.

        Args:
            db: SQLAlchemy async session
        """
        self.db = db

    async def run(self, season_id: int | None = None) -> int:
        """
        Rebuild the derived rows for one season, or for all seasons.

        Args:
            season_id: Season to rebuild, None for every season

        Returns:
            Number of rows created
        """
        try:
            await self._delete_existing(season_id)
            created = await self._rebuild(season_id)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        return created

    async def _rebuild(self, season_id: int | None) -> int:
        raise NotImplementedError

    async def _delete_existing(self, season_id: int | None) -> None:
        stmt = delete(self.model)
        if season_id is not None:
            stmt = stmt.where(self.model.season_id == season_id)
        result = await self.db.execute(stmt)
        logger.info(
            f"Deleted {result.rowcount} {self.model.__tablename__} rows "
            f"(season={season_id if season_id is not None else 'all'})"
        )

    async def _create_row(self, **values: Any) -> bool:
        """
        Insert one derived row inside a savepoint.

        Returns:
            True if the row was stored, False if the database rejected it
        """
        try:
            async with self.db.begin_nested():
                self.db.add(self.model(**values))
                await self.db.flush()
        except (IntegrityError, DataError) as exc:
            logger.error(
                f"Failed to create {self.model.__tablename__} row {values}: {exc.orig}"
            )
            return False
        return True
