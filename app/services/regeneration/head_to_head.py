"""
Head-to-head regeneration.

The pair table is an all-time record, so it is always rebuilt in full from
every completed match regardless of the season being regenerated.
"""
import logging
from dataclasses import dataclass
from typing import Any, Iterable

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import H2HPairStats, Match, MatchStatus
from app.services.regeneration.base import BaseAggregator, Outcome, resolve_outcome

logger = logging.getLogger(__name__)

H2H_SEASON_NOTICE = (
    "Head-to-head stats are all-time: the season filter was ignored and "
    "every pair was rebuilt from all completed matches."
)


@dataclass
class H2HSummary:
    total_matches_processed: int = 0
    skipped_matches: int = 0
    h2h_pairs_created: int = 0
    expected_pairs: int = 0


def compute_h2h(matches: Iterable[Any]) -> tuple[list[dict[str, int]], int, int]:
    """
    Fold matches into one record per unordered team pair.

    Returns:
        Tuple of (pair rows, matches processed, matches skipped). Matches
        without both teams, or with a team playing itself, are skipped.
    """
    pairs: dict[tuple[int, int], dict[str, int]] = {}
    processed = 0
    skipped = 0

    for match in matches:
        home_id = match.home_team_id
        away_id = match.away_team_id
        if not home_id or not away_id or home_id == away_id:
            skipped += 1
            continue
        processed += 1

        small_id, large_id = sorted((home_id, away_id))
        home_is_small = home_id == small_id

        row = pairs.get((small_id, large_id))
        if row is None:
            row = {
                "team_small_id": small_id,
                "team_large_id": large_id,
                "total_matches": 0,
                "small_wins": 0,
                "large_wins": 0,
                "draws": 0,
                "small_goals": 0,
                "large_goals": 0,
            }
            pairs[(small_id, large_id)] = row

        home_score = match.home_score or 0
        away_score = match.away_score or 0
        row["total_matches"] += 1
        if home_is_small:
            row["small_goals"] += home_score
            row["large_goals"] += away_score
        else:
            row["small_goals"] += away_score
            row["large_goals"] += home_score

        outcome = resolve_outcome(
            match.home_score,
            match.away_score,
            match.penalty_home_score,
            match.penalty_away_score,
        )
        if outcome == Outcome.DRAW:
            row["draws"] += 1
        elif (outcome == Outcome.HOME) == home_is_small:
            row["small_wins"] += 1
        else:
            row["large_wins"] += 1

    return list(pairs.values()), processed, skipped


class H2HAggregator(BaseAggregator):
    """Rebuilds h2h_pair_stats from all completed matches."""

    model = H2HPairStats

    def __init__(self, db: AsyncSession):
        super().__init__(db)
        self.summary = H2HSummary()

    async def _delete_existing(self, season_id: int | None) -> None:
        if season_id is not None:
            logger.warning(
                f"H2H regeneration ignores season filter {season_id}; "
                f"rebuilding all pairs from all seasons"
            )
        result = await self.db.execute(delete(H2HPairStats))
        logger.info(f"Deleted {result.rowcount} h2h_pair_stats rows")

    async def _rebuild(self, season_id: int | None) -> int:
        result = await self.db.execute(
            select(Match)
            .where(
                Match.status == MatchStatus.completed,
                Match.home_score.is_not(None),
                Match.away_score.is_not(None),
            )
            .order_by(Match.id)
        )
        matches = result.scalars().all()

        rows, processed, skipped = compute_h2h(matches)
        if skipped:
            logger.warning(f"Skipped {skipped} matches without two distinct teams")

        created = 0
        for row in rows:
            if await self._create_row(**row):
                created += 1

        self.summary = H2HSummary(
            total_matches_processed=processed,
            skipped_matches=skipped,
            h2h_pairs_created=created,
            expected_pairs=len(rows),
        )
        logger.info(
            f"H2H rebuilt from {processed} matches: {created}/{len(rows)} pairs created"
        )
        return created
