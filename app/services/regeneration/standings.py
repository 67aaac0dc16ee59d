"""
Standings regeneration.

Replays completed matches into per-season league tables.
"""
import logging
from collections import defaultdict
from typing import Any, Iterable

from sqlalchemy import select

from app.models import Match, MatchStatus, Standing
from app.services.regeneration.base import (
    BaseAggregator,
    Outcome,
    POINTS_FOR_DRAW,
    POINTS_FOR_WIN,
    resolve_outcome,
)

logger = logging.getLogger(__name__)


def _empty_row(season_id: int, team_id: int) -> dict[str, int]:
    return {
        "season_id": season_id,
        "team_id": team_id,
        "matches_played": 0,
        "wins": 0,
        "draws": 0,
        "losses": 0,
        "goals_for": 0,
        "goals_against": 0,
        "goal_difference": 0,
        "points": 0,
    }


def _record(row: dict[str, int], scored: int, conceded: int, result: str) -> None:
    row["matches_played"] += 1
    row["goals_for"] += scored
    row["goals_against"] += conceded
    row["goal_difference"] = row["goals_for"] - row["goals_against"]
    if result == "W":
        row["wins"] += 1
        row["points"] += POINTS_FOR_WIN
    elif result == "L":
        row["losses"] += 1
    else:
        row["draws"] += 1
        row["points"] += POINTS_FOR_DRAW


def standings_sort_key(row: dict[str, int]) -> tuple[int, int, int]:
    return (-row["points"], -row["goal_difference"], -row["goals_for"])


def compute_standings(matches: Iterable[Any]) -> list[dict[str, int]]:
    """
    Build league table rows from finished matches.

    Matches without a season or without both teams are skipped. Rows come
    back grouped by season with ``position`` assigned 1..N inside each
    season; teams level on points, goal difference and goals scored keep
    the order in which they first appeared.
    """
    table: dict[tuple[int, int], dict[str, int]] = {}

    for match in matches:
        if not match.season_id or not match.home_team_id or not match.away_team_id:
            logger.warning(
                f"Skipping match {match.id} - missing required data: "
                f"season_id={match.season_id}, home_team_id={match.home_team_id}, "
                f"away_team_id={match.away_team_id}"
            )
            continue

        home_key = (match.season_id, match.home_team_id)
        away_key = (match.season_id, match.away_team_id)
        if home_key not in table:
            table[home_key] = _empty_row(*home_key)
        if away_key not in table:
            table[away_key] = _empty_row(*away_key)

        home_score = match.home_score or 0
        away_score = match.away_score or 0
        outcome = resolve_outcome(
            match.home_score,
            match.away_score,
            match.penalty_home_score,
            match.penalty_away_score,
        )

        if outcome == Outcome.HOME:
            home_result, away_result = "W", "L"
        elif outcome == Outcome.AWAY:
            home_result, away_result = "L", "W"
        else:
            home_result = away_result = "D"

        _record(table[home_key], home_score, away_score, home_result)
        _record(table[away_key], away_score, home_score, away_result)

    by_season: dict[int, list[dict[str, int]]] = defaultdict(list)
    for row in table.values():
        by_season[row["season_id"]].append(row)

    ranked = []
    for season_id in sorted(by_season):
        rows = sorted(by_season[season_id], key=standings_sort_key)
        for position, row in enumerate(rows, 1):
            row["position"] = position
            ranked.append(row)

    return ranked


class StandingsAggregator(BaseAggregator):
    """Rebuilds the standings table from completed matches."""

    model = Standing

    async def _rebuild(self, season_id: int | None) -> int:
        query = (
            select(Match)
            .where(
                Match.status == MatchStatus.completed,
                Match.home_score.is_not(None),
                Match.away_score.is_not(None),
            )
            .order_by(Match.id)
        )
        if season_id is not None:
            query = query.where(Match.season_id == season_id)

        result = await self.db.execute(query)
        matches = result.scalars().all()

        rows = compute_standings(matches)

        created = 0
        for row in rows:
            if await self._create_row(**row):
                created += 1

        logger.info(
            f"Standings rebuilt from {len(matches)} matches: "
            f"{created}/{len(rows)} rows created"
        )
        return created
