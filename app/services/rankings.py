"""
Live rankings computed straight from matches and per-match player rows.

Unlike the regenerated tables these are never stored; each request
aggregates the matches in scope.
"""
from collections import defaultdict
from typing import Any, Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models import Match, PlayerMatchStats
from app.services.players import GOALKEEPER_POSITION
from app.services.regeneration.base import POINTS_FOR_DRAW, POINTS_FOR_WIN
from app.utils.numbers import percentage, safe_ratio


def _team_brief(team) -> dict:
    return {"id": team.id, "name": team.name, "logo": team.logo}


# ==================== Team rankings ====================

TEAM_SORTS = {
    "win_rate": lambda r: (-r["win_rate"], -r["points"], -r["goal_difference"]),
    "goal_difference": lambda r: -r["goal_difference"],
    "goals_for": lambda r: -r["goals_for"],
    "goals_against": lambda r: r["goals_against"],
    "goals_for_per_match": lambda r: -r["goals_for_per_match"],
    "goals_against_per_match": lambda r: r["goals_against_per_match"],
    "matches_played": lambda r: -r["matches_played"],
}


def compute_team_rankings(matches: Iterable[Any], sort_by: str = "win_rate") -> list[dict]:
    """
    Rank teams on regular-time results of matches with a score.

    Shootouts are not taken into account here: a level score is a draw.
    """
    if sort_by not in TEAM_SORTS:
        raise ValueError(f"Unknown sort key {sort_by!r}")

    table: dict[int, dict] = {}

    def entry(team) -> dict:
        if team.id not in table:
            table[team.id] = {
                "team": _team_brief(team),
                "matches_played": 0,
                "wins": 0,
                "draws": 0,
                "losses": 0,
                "goals_for": 0,
                "goals_against": 0,
                "seasons": [],
            }
        return table[team.id]

    for match in matches:
        if match.home_team is None or match.away_team is None:
            continue
        home_score = match.home_score or 0
        away_score = match.away_score or 0
        season_name = match.season.name if match.season else None

        for team, scored, conceded in (
            (match.home_team, home_score, away_score),
            (match.away_team, away_score, home_score),
        ):
            row = entry(team)
            row["matches_played"] += 1
            row["goals_for"] += scored
            row["goals_against"] += conceded
            if scored > conceded:
                row["wins"] += 1
            elif scored < conceded:
                row["losses"] += 1
            else:
                row["draws"] += 1
            if season_name and season_name not in row["seasons"]:
                row["seasons"].append(season_name)

    rows = []
    for row in table.values():
        played = row["matches_played"]
        row["goal_difference"] = row["goals_for"] - row["goals_against"]
        row["points"] = row["wins"] * POINTS_FOR_WIN + row["draws"] * POINTS_FOR_DRAW
        row["win_rate"] = percentage(row["wins"], played)
        row["goals_for_per_match"] = safe_ratio(row["goals_for"], played, 1)
        row["goals_against_per_match"] = safe_ratio(row["goals_against"], played, 1)
        rows.append(row)

    rows.sort(key=TEAM_SORTS[sort_by])
    for rank, row in enumerate(rows, 1):
        row["rank"] = rank
    return rows


async def get_team_rankings(
    db: AsyncSession, season_id: int | None = None, sort_by: str = "win_rate"
) -> list[dict]:
    query = (
        select(Match)
        .where(Match.home_score.is_not(None), Match.away_score.is_not(None))
        .options(
            selectinload(Match.home_team),
            selectinload(Match.away_team),
            selectinload(Match.season),
        )
        .order_by(Match.id)
    )
    if season_id is not None:
        query = query.where(Match.season_id == season_id)

    result = await db.execute(query)
    return compute_team_rankings(result.scalars().all(), sort_by)


# ==================== Scoring rankings ====================

SCORING_SORTS = {
    "attack_points": lambda r: -r["attack_points"],
    "goals": lambda r: -r["goals"],
    "assists": lambda r: -r["assists"],
    "matches_played": lambda r: -r["matches_played"],
    "goals_per_match": lambda r: -r["goals_per_match"],
    "assists_per_match": lambda r: -r["assists_per_match"],
    "attack_points_per_match": lambda r: -r["attack_points_per_match"],
}


def compute_scoring_rankings(
    stats: Iterable[PlayerMatchStats],
    sort_by: str = "attack_points",
    min_matches: int = 0,
) -> list[dict]:
    """
    Rank players by goals and assists over per-match rows.

    A match counts towards matches_played when the player had minutes.
    Players below ``min_matches`` are left out.
    """
    if sort_by not in SCORING_SORTS:
        raise ValueError(f"Unknown sort key {sort_by!r}")

    table: dict[int, dict] = {}
    for stat in stats:
        if stat.player is None:
            continue
        row = table.get(stat.player_id)
        if row is None:
            row = table[stat.player_id] = {
                "player_id": stat.player_id,
                "player_name": stat.player.name,
                "profile_image_url": stat.player.profile_image_url,
                "teams": [],
                "seasons": [],
                "matches_played": 0,
                "goals": 0,
                "assists": 0,
            }
        if (stat.minutes_played or 0) > 0:
            row["matches_played"] += 1
        row["goals"] += stat.goals or 0
        row["assists"] += stat.assists or 0

        if stat.team is not None and all(t["id"] != stat.team.id for t in row["teams"]):
            row["teams"].append(_team_brief(stat.team))
        season = stat.match.season if stat.match else None
        if season is not None and season.name not in row["seasons"]:
            row["seasons"].append(season.name)

    rows = []
    for row in table.values():
        if row["matches_played"] < min_matches:
            continue
        played = row["matches_played"]
        row["attack_points"] = row["goals"] + row["assists"]
        row["goals_per_match"] = safe_ratio(row["goals"], played)
        row["assists_per_match"] = safe_ratio(row["assists"], played)
        row["attack_points_per_match"] = safe_ratio(row["attack_points"], played)
        rows.append(row)

    rows.sort(key=SCORING_SORTS[sort_by])
    for rank, row in enumerate(rows, 1):
        row["rank"] = rank
    return rows


async def get_scoring_rankings(
    db: AsyncSession,
    season_id: int | None = None,
    sort_by: str = "attack_points",
    min_matches: int = 0,
) -> list[dict]:
    query = (
        select(PlayerMatchStats)
        .join(Match, PlayerMatchStats.match_id == Match.id)
        .where(PlayerMatchStats.player_id.is_not(None))
        .options(
            selectinload(PlayerMatchStats.player),
            selectinload(PlayerMatchStats.team),
            selectinload(PlayerMatchStats.match).selectinload(Match.season),
        )
        .order_by(Match.id, PlayerMatchStats.id)
    )
    if season_id is not None:
        query = query.where(Match.season_id == season_id)

    result = await db.execute(query)
    return compute_scoring_rankings(result.scalars().all(), sort_by, min_matches)


# ==================== Goalkeeper rankings ====================

GOALKEEPER_SORTS = {
    "goals_conceded_per_match": lambda r: r["goals_conceded_per_match"],
    "clean_sheets": lambda r: -r["clean_sheets"],
    "clean_sheet_percentage": lambda r: -r["clean_sheet_percentage"],
    "save_percentage": lambda r: -r["save_percentage"],
    "matches_played": lambda r: -r["matches_played"],
}


def is_goalkeeper_appearance(stat: Any) -> bool:
    """Rows listed as goalkeeper, or any row that records goals conceded."""
    return stat.position == GOALKEEPER_POSITION or (stat.goals_conceded or 0) > 0


def compute_goalkeeper_rankings(
    stats: Iterable[PlayerMatchStats],
    sort_by: str = "goals_conceded_per_match",
    min_matches: int = 0,
) -> list[dict]:
    """
    Rank goalkeepers over per-match rows.

    A clean sheet needs a goalkeeper row whose whole team conceded nothing in
    that match, summed over every row of the team. Appearances need minutes
    on the pitch, as for outfield players.
    """
    if sort_by not in GOALKEEPER_SORTS:
        raise ValueError(f"Unknown sort key {sort_by!r}")

    stats = list(stats)
    team_conceded: dict[tuple[int, int], int] = defaultdict(int)
    for stat in stats:
        if stat.match_id and stat.team_id:
            team_conceded[(stat.match_id, stat.team_id)] += stat.goals_conceded or 0

    table: dict[int, dict] = {}
    for stat in stats:
        if stat.player is None or not is_goalkeeper_appearance(stat):
            continue
        if (stat.minutes_played or 0) <= 0:
            continue
        row = table.get(stat.player_id)
        if row is None:
            row = table[stat.player_id] = {
                "player_id": stat.player_id,
                "player_name": stat.player.name,
                "profile_image_url": stat.player.profile_image_url,
                "teams": [],
                "seasons": [],
                "matches_played": 0,
                "goals_conceded": 0,
                "saves": 0,
                "clean_sheets": 0,
            }
        row["matches_played"] += 1
        row["goals_conceded"] += stat.goals_conceded or 0
        row["saves"] += stat.saves or 0
        if (
            stat.position == GOALKEEPER_POSITION
            and stat.team_id
            and team_conceded[(stat.match_id, stat.team_id)] == 0
        ):
            row["clean_sheets"] += 1

        if stat.team is not None and all(t["id"] != stat.team.id for t in row["teams"]):
            row["teams"].append(_team_brief(stat.team))
        season = stat.match.season if stat.match else None
        if season is not None and season.name not in row["seasons"]:
            row["seasons"].append(season.name)

    rows = []
    for row in table.values():
        if row["matches_played"] < min_matches:
            continue
        played = row["matches_played"]
        row["goals_conceded_per_match"] = safe_ratio(row["goals_conceded"], played)
        row["clean_sheet_percentage"] = percentage(row["clean_sheets"], played)
        row["save_percentage"] = percentage(row["saves"], row["saves"] + row["goals_conceded"])
        rows.append(row)

    rows.sort(key=GOALKEEPER_SORTS[sort_by])
    for rank, row in enumerate(rows, 1):
        row["rank"] = rank
    return rows


async def get_goalkeeper_rankings(
    db: AsyncSession,
    season_id: int | None = None,
    sort_by: str = "goals_conceded_per_match",
    min_matches: int = 0,
) -> list[dict]:
    # Every row is needed, not only goalkeepers, to total what each team conceded
    query = (
        select(PlayerMatchStats)
        .join(Match, PlayerMatchStats.match_id == Match.id)
        .options(
            selectinload(PlayerMatchStats.player),
            selectinload(PlayerMatchStats.team),
            selectinload(PlayerMatchStats.match).selectinload(Match.season),
        )
        .order_by(Match.id, PlayerMatchStats.id)
    )
    if season_id is not None:
        query = query.where(Match.season_id == season_id)

    result = await db.execute(query)
    return compute_goalkeeper_rankings(result.scalars().all(), sort_by, min_matches)


# ==================== Player vs opponents ====================

def compute_player_vs_teams(stats: Iterable[Any]) -> list[dict]:
    """
    Split one player's per-match rows by opponent.

    Only rows with minutes count. Rows whose team is neither side of the
    match are ignored. Opponents come back by attack points, highest first.
    """
    table: dict[int, dict] = {}
    for stat in stats:
        match = stat.match
        if match is None or (stat.minutes_played or 0) <= 0:
            continue
        if stat.team_id is not None and stat.team_id == match.home_team_id:
            opponent = match.away_team
        elif stat.team_id is not None and stat.team_id == match.away_team_id:
            opponent = match.home_team
        else:
            continue
        if opponent is None:
            continue

        row = table.get(opponent.id)
        if row is None:
            row = table[opponent.id] = {
                "opponent": _team_brief(opponent),
                "matches_played": 0,
                "goals": 0,
                "assists": 0,
            }
        row["matches_played"] += 1
        row["goals"] += stat.goals or 0
        row["assists"] += stat.assists or 0

    rows = []
    for row in table.values():
        played = row["matches_played"]
        row["attack_points"] = row["goals"] + row["assists"]
        row["goals_per_match"] = safe_ratio(row["goals"], played)
        row["assists_per_match"] = safe_ratio(row["assists"], played)
        row["attack_points_per_match"] = safe_ratio(row["attack_points"], played)
        rows.append(row)

    rows.sort(key=lambda r: -r["attack_points"])
    return rows


async def get_player_vs_teams(
    db: AsyncSession, player_id: int, season_id: int | None = None
) -> list[dict]:
    query = (
        select(PlayerMatchStats)
        .join(Match, PlayerMatchStats.match_id == Match.id)
        .where(PlayerMatchStats.player_id == player_id)
        .options(
            selectinload(PlayerMatchStats.match).selectinload(Match.home_team),
            selectinload(PlayerMatchStats.match).selectinload(Match.away_team),
        )
        .order_by(Match.id)
    )
    if season_id is not None:
        query = query.where(Match.season_id == season_id)

    result = await db.execute(query)
    return compute_player_vs_teams(result.scalars().all())
