import pytest
from typing import AsyncGenerator
from datetime import date

from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.database import Base
from app.api.deps import get_db  # Import from where routes actually use it
from app.models import (
    Season, Team, Player, PlayerTeamHistory, PlayerPosition,
    Coach, TeamCoachHistory, MatchCoach, CoachRole,
    Match, MatchStatus, PlayerMatchStats,
)


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# Note: Using pytest-asyncio's built-in event_loop fixture (asyncio_mode = auto)


@pytest.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # pysqlite's own transaction handling breaks SAVEPOINT; let SQLAlchemy emit BEGIN
    @event.listens_for(engine.sync_engine, "connect")
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture(scope="function")
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture(scope="function")
async def client(test_session) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with overridden database dependency."""

    async def override_get_db():
        yield test_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


# --- Helpers ---

def _make_match(
    match_id: int,
    season_id: int | None,
    home_team_id: int | None,
    away_team_id: int | None,
    home_score: int | None,
    away_score: int | None,
    penalty_home_score: int | None = None,
    penalty_away_score: int | None = None,
    status: MatchStatus = MatchStatus.completed,
    match_date: date | None = None,
) -> Match:
    return Match(
        id=match_id,
        season_id=season_id,
        home_team_id=home_team_id,
        away_team_id=away_team_id,
        home_score=home_score,
        away_score=away_score,
        penalty_home_score=penalty_home_score,
        penalty_away_score=penalty_away_score,
        status=status,
        match_date=match_date or date(2025, 4, match_id % 28 + 1),
    )


@pytest.fixture
def make_match():
    """Factory for Match rows; completed unless told otherwise."""
    return _make_match


# --- Data Fixtures ---

@pytest.fixture
async def sample_season(test_session) -> Season:
    """Create a finished season."""
    season = Season(
        id=1,
        name="2025 League",
        year=2025,
        category="league",
        start_date=date(2025, 3, 1),
        end_date=date(2025, 11, 30),
    )
    test_session.add(season)
    await test_session.commit()
    await test_session.refresh(season)
    return season


@pytest.fixture
async def second_season(test_session) -> Season:
    """Create a season that has not ended yet."""
    season = Season(id=2, name="2026 League", year=2026, category="league")
    test_session.add(season)
    await test_session.commit()
    await test_session.refresh(season)
    return season


@pytest.fixture
async def sample_teams(test_session) -> list[Team]:
    """Create sample teams."""
    teams = [
        Team(id=1, name="Alpha FC", logo="alpha.png"),
        Team(id=2, name="Bravo United"),
        Team(id=3, name="Charlie City"),
    ]
    test_session.add_all(teams)
    await test_session.commit()
    return teams


@pytest.fixture
async def scenario_matches(test_session, sample_season, sample_teams) -> list[Match]:
    """
    Alpha beats Bravo 2-1, Bravo beats Alpha on penalties after 1-1,
    then they draw 0-0. Both end on 4 points; Alpha is ahead on goal difference.
    """
    matches = [
        _make_match(1, sample_season.id, 1, 2, 2, 1),
        _make_match(2, sample_season.id, 1, 2, 1, 1, penalty_home_score=3, penalty_away_score=4),
        _make_match(3, sample_season.id, 2, 1, 0, 0),
    ]
    test_session.add_all(matches)
    await test_session.commit()
    return matches


@pytest.fixture
async def sample_players(test_session, sample_teams) -> list[Player]:
    """Create players with team history and positions."""
    players = [
        Player(id=1, name="Aaron Striker", jersey_number=9),
        Player(id=2, name="Ben Keeper", jersey_number=1),
        Player(id=3, name="Carl Winger", jersey_number=7),
    ]
    test_session.add_all(players)
    test_session.add_all([
        PlayerTeamHistory(player_id=1, team_id=2, season_id=1,
                          start_date=date(2024, 1, 1), end_date=date(2024, 12, 31)),
        PlayerTeamHistory(player_id=1, team_id=1, season_id=1, start_date=date(2025, 1, 1)),
        PlayerTeamHistory(player_id=2, team_id=2, season_id=1, start_date=date(2025, 1, 1)),
        PlayerTeamHistory(player_id=3, team_id=1, season_id=1, start_date=date(2025, 1, 1)),
        PlayerPosition(player_id=1, season_id=1, position="FW", start_date=date(2025, 1, 1)),
        PlayerPosition(player_id=2, season_id=1, position="GK", start_date=date(2025, 1, 1)),
        PlayerPosition(player_id=3, season_id=1, position="MF", start_date=date(2025, 1, 1)),
    ])
    await test_session.commit()
    return players


@pytest.fixture
async def player_match_stats(test_session, scenario_matches, sample_players) -> list[PlayerMatchStats]:
    """
    Per-match rows for the scenario matches.

    Aaron plays all three matches for Alpha (3 goals, 1 assist), Carl comes
    on once and sits on the bench once, Ben keeps goal for Bravo.
    """
    rows = [
        PlayerMatchStats(match_id=1, player_id=1, team_id=1, position="FW",
                         minutes_played=90, goals=2, assists=0, yellow_cards=1),
        PlayerMatchStats(match_id=2, player_id=1, team_id=1, position="FW",
                         minutes_played=90, goals=1, assists=1),
        PlayerMatchStats(match_id=3, player_id=1, team_id=1, position="FW",
                         minutes_played=60, goals=0, assists=0),
        PlayerMatchStats(match_id=1, player_id=3, team_id=1, position="MF",
                         minutes_played=0, goals=0, assists=0),
        PlayerMatchStats(match_id=2, player_id=3, team_id=1, position="MF",
                         minutes_played=30, goals=0, assists=1, red_cards=1),
        PlayerMatchStats(match_id=1, player_id=2, team_id=2, position="GK",
                         minutes_played=90, saves=4, goals_conceded=2),
        PlayerMatchStats(match_id=2, player_id=2, team_id=2, position="GK",
                         minutes_played=90, saves=3, goals_conceded=1),
        PlayerMatchStats(match_id=3, player_id=2, team_id=2, position="GK",
                         minutes_played=90, saves=5, goals_conceded=0),
    ]
    test_session.add_all(rows)
    await test_session.commit()
    return rows


@pytest.fixture
async def sample_coaches(test_session, scenario_matches) -> list[Coach]:
    """
    Alpha's head coach is current; Bravo's head coach has left the club.
    """
    coaches = [
        Coach(id=1, name="Anna Manager", nationality="NO"),
        Coach(id=2, name="Boris Boss", nationality="SE"),
        Coach(id=3, name="Cleo Assistant"),
    ]
    test_session.add_all(coaches)
    test_session.add_all([
        TeamCoachHistory(coach_id=1, team_id=1, season_id=1, role=CoachRole.head,
                         start_date=date(2025, 1, 1), is_current=True),
        TeamCoachHistory(coach_id=2, team_id=2, season_id=1, role=CoachRole.head,
                         start_date=date(2025, 1, 1), end_date=date(2025, 11, 30),
                         is_current=False),
        TeamCoachHistory(coach_id=3, team_id=1, season_id=1, role=CoachRole.assistant,
                         start_date=date(2025, 1, 1), is_current=True),
    ])
    for match in scenario_matches:
        test_session.add_all([
            MatchCoach(match_id=match.id, coach_id=1, team_id=1, role=CoachRole.head),
            MatchCoach(match_id=match.id, coach_id=2, team_id=2, role=CoachRole.head),
            MatchCoach(match_id=match.id, coach_id=3, team_id=1, role=CoachRole.assistant),
        ])
    await test_session.commit()
    return coaches


@pytest.fixture
async def regenerated_stats(test_session, player_match_stats):
    """Scenario data with every derived table rebuilt."""
    from app.services.regeneration import StatsRegenerationOrchestrator

    return await StatsRegenerationOrchestrator(test_session).regenerate()
