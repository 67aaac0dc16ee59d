import pytest

from app.services.regeneration import (
    Outcome,
    StatsType,
    UnknownStatsTypeError,
    parse_stats_type,
    resolve_outcome,
)


def test_regular_time_result_decides():
    assert resolve_outcome(2, 1) == Outcome.HOME
    assert resolve_outcome(0, 3) == Outcome.AWAY


def test_penalties_ignored_when_score_is_not_level():
    assert resolve_outcome(2, 1, 2, 4) == Outcome.HOME


def test_level_score_without_shootout_is_draw():
    assert resolve_outcome(1, 1) == Outcome.DRAW
    assert resolve_outcome(1, 1, 4, None) == Outcome.DRAW


def test_shootout_settles_level_score():
    assert resolve_outcome(1, 1, 5, 4) == Outcome.HOME
    assert resolve_outcome(1, 1, 3, 4) == Outcome.AWAY


def test_level_shootout_goes_to_away_side():
    assert resolve_outcome(0, 0, 4, 4) == Outcome.AWAY


def test_missing_scores_count_as_zero():
    assert resolve_outcome(None, None) == Outcome.DRAW
    assert resolve_outcome(1, None) == Outcome.HOME


def test_parse_stats_type():
    assert parse_stats_type("all") == StatsType.ALL
    assert parse_stats_type("h2h") == StatsType.H2H
    assert parse_stats_type(StatsType.TEAM_STATS) == StatsType.TEAM_STATS


def test_parse_stats_type_rejects_unknown_value():
    with pytest.raises(UnknownStatsTypeError) as exc_info:
        parse_stats_type("fantasy")
    assert "player_stats" in str(exc_info.value)
    assert isinstance(exc_info.value, ValueError)
