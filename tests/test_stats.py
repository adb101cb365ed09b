"""Tests for the StatsTracker and its change notifications."""

import datetime

import numpy as np
import pytest

from c4engine.stats import GameResult, StatsTracker, TIE_WINNER


def test_starts_empty(stats):
    assert stats.player1_wins == 0
    assert stats.player2_wins == 0
    assert stats.history == ()
    assert stats.summary()['last_winner'] is None


def test_record_win_updates_counters_and_history(stats):
    before = datetime.datetime.now()
    stats.record_win(1)
    stats.record_win(2)
    stats.record_win(1)

    assert stats.player1_wins == 2
    assert stats.player2_wins == 1
    assert [r.winner for r in stats.history] == [1, 2, 1]
    assert len(stats.history) == stats.player1_wins + stats.player2_wins
    assert all(r.timestamp >= before for r in stats.history)
    timestamps = [r.timestamp for r in stats.history]
    assert timestamps == sorted(timestamps)


@pytest.mark.parametrize("player", [0, 3, -1, "1", True, False])
def test_record_win_rejects_unknown_player(stats, player):
    calls = []
    stats.on_state_changed(lambda: calls.append(1))
    with pytest.raises(ValueError):
        stats.record_win(player)
    assert stats.total_games == 0
    assert calls == []


def test_every_mutation_notifies_once(stats):
    calls = []
    stats.on_state_changed(lambda: calls.append("a"))
    stats.record_win(1)
    assert calls == ["a"]
    stats.record_tie()
    assert calls == ["a", "a"]
    stats.reset_stats()
    assert calls == ["a", "a", "a"]


def test_reset_stats_clears_everything(stats):
    stats.record_win(1)
    stats.record_win(2)
    stats.record_tie()
    calls = []
    stats.on_state_changed(lambda: calls.append(1))

    stats.reset_stats()
    assert (stats.player1_wins, stats.player2_wins, stats.ties) == (0, 0, 0)
    assert stats.history == ()
    assert len(calls) == 1


def test_handlers_run_in_registration_order_after_mutation(stats):
    seen = []

    @stats.on_state_changed
    def first():
        seen.append(("first", stats.player1_wins))

    stats.on_state_changed(lambda: seen.append(("second", stats.player1_wins)))
    stats.record_win(1)
    assert seen == [("first", 1), ("second", 1)]


def test_failing_handler_stops_broadcast(stats):
    later = []

    def boom():
        raise RuntimeError("observer failed")

    stats.on_state_changed(boom)
    stats.on_state_changed(lambda: later.append(1))
    with pytest.raises(RuntimeError):
        stats.record_win(2)
    assert stats.player2_wins == 1
    assert later == []


def test_remove_handler(stats):
    calls = []
    handler = stats.on_state_changed(lambda: calls.append(1))
    assert stats.remove_handler(handler)
    assert not stats.remove_handler(handler)
    stats.record_win(1)
    assert calls == []


def test_handler_must_be_callable(stats):
    with pytest.raises(TypeError):
        stats.on_state_changed("not a function")


def test_history_is_a_snapshot(stats):
    stats.record_win(1)
    snapshot = stats.history
    stats.record_win(2)
    assert len(snapshot) == 1
    with pytest.raises(AttributeError):
        snapshot[0].winner = 2


def test_tie_result(stats):
    result = stats.record_tie()
    assert result.winner == TIE_WINNER
    assert result.is_tie
    assert stats.ties == 1
    assert stats.summary()['games'] == 1


def test_summary(stats):
    stats.record_win(2)
    summary = stats.summary()
    assert summary['player2_wins'] == 1
    assert summary['last_winner'] == 2
    assert summary['last_played'] == stats.history[-1].timestamp.isoformat()


def test_game_result_is_not_a_tie():
    assert not GameResult(winner=1, timestamp=datetime.datetime.now()).is_tie


def test_recorded_winner_is_a_plain_int(stats):
    stats.record_win(np.int8(2))
    winner = stats.history[0].winner
    assert winner == 2
    assert type(winner) is int
