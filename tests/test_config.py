"""Tests for GameConfig and the debug manager."""

import argparse
import logging

import pytest

from c4engine.config import GameConfig, parse_components
from c4engine.debug import debug, DebugLevel, DebugManager, parse_level


def test_defaults():
    config = GameConfig()
    config.validate()
    assert not config.record_ties
    assert config.early_exit
    assert not config.thread_safe
    assert config.to_dict()['debug_level'] == "info"


@pytest.mark.parametrize("kwargs", [
    {"debug_level": "verbose"},
    {"record_ties": "yes"},
    {"early_exit": 1},
])
def test_validate_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs).validate()


def test_from_args():
    args = argparse.Namespace(debug=True, debug_level="warning", record_ties=True,
                              full_scan=True, log_file=None)
    config = GameConfig.from_args(args)
    assert config.debug_level == "debug"
    assert config.record_ties
    assert not config.early_exit


def test_from_args_uses_defaults_for_missing_flags():
    config = GameConfig.from_args(argparse.Namespace())
    assert config == GameConfig()


def test_apply_logging_sets_level():
    GameConfig(debug_level="warning").apply_logging()
    assert debug.level == DebugLevel.WARNING
    assert debug.logger.level == logging.WARNING


def test_apply_logging_writes_file(tmp_path):
    log_file = tmp_path / "game.log"
    GameConfig(debug_level="info", log_file=str(log_file)).apply_logging()
    debug.info("hello from the test", "session")
    debug.configure(log_file="")
    assert "[session] hello from the test" in log_file.read_text()


def test_parse_level():
    assert parse_level("TRACE") == DebugLevel.TRACE
    assert parse_level(" none ") == DebugLevel.NONE
    assert parse_level("loud") is None


def test_component_filter(caplog):
    manager = DebugManager()
    manager.configure(level=DebugLevel.DEBUG, components=["stats"])
    with caplog.at_level(logging.DEBUG, logger="c4engine"):
        manager.debug("kept", "stats")
        manager.debug("dropped", "board")
    messages = [record.getMessage() for record in caplog.records]
    assert "[stats] kept" in messages
    assert "[board] dropped" not in messages


def test_level_filter(caplog):
    manager = DebugManager()
    manager.configure(level=DebugLevel.WARNING)
    with caplog.at_level(logging.DEBUG, logger="c4engine"):
        manager.info("quiet")
        manager.error("loud")
    messages = [record.getMessage() for record in caplog.records]
    assert messages == ["loud"]


def test_debug_components_reach_debug_manager(caplog):
    GameConfig(debug_level="debug", debug_components=["stats"]).apply_logging()
    with caplog.at_level(logging.DEBUG, logger="c4engine"):
        debug.info("counted", "stats")
        debug.info("placed", "board")
    messages = [record.getMessage() for record in caplog.records]
    assert "[stats] counted" in messages
    assert "[board] placed" not in messages


def test_unknown_debug_component_rejected():
    with pytest.raises(ValueError):
        GameConfig(debug_components=["renderer"]).validate()


def test_parse_components():
    assert parse_components(None) == []
    assert parse_components("state, ,stats") == ["state", "stats"]


def test_timers():
    debug.start_timer("unit")
    assert debug.end_timer("unit") >= 0
    assert debug.end_timer("unit") is None
