import logging

import pytest
from pydantic import ValidationError

from vouch.config import VouchSettings, build_sinks, get_settings
from vouch.context import SINK_CHAIN, configure, get_sink_chain, reset, sinks_scope
from vouch.sinks import ConsoleSink, DebuggerSink, LoggingSink, RaisingSink


def test_default_settings():
    settings = VouchSettings()
    assert settings.sinks == ["raise"]
    assert settings.log_level == "ERROR"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("VOUCH_SINKS", '["log", "console", "debugger", "raise"]')
    monkeypatch.setenv("VOUCH_LOG_LEVEL", "info")
    settings = VouchSettings()
    assert settings.sinks == ["log", "console", "debugger", "raise"]
    assert settings.log_level == "INFO"


def test_unknown_sink_rejected():
    with pytest.raises(ValidationError):
        VouchSettings(sinks=["email"])


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        VouchSettings(log_level="loud")


def test_build_sinks_preserves_order():
    sinks = build_sinks(VouchSettings(sinks=["log", "console", "debugger", "raise"], log_level="WARNING"))
    assert [type(sink) for sink in sinks] == [LoggingSink, ConsoleSink, DebuggerSink, RaisingSink]
    assert sinks[0].level == logging.WARNING


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


class TestChainResolution:
    def test_falls_back_to_settings(self):
        chain = get_sink_chain()
        assert len(chain) == 1
        assert isinstance(chain[0], RaisingSink)

    def test_configured_chain(self):
        sink = LoggingSink()
        configure(sink)
        assert get_sink_chain() == (sink,)
        reset()
        assert isinstance(get_sink_chain()[0], RaisingSink)

    def test_scope_is_restored(self):
        sink = LoggingSink()
        with sinks_scope(sink):
            assert SINK_CHAIN.get() == (sink,)
            with sinks_scope():
                assert get_sink_chain() == ()
            assert get_sink_chain() == (sink,)
        assert SINK_CHAIN.get() is None
