import pytest

from vouch import context
from vouch.config import get_settings


@pytest.fixture(autouse=True)
def clean_sink_chain(monkeypatch):
    """Avoid cross-test leakage of the process-wide sink chain and cached settings."""
    monkeypatch.delenv("VOUCH_SINKS", raising=False)
    monkeypatch.delenv("VOUCH_LOG_LEVEL", raising=False)
    context.reset()
    get_settings.cache_clear()
    yield
    context.reset()
    get_settings.cache_clear()
