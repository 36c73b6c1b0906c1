import pytest

from node_finder.context import reset_context


@pytest.fixture(autouse=True)
def _fresh_context(monkeypatch):
    monkeypatch.delenv("NODE_FINDER_MAX_WAIT_TIME", raising=False)
    monkeypatch.delenv("NODE_FINDER_RETRY_INTERVAL", raising=False)
    reset_context()
    yield
    reset_context()
