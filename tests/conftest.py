"""Shared pytest configuration and fixtures for all tests."""

import logging
import threading

import pytest

from marker.api.check.TransportError import TransportError
from marker.utils.configure_logging import _STATE


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.path):
            item.add_marker(pytest.mark.unit)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without network access")
    config.addinivalue_line("markers", "check: link checking domain")
    config.addinivalue_line("markers", "config: configuration domain")
    config.addinivalue_line("markers", "cli: command line interface")


@pytest.fixture(autouse=True)
def marker_home(tmp_path, monkeypatch):
    """Isolate MARKER_HOME (config file and log) per test."""
    home = tmp_path / ".marker-home"
    monkeypatch.setenv("MARKER_HOME", str(home))
    return home


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers attached to the marker logger by a test."""
    yield
    logger = logging.getLogger("marker")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    _STATE["configured"] = False


class FakeChecker:
    """Deterministic stand-in for the HTTP checker.

    ``statuses`` maps URL to status code; ``failures`` maps URL to a
    transport error message. Everything else answers ``default``.
    """

    def __init__(self, statuses=None, failures=None, default=200):
        self.statuses = dict(statuses or {})
        self.failures = dict(failures or {})
        self.default = default
        self.calls: list[str] = []
        self._lock = threading.Lock()

    def __call__(self, url: str) -> int:
        with self._lock:
            self.calls.append(url)
        if url in self.failures:
            raise TransportError(self.failures[url])
        return self.statuses.get(url, self.default)


@pytest.fixture
def fake_checker():
    return FakeChecker()


@pytest.fixture
def checker_factory():
    return FakeChecker


@pytest.fixture
def run_cmd():
    """Execute a cmd function and return the result with progress_callback executed."""

    def _run(cmd_func, *args, **kwargs):
        result = cmd_func(*args, **kwargs)
        list(result.progress_callback(result))
        return result

    return _run


@pytest.fixture
def docs_tree(tmp_path):
    """A small documentation tree with one file per kind of link."""
    root = tmp_path / "docs"
    (root / "guide").mkdir(parents=True)
    (root / "README.md").write_text(
        "# Docs\n\nSee the [guide](guide/intro.md) and [missing](nope.md).\n",
        encoding="utf-8",
    )
    (root / "guide" / "intro.md").write_text(
        "Back to [readme](../README.md#docs).\n\nVisit [site](https://example.com/a#top).\n",
        encoding="utf-8",
    )
    (root / "notes.txt").write_text("[ignored](nowhere.md)\n", encoding="utf-8")
    return root
