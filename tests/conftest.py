"""Shared test fixtures for notifykit."""

import io

import pytest
from rich.console import Console

from notifykit.core.config import NotifyConfig
from notifykit.core.dispatcher import ObservableDispatcher
from notifykit.service import reset_service


class RecordingConsole(Console):
    """A rich Console writing to memory, readable via .text."""

    def __init__(self) -> None:
        self._sink = io.StringIO()
        super().__init__(file=self._sink, width=120, color_system=None)

    @property
    def text(self) -> str:
        return self._sink.getvalue()


@pytest.fixture
def console():
    """Console whose output the test can inspect."""
    return RecordingConsole()


@pytest.fixture
def config():
    """Create a default config without loading from disk."""
    return NotifyConfig()


@pytest.fixture
def dispatcher():
    """Create a fresh dispatcher."""
    return ObservableDispatcher()


@pytest.fixture(autouse=True)
def _clean_service():
    """No test leaks a process-wide service into the next."""
    reset_service()
    yield
    reset_service()
