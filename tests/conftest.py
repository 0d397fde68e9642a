"""
Basic test fixtures for the dungeons test suite.

Provides simple fixtures and helpers for the layout engine, panels and the
tick-driven dashboard loop.
"""

import sys
import os
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from dungeons.core.data import Rect
from dungeons.core.frame import Frame
from dungeons.core.log_manager import LogManager
from dungeons.core.renderer import RendererConfig
from dungeons.dashboard import Grid, PanelData
from dungeons.renderers.simple_renderer import SimpleRenderer


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += max(0.0, seconds)


@pytest.fixture
def sample_grid():
    """The 10x10 sample map."""
    return Grid.sample()


@pytest.fixture
def screen():
    """A standard 80x24 screen rectangle."""
    return Rect(0, 0, 80, 24)


@pytest.fixture
def frame():
    """An empty 80x24 frame."""
    return Frame(80, 24)


@pytest.fixture
def panel_data(sample_grid):
    """Panel data for the sample map with no path statistics."""
    return PanelData(grid=sample_grid)


@pytest.fixture
def log_manager():
    """Create a log manager for testing."""
    return LogManager()


@pytest.fixture
def fake_clock():
    """Create a fake clock starting at zero."""
    return FakeClock()


@pytest.fixture
def make_renderer(fake_clock):
    """Factory for headless renderers whose idle polls advance the fake clock."""

    def _make(events=None, width=80, height=24):
        return SimpleRenderer(
            RendererConfig(width=width, height=height),
            events=events,
            sleep=fake_clock.advance,
        )

    return _make
