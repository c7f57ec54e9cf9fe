"""Shared fixtures: headless Qt application and fresh event bus."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from digital_doilies.core import BrushSettings, RasterSurface, SymmetryConfig
from digital_doilies.events.event_bus import EventBus


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """One QApplication for the whole test session."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def surface():
    return RasterSurface(800, 800)


@pytest.fixture
def red_brush():
    return BrushSettings(color="#ff0000", width=3, reflect=False, erase=False)


@pytest.fixture
def four_sectors():
    return SymmetryConfig(sectors=4, center=(400.0, 400.0))
