"""Shared fixtures for the tic-tac-toe tests."""

import os

import pytest

# widgets are built without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def game_over_calls():
    """Records every game over message instead of showing a dialog."""
    return []
