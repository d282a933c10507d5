"""Shared pytest fixtures for StudyHub tests."""

import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from PyQt6.QtWidgets import QApplication

from studyhub.database.db import configure_engine, init_db
from studyhub.timer.engine import TimerEngine
from studyhub.timer.session import TimerSession


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture(autouse=True)
def studyhub_home(tmp_path, monkeypatch):
    """Keep settings, sounds and logs out of the real support directory."""
    monkeypatch.setenv("STUDYHUB_HOME", str(tmp_path / "home"))
    return tmp_path / "home"


@pytest.fixture
def session():
    """Classic 25/5 timer, no host attached."""
    return TimerSession(25, 5)


@pytest.fixture
def engine(qapp):
    """Fresh TimerEngine with DB logging on."""
    return TimerEngine(parent=None, db_enabled=True)


@pytest.fixture
def engine_no_db(qapp):
    """Fresh TimerEngine with DB disabled (pure state-machine tests)."""
    return TimerEngine(parent=None, db_enabled=False)
