"""
Pytest configuration and fixtures for tvrename tests.
"""

import os
import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from tvrename.models import EpisodeRecord, MediaFile  # noqa: E402
from tvrename.utils import LogLevel, logger  # noqa: E402


class ScriptedChooser:
    """Chooser stub that replays canned answers and records every question."""

    def __init__(self, answers=()):
        self._answers = list(answers)
        self.calls = []

    def choose(self, message, options):
        self.calls.append((message, list(options)))
        if not self._answers:
            raise AssertionError(f"Unexpected question: {message}")
        return self._answers.pop(0)


@pytest.fixture
def chooser():
    return ScriptedChooser()


@pytest.fixture
def scripted():
    """Factory fixture: scripted(0, None, ...) -> ScriptedChooser."""
    return lambda *answers: ScriptedChooser(answers)


@pytest.fixture(autouse=True)
def _reset_logger():
    logger.set_log_level(LogLevel.INFO)
    logger.set_log_file(None)
    yield
    logger.set_log_level(LogLevel.INFO)
    logger.set_log_file(None)


def ep(season, number, name, id=None):
    return EpisodeRecord(id=id if id is not None else season * 100 + number, season_number=season, number=number,
                         name=name)


def files(*names, root="/media/show"):
    return [MediaFile(Path(root) / n) for n in names]
