"""
Shared fixtures for satellite console tests.
"""

import io
import logging
from typing import Iterable, List

import pytest
from rich.console import Console

from satellite_console.core.satellite import Satellite
from satellite_console.mission.prompts import ConsolePrompter


class ScriptedReader:
    """Plays back canned answers, then behaves like a closed stdin."""

    def __init__(self, answers: Iterable[str]):
        self.answers: List[str] = list(answers)
        self.prompts: List[str] = []

    def __call__(self, message: str) -> str:
        self.prompts.append(message)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def satellite(console):
    return Satellite(console=console)


@pytest.fixture
def scripted():
    """Factory returning (prompter, reader) for a list of answers."""

    def _make(*answers: str):
        reader = ScriptedReader(answers)
        return ConsolePrompter(reader=reader), reader

    return _make


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("satellite_console")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
