"""Shared fixtures for tasklist tests."""

import io
from datetime import datetime, timezone

import pytest
from prompt_toolkit.history import InMemoryHistory
from rich.console import Console

from tasklist.app_config import AppConfig
from tasklist.cli.provider import TaskListCLIProvider
from tasklist.cli.theme import LIGHT_THEME
from tasklist.persistence import TaskStorage


@pytest.fixture
def storage(tmp_path):
    """Task storage in a temporary directory."""
    return TaskStorage(str(tmp_path / "data"))


@pytest.fixture
def console():
    """Console writing to a string buffer instead of the terminal."""
    return Console(file=io.StringIO(), theme=LIGHT_THEME, width=120)


@pytest.fixture
def cli(tmp_path, storage, console):
    """Provider wired to temporary storage and a captured console."""
    config = AppConfig(data_dir=str(tmp_path / "data"))
    return TaskListCLIProvider(config=config, storage=storage, console=console,
                               history=InMemoryHistory())


@pytest.fixture
def new_year():
    return datetime(2024, 1, 1, tzinfo=timezone.utc)
