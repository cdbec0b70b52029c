"""
Shared pytest fixtures for timetrack tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pendulum
import pytest

from timetrack.model.database import Database


@pytest.fixture(autouse=True)
def config_dir(tmp_path, monkeypatch) -> Path:
    """
    Keep tests away from the real config and database.

    Parameters
    ----------
    tmp_path : pathlib.Path
        Temporary path provided by pytest.
    monkeypatch : pytest.MonkeyPatch
        Monkeypatch fixture for environment updates.

    Returns
    -------
    pathlib.Path
        Directory holding config.yaml and database.json for the test.
    """
    path = tmp_path / "config"
    monkeypatch.setenv("TIMETRACK_CONFIG_DIR", str(path))
    return path


@pytest.fixture
def at() -> Callable[..., pendulum.DateTime]:
    """
    Build local timestamps on 2024-03-04 (or another day of that month).

    Returns
    -------
    Callable
        ``at(hour, minute=0, day=4)`` returning a local pendulum datetime.
    """

    def build(hour: int, minute: int = 0, day: int = 4) -> pendulum.DateTime:
        return pendulum.datetime(2024, 3, day, hour, minute, tz="local")

    return build


@pytest.fixture
def database() -> Database:
    """
    Database with two categories and no entries.

    Returns
    -------
    Database
        Categories ``a`` (id 1) and ``b`` (id 2).
    """
    return {
        "categories": [
            {"id": 1, "long_name": "Alpha project", "short_name": "a"},
            {"id": 2, "long_name": "Beta project", "short_name": "b"},
        ],
        "entries": [],
        "next_category_id": None,
    }
