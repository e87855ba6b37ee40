from __future__ import annotations

from pathlib import Path

import pytest

from inistore import ConfigStore
from inistore.store import legacy


SAMPLE = "[db]\nhost = localhost\nport = 5432\n\n"


@pytest.fixture()
def sample_ini(tmp_path: Path) -> Path:
    """
    the db example file, written fresh for each test.
    """
    path = tmp_path / "app.ini"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


@pytest.fixture()
def store(sample_ini: Path) -> ConfigStore:
    return ConfigStore.open(str(sample_ini), encoding="utf-8")


@pytest.fixture()
def fresh_legacy():
    legacy.reset()
    yield legacy
    legacy.reset()
