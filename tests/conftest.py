from __future__ import annotations

import os
from pathlib import Path

import pytest

from xdgdirs.platform import PosixPathRules
from tests.helpers import NoHomeRules, make_env

if os.name != "posix":
    collect_ignore_glob = ["unit/*.py"]


_XDG_VARS = (
    "XDG_DATA_HOME",
    "XDG_CONFIG_HOME",
    "XDG_CACHE_HOME",
    "XDG_STATE_HOME",
    "XDG_RUNTIME_DIR",
    "XDG_DATA_DIRS",
    "XDG_CONFIG_DIRS",
)


@pytest.fixture(autouse=True)
def clean_xdg_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests independent of the developer's real XDG variables."""
    for name in _XDG_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def rules() -> PosixPathRules:
    return PosixPathRules()


@pytest.fixture()
def no_home_rules() -> NoHomeRules:
    return NoHomeRules()


@pytest.fixture()
def home_dir(tmp_path: Path) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture()
def xdg_env(home_dir: Path) -> dict[str, str]:
    """Synthetic environment with only HOME set."""
    return make_env(home=home_dir)
