from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

import pytest

import xdgdirs
from xdgdirs.errors import MissingHomeDir, MissingRuntimeDir, UnsupportedPlatform, XdgError
from xdgdirs.models import BaseDirectories, ValidationResult


def test_validation_result_members() -> None:
    assert {r.name for r in ValidationResult} == {
        "VALID",
        "NOT_FOUND",
        "WRONG_OWNER",
        "INSECURE_PERMISSIONS",
    }


def test_base_directories_is_frozen() -> None:
    dirs = BaseDirectories(
        data_home=Path("/d"),
        config_home=Path("/c"),
        cache_home=Path("/k"),
        state_home=Path("/s"),
    )
    assert dirs.runtime_dir is None
    assert dirs.data_dirs == []
    with pytest.raises(dataclasses.FrozenInstanceError):
        dirs.data_home = Path("/other")  # type: ignore[misc]


@pytest.mark.parametrize(
    "exc",
    [MissingHomeDir("XDG_DATA_HOME"), MissingRuntimeDir(), UnsupportedPlatform("nt")],
)
def test_errors_share_base_class(exc: XdgError) -> None:
    assert isinstance(exc, XdgError)
    assert str(exc)


def test_missing_home_dir_message_names_variable() -> None:
    assert "$XDG_CACHE_HOME" in str(MissingHomeDir("XDG_CACHE_HOME"))


def test_package_logger_is_silent_by_default() -> None:
    """The library installs a NullHandler and nothing else."""
    handlers = logging.getLogger("xdgdirs").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_public_api_exports() -> None:
    for name in xdgdirs.__all__:
        assert hasattr(xdgdirs, name)
