"""XDG Base Directory resolution.

Each function reads one environment variable and falls back to the
documented default when the variable is unset, empty, or not absolute.
The environment is passed in as a mapping (``os.environ`` when omitted) so
callers can resolve against a synthetic environment.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from xdgdirs.errors import MissingHomeDir, MissingRuntimeDir
from xdgdirs.models import BaseDirectories
from xdgdirs.platform import PathRules, current_rules

logger = logging.getLogger(__name__)

DATA_HOME_SUFFIX = (".local", "share")
CONFIG_HOME_SUFFIX = (".config",)
CACHE_HOME_SUFFIX = (".cache",)
STATE_HOME_SUFFIX = (".local", "state")

DEFAULT_DATA_DIRS = ("/usr/local/share", "/usr/share")
DEFAULT_CONFIG_DIRS = ("/etc/xdg",)


def _resolve(
    env: Mapping[str, str] | None, rules: PathRules | None
) -> tuple[Mapping[str, str], PathRules]:
    return (os.environ if env is None else env), (rules or current_rules())


def _env_path(env: Mapping[str, str], rules: PathRules, name: str) -> Path | None:
    val = env.get(name, "")
    if not val:
        return None
    if not rules.is_absolute(val):
        logger.debug("Ignoring $%s: %r is not an absolute path", name, val)
        return None
    return Path(val)


def _home_path(
    env: Mapping[str, str],
    rules: PathRules,
    name: str,
    suffix: tuple[str, ...],
) -> Path:
    path = _env_path(env, rules, name)
    if path is not None:
        return path
    home = rules.home_dir(env)
    if home is None:
        raise MissingHomeDir(name)
    return home.joinpath(*suffix)


def _search_path(
    env: Mapping[str, str],
    rules: PathRules,
    name: str,
    default: tuple[str, ...],
) -> list[Path]:
    # Empty and relative segments are dropped; order and duplicates are kept.
    dirs: list[Path] = []
    for segment in env.get(name, "").split(rules.list_separator):
        if not segment:
            continue
        if not rules.is_absolute(segment):
            logger.debug("Ignoring relative entry %r in $%s", segment, name)
            continue
        dirs.append(Path(segment))
    if not dirs:
        return [Path(p) for p in default]
    return dirs


def get_data_home(
    *, env: Mapping[str, str] | None = None, rules: PathRules | None = None
) -> Path:
    """Return $XDG_DATA_HOME, defaulting to ``~/.local/share``."""
    env, rules = _resolve(env, rules)
    return _home_path(env, rules, "XDG_DATA_HOME", DATA_HOME_SUFFIX)


def get_config_home(
    *, env: Mapping[str, str] | None = None, rules: PathRules | None = None
) -> Path:
    """Return $XDG_CONFIG_HOME, defaulting to ``~/.config``."""
    env, rules = _resolve(env, rules)
    return _home_path(env, rules, "XDG_CONFIG_HOME", CONFIG_HOME_SUFFIX)


def get_cache_home(
    *, env: Mapping[str, str] | None = None, rules: PathRules | None = None
) -> Path:
    """Return $XDG_CACHE_HOME, defaulting to ``~/.cache``."""
    env, rules = _resolve(env, rules)
    return _home_path(env, rules, "XDG_CACHE_HOME", CACHE_HOME_SUFFIX)


def get_state_home(
    *, env: Mapping[str, str] | None = None, rules: PathRules | None = None
) -> Path:
    """Return $XDG_STATE_HOME, defaulting to ``~/.local/state``."""
    env, rules = _resolve(env, rules)
    return _home_path(env, rules, "XDG_STATE_HOME", STATE_HOME_SUFFIX)


def get_runtime_dir(
    *, env: Mapping[str, str] | None = None, rules: PathRules | None = None
) -> Path:
    """Return $XDG_RUNTIME_DIR.

    There is no default runtime directory. Raises MissingRuntimeDir when the
    variable is unset, empty, or relative; the caller decides what to do
    instead. Use :func:`xdgdirs.runtime.validate_runtime_dir` to check the
    directory's ownership and permissions.
    """
    env, rules = _resolve(env, rules)
    path = _env_path(env, rules, "XDG_RUNTIME_DIR")
    if path is None:
        raise MissingRuntimeDir()
    return path


def get_data_dirs(
    *, env: Mapping[str, str] | None = None, rules: PathRules | None = None
) -> list[Path]:
    """Return $XDG_DATA_DIRS in precedence order.

    Defaults to ``[/usr/local/share, /usr/share]``.
    """
    env, rules = _resolve(env, rules)
    return _search_path(env, rules, "XDG_DATA_DIRS", DEFAULT_DATA_DIRS)


def get_config_dirs(
    *, env: Mapping[str, str] | None = None, rules: PathRules | None = None
) -> list[Path]:
    """Return $XDG_CONFIG_DIRS in precedence order, defaulting to ``[/etc/xdg]``."""
    env, rules = _resolve(env, rules)
    return _search_path(env, rules, "XDG_CONFIG_DIRS", DEFAULT_CONFIG_DIRS)


def get_all(
    *, env: Mapping[str, str] | None = None, rules: PathRules | None = None
) -> BaseDirectories:
    """Resolve every base directory at once.

    ``runtime_dir`` is None when $XDG_RUNTIME_DIR is missing. MissingHomeDir
    still propagates.
    """
    env, rules = _resolve(env, rules)
    try:
        runtime_dir: Path | None = get_runtime_dir(env=env, rules=rules)
    except MissingRuntimeDir:
        runtime_dir = None
    return BaseDirectories(
        data_home=get_data_home(env=env, rules=rules),
        config_home=get_config_home(env=env, rules=rules),
        cache_home=get_cache_home(env=env, rules=rules),
        state_home=get_state_home(env=env, rules=rules),
        runtime_dir=runtime_dir,
        data_dirs=get_data_dirs(env=env, rules=rules),
        config_dirs=get_config_dirs(env=env, rules=rules),
    )
