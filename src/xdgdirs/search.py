"""Look up existing files across an XDG home directory and its search path."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path, PurePosixPath

from xdgdirs.paths import get_config_dirs, get_config_home, get_data_dirs, get_data_home
from xdgdirs.platform import PathRules


def config_search_path(
    *, env: Mapping[str, str] | None = None, rules: PathRules | None = None
) -> list[Path]:
    """$XDG_CONFIG_HOME followed by $XDG_CONFIG_DIRS."""
    return [get_config_home(env=env, rules=rules), *get_config_dirs(env=env, rules=rules)]


def data_search_path(
    *, env: Mapping[str, str] | None = None, rules: PathRules | None = None
) -> list[Path]:
    """$XDG_DATA_HOME followed by $XDG_DATA_DIRS."""
    return [get_data_home(env=env, rules=rules), *get_data_dirs(env=env, rules=rules)]


def _relative(parts: tuple[str, ...]) -> PurePosixPath:
    if not parts:
        raise ValueError("At least one path component is required.")
    rel = PurePosixPath(*parts)
    if rel.is_absolute():
        raise ValueError(f"Expected a relative path, got {str(rel)!r}.")
    return rel


def _iter_files(dirs: list[Path], parts: tuple[str, ...]) -> Iterator[Path]:
    rel = _relative(parts)
    for base in dirs:
        candidate = base / rel
        if candidate.is_file():
            yield candidate


def iter_config_files(
    *parts: str, env: Mapping[str, str] | None = None, rules: PathRules | None = None
) -> Iterator[Path]:
    """Yield every existing ``<config dir>/<parts>``, highest precedence first."""
    yield from _iter_files(config_search_path(env=env, rules=rules), parts)


def iter_data_files(
    *parts: str, env: Mapping[str, str] | None = None, rules: PathRules | None = None
) -> Iterator[Path]:
    """Yield every existing ``<data dir>/<parts>``, highest precedence first."""
    yield from _iter_files(data_search_path(env=env, rules=rules), parts)


def find_config_file(
    *parts: str, env: Mapping[str, str] | None = None, rules: PathRules | None = None
) -> Path | None:
    """Return the highest-precedence existing config file, or None."""
    return next(iter_config_files(*parts, env=env, rules=rules), None)


def find_data_file(
    *parts: str, env: Mapping[str, str] | None = None, rules: PathRules | None = None
) -> Path | None:
    """Return the highest-precedence existing data file, or None."""
    return next(iter_data_files(*parts, env=env, rules=rules), None)
