from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from xdgdirs.platform import PosixPathRules


class NoHomeRules(PosixPathRules):
    """POSIX rules for a user with no resolvable home directory."""

    def home_dir(self, env: Mapping[str, str]) -> Path | None:
        return None


def make_env(home: Path | str | None = "/home/user", **overrides: str) -> dict[str, str]:
    env: dict[str, str] = {}
    if home is not None:
        env["HOME"] = str(home)
    env.update(overrides)
    return env


def make_dir(path: Path, mode: int = 0o700) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    path.chmod(mode)
    return path


def write_file(path: Path, text: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path
