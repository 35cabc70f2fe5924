"""Platform path rules: list separator, absoluteness, and home lookup."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path

from xdgdirs.errors import UnsupportedPlatform


class PathRules(ABC):
    """Operating-system specific pieces the resolver is written against."""

    list_separator: str

    @abstractmethod
    def is_absolute(self, value: str) -> bool:
        """Return True if *value* is an absolute path on this platform."""

    @abstractmethod
    def home_dir(self, env: Mapping[str, str]) -> Path | None:
        """Return the user's home directory, or None if it cannot be found."""


class PosixPathRules(PathRules):
    list_separator = ":"

    def is_absolute(self, value: str) -> bool:
        return value.startswith("/")

    def home_dir(self, env: Mapping[str, str]) -> Path | None:
        home = env.get("HOME", "")
        if home and self.is_absolute(home):
            return Path(home)

        # pwd only exists on Unix; importing here keeps this module importable elsewhere.
        import pwd

        try:
            entry = pwd.getpwuid(os.geteuid())
        except KeyError:
            return None
        if entry.pw_dir and self.is_absolute(entry.pw_dir):
            return Path(entry.pw_dir)
        return None


def current_rules() -> PathRules:
    """Return the path rules for the running operating system."""
    if os.name != "posix":
        raise UnsupportedPlatform(os.name)
    return PosixPathRules()
