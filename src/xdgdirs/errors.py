"""Exception types raised while resolving XDG base directories."""

from __future__ import annotations


class XdgError(Exception):
    """Base exception for xdgdirs."""


class MissingHomeDir(XdgError):
    """The home directory is needed for a default but cannot be determined."""

    def __init__(self, env_var: str) -> None:
        self.env_var = env_var
        super().__init__(
            f"Cannot determine home directory and ${env_var} is not set to an absolute path."
        )


class MissingRuntimeDir(XdgError):
    """$XDG_RUNTIME_DIR is unset, empty, or not absolute."""

    def __init__(self) -> None:
        super().__init__("$XDG_RUNTIME_DIR is not set to an absolute path.")


class UnsupportedPlatform(XdgError):
    """The current operating system has no path rules."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"XDG base directories are not supported on platform {name!r}.")
