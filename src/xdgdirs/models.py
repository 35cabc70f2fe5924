"""Value types returned by xdgdirs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class ValidationResult(Enum):
    VALID = "valid"
    NOT_FOUND = "not_found"
    WRONG_OWNER = "wrong_owner"
    INSECURE_PERMISSIONS = "insecure_permissions"


@dataclass(frozen=True)
class BaseDirectories:
    data_home: Path
    config_home: Path
    cache_home: Path
    state_home: Path
    runtime_dir: Path | None = None  # None when $XDG_RUNTIME_DIR is missing
    data_dirs: list[Path] = field(default_factory=list)
    config_dirs: list[Path] = field(default_factory=list)
