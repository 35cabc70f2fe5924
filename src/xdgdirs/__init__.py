"""Resolve XDG Base Directory locations for user data, config, cache, and runtime files."""

from __future__ import annotations

import logging

from xdgdirs.errors import MissingHomeDir, MissingRuntimeDir, UnsupportedPlatform, XdgError
from xdgdirs.models import BaseDirectories, ValidationResult
from xdgdirs.paths import (
    get_all,
    get_cache_home,
    get_config_dirs,
    get_config_home,
    get_data_dirs,
    get_data_home,
    get_runtime_dir,
    get_state_home,
)
from xdgdirs.platform import PathRules, PosixPathRules, current_rules
from xdgdirs.runtime import is_valid_runtime_dir, validate_runtime_dir
from xdgdirs.search import (
    config_search_path,
    data_search_path,
    find_config_file,
    find_data_file,
    iter_config_files,
    iter_data_files,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BaseDirectories",
    "MissingHomeDir",
    "MissingRuntimeDir",
    "PathRules",
    "PosixPathRules",
    "UnsupportedPlatform",
    "ValidationResult",
    "XdgError",
    "config_search_path",
    "current_rules",
    "data_search_path",
    "find_config_file",
    "find_data_file",
    "get_all",
    "get_cache_home",
    "get_config_dirs",
    "get_config_home",
    "get_data_dirs",
    "get_data_home",
    "get_runtime_dir",
    "get_state_home",
    "is_valid_runtime_dir",
    "iter_config_files",
    "iter_data_files",
    "validate_runtime_dir",
]
