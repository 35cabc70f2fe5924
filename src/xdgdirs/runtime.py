"""Checks that a runtime directory meets the XDG ownership and mode rules.

The XDG Base Directory Specification requires $XDG_RUNTIME_DIR to be owned
by the user with Unix access mode 0700. These checks are advisory: nothing
here creates the directory or repairs its permissions.
"""

from __future__ import annotations

import errno
import logging
import os
import stat
from pathlib import Path

from xdgdirs.models import ValidationResult

logger = logging.getLogger(__name__)

RUNTIME_DIR_MODE = 0o700


def validate_runtime_dir(
    path: str | os.PathLike[str], *, uid: int | None = None
) -> ValidationResult:
    """Classify *path* as a runtime directory candidate.

    Checks existence, then ownership (against *uid*, or the effective uid),
    then that the mode is exactly 0700. The first failing check decides the
    result. Empty or relative candidates and paths that cannot be resolved
    (missing, symlink loops, names too long) are NOT_FOUND. Other errors,
    such as PermissionError on a parent, propagate.
    """
    raw = os.fspath(path)
    if not raw or not os.path.isabs(raw):
        logger.debug("Runtime dir %r is not an absolute path", raw)
        return ValidationResult.NOT_FOUND
    path = Path(raw)
    try:
        st = os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        logger.debug("Runtime dir %s does not exist", path)
        return ValidationResult.NOT_FOUND
    except OSError as exc:
        if exc.errno not in (errno.ELOOP, errno.ENAMETOOLONG):
            raise
        logger.debug("Runtime dir %s cannot be resolved: %s", path, exc)
        return ValidationResult.NOT_FOUND
    if not stat.S_ISDIR(st.st_mode):
        logger.debug("Runtime dir %s is not a directory", path)
        return ValidationResult.NOT_FOUND

    owner = os.geteuid() if uid is None else uid
    if st.st_uid != owner:
        logger.debug("Runtime dir %s is owned by uid %d, expected %d", path, st.st_uid, owner)
        return ValidationResult.WRONG_OWNER

    mode = stat.S_IMODE(st.st_mode)
    if mode != RUNTIME_DIR_MODE:
        logger.debug("Runtime dir %s has mode %o, expected %o", path, mode, RUNTIME_DIR_MODE)
        return ValidationResult.INSECURE_PERMISSIONS

    return ValidationResult.VALID


def is_valid_runtime_dir(path: str | os.PathLike[str], *, uid: int | None = None) -> bool:
    """Return True if *path* passes every check in :func:`validate_runtime_dir`."""
    return validate_runtime_dir(path, uid=uid) is ValidationResult.VALID
