"""Target directory reconciliation.

A target directory is in one of three states:

- ABSENT: does not exist, created on apply
- EMPTY: no entries, or only a ``.git`` entry; used as-is
- NON_EMPTY: anything else; requires confirmation to overwrite

Overwriting removes everything except ``.git``.
"""

import logging
import os
import shutil
import sys
from enum import Enum
from pathlib import Path

from boot.core.errors import OperationCancelled, TargetDirError

logger = logging.getLogger(__name__)

GIT_DIR = ".git"


class DirState(str, Enum):
    ABSENT = "absent"
    EMPTY = "empty"
    NON_EMPTY = "non_empty"


def is_empty(path: Path) -> bool:
    """True if ``path`` has no entries or only ``.git``."""
    entries = [p.name for p in path.iterdir()]
    return len(entries) == 0 or entries == [GIT_DIR]


def inspect_dir(path: Path) -> DirState:
    if not path.exists():
        return DirState.ABSENT
    if not path.is_dir():
        raise TargetDirError(f"Target {path} exists and is not a directory", path)
    if is_empty(path):
        return DirState.EMPTY
    return DirState.NON_EMPTY


def _ignore_missing(func, path, exc):
    # onexc passes the exception, onerror an exc_info tuple
    error = exc if isinstance(exc, BaseException) else exc[1]
    if not isinstance(error, FileNotFoundError):
        raise error


def _remove(entry: Path) -> None:
    if entry.is_dir() and not entry.is_symlink():
        if sys.version_info >= (3, 12):
            shutil.rmtree(entry, onexc=_ignore_missing)
        else:
            shutil.rmtree(entry, onerror=_ignore_missing)
    else:
        try:
            os.unlink(entry)
        except FileNotFoundError:
            pass


def empty_dir(path: Path) -> None:
    """Remove every entry of ``path`` except ``.git``.

    Entries that disappear meanwhile (or a missing ``path``) are fine;
    any other failure raises ``TargetDirError``.
    """
    if not path.exists():
        return
    for entry in list(path.iterdir()):
        if entry.name == GIT_DIR:
            continue
        try:
            _remove(entry)
        except OSError as e:
            raise TargetDirError(f"Failed to remove {entry}: {e}", entry) from e


def prepare_target(root: Path, overwrite: bool = False) -> DirState:
    """Get ``root`` ready for writing.

    Args:
        root: Absolute target directory
        overwrite: Whether the user confirmed clearing a non-empty directory

    Returns:
        The state the directory was found in

    Raises:
        OperationCancelled: If the directory is non-empty and not confirmed
        TargetDirError: If the path is not a directory or cannot be cleared
    """
    state = inspect_dir(root)
    logger.debug("Target %s is %s", root, state.value)

    if state is DirState.ABSENT:
        root.mkdir(parents=True, exist_ok=True)
    elif state is DirState.NON_EMPTY:
        if not overwrite:
            raise OperationCancelled()
        logger.debug("Emptying %s (keeping %s)", root, GIT_DIR)
        empty_dir(root)
    return state
