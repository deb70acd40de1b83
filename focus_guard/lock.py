"""Read-only toggling of the controlling files.

This only deters casual edits while the monitor runs. The owner can always
chmod the files back, so it is not access control.
"""

import logging
import os
import stat
from pathlib import Path
from typing import Iterable, Union

from .exceptions import LockError

logger = logging.getLogger(__name__)

_WRITE_BITS = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH
_UNLOCK_BITS = stat.S_IWUSR | stat.S_IRUSR | stat.S_IRGRP | stat.S_IROTH


def _mode(path: Path) -> int:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except OSError as e:
        raise LockError(f"Cannot stat '{path}': {e}") from e


def _chmod(path: Path, mode: int) -> None:
    try:
        os.chmod(path, mode)
    except OSError as e:
        logger.error("chmod %o on %s failed: %s", mode, path, e)
        raise LockError(f"Cannot change permissions of '{path}': {e}") from e


def lock(path: Union[str, Path]) -> None:
    """Clear every write bit on *path*, keeping read and execute bits."""
    path = Path(path)
    _chmod(path, _mode(path) & ~_WRITE_BITS)
    logger.info("Locked %s", path)


def unlock(path: Union[str, Path]) -> None:
    """
    Restore owner write plus read for owner, group and others.

    The pre-lock mode is not remembered, so only 0644 and 0755 files come back
    exactly as they were. A 0600 file becomes 0644 (world-readable) and a 0664
    file loses its group write bit.
    """
    path = Path(path)
    _chmod(path, _mode(path) | _UNLOCK_BITS)
    logger.info("Unlocked %s", path)


def is_locked(path: Union[str, Path]) -> bool:
    """True when no write bit is set on *path*."""
    return not (_mode(Path(path)) & _WRITE_BITS)


def lock_all(paths: Iterable[Union[str, Path]]) -> None:
    """
    Lock several files, checking that every one of them exists first.

    A missing or unreadable file fails before any permission changes. A chmod
    refused halfway can still leave earlier files locked; `stop` unlocks them.

    Args:
        paths: Files to make read-only

    Raises:
        LockError: A file is missing or its mode cannot be changed
    """
    paths = [Path(p) for p in paths]
    for path in paths:
        _mode(path)
    for path in paths:
        lock(path)


def unlock_all(paths: Iterable[Union[str, Path]]) -> None:
    """
    Unlock several files, checking that every one of them exists first.

    Args:
        paths: Files to make writable again

    Raises:
        LockError: A file is missing or its mode cannot be changed
    """
    paths = [Path(p) for p in paths]
    for path in paths:
        _mode(path)
    for path in paths:
        unlock(path)
