"""Directory reading: names in filesystem order with the directory flag resolved."""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass

from .errors import FilesystemError

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entry:
    """One directory entry as listed."""

    name: str
    is_directory: bool = False


def is_directory(base_path, name):
    """Return True when *name* under *base_path* is a real (non-symlink) directory."""
    try:
        mode = os.lstat(os.path.join(base_path, name)).st_mode
    except OSError:
        return False
    return stat.S_ISDIR(mode)


def read_entries(path):
    """List *path* without sorting; raise FilesystemError when it cannot be read."""
    try:
        names = os.listdir(path)
    except PermissionError:
        raise FilesystemError(path, "Permission denied") from None
    except NotADirectoryError:
        raise FilesystemError(path, "Not a directory") from None
    except FileNotFoundError:
        raise FilesystemError(path, "No such file or directory") from None
    except OSError as exc:
        raise FilesystemError(path, exc.strerror or str(exc)) from exc

    entries = [Entry(name, is_directory(path, name)) for name in names]
    LOGGER.debug("read %d entries from %s", len(entries), path)
    return entries
