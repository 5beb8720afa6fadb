"""Executable lookup over the execution path.

This module provides:
- search_path: split the PATH variable of an environment into directories
- is_executable: platform-appropriate "can this file be run" check
- find_executable: first-match search by file stem over ordered directories

Nothing here is cached. Every call re-reads the filesystem, so an executable
removed between two commands is no longer found by the second one.
"""

import logging
import os
import sys
from typing import Iterable, List, Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_PATHEXT = ".COM;.EXE;.BAT;.CMD"


def search_path(env: Mapping[str, str]) -> List[str]:
    """
    Split the PATH entry of env into an ordered list of directories.

    Args:
        env: Environment mapping (the shell's variables)

    Returns:
        Directories in search order. Empty components are dropped and a
        missing PATH gives an empty list.

    Example:
        >>> search_path({'PATH': '/usr/bin:/bin'})
        ['/usr/bin', '/bin']
    """
    value = env.get("PATH", "")
    return [entry for entry in value.split(os.pathsep) if entry]


def is_executable(path: str, env: Optional[Mapping[str, str]] = None) -> bool:
    """
    Check whether path is a regular file this platform would run.

    On POSIX this is the execute permission bit for the current user.
    On Windows it is an extension listed in PATHEXT.
    """
    if not os.path.isfile(path):
        return False

    if sys.platform == "win32":
        pathext = (env or os.environ).get("PATHEXT", DEFAULT_PATHEXT)
        extensions = {ext.lower() for ext in pathext.split(os.pathsep) if ext}
        return os.path.splitext(path)[1].lower() in extensions

    return os.access(path, os.X_OK)


def _stem(filename: str) -> str:
    return os.path.splitext(filename)[0]


def _candidates(entry: str) -> Iterable[str]:
    """Yield candidate files for one PATH entry, in enumeration order."""
    if os.path.isdir(entry):
        try:
            names = sorted(os.listdir(entry))
        except OSError as e:
            logger.debug("skipping unreadable directory %s: %s", entry, e)
            return
        for name in names:
            yield os.path.join(entry, name)
    elif os.path.isfile(entry):
        # PATH may name a single file instead of a directory
        yield entry
    else:
        logger.debug("skipping missing path entry %s", entry)


def find_executable(name: str, search_dirs: Iterable[str],
                    env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Find the first executable named name (exactly, or by stem).

    Args:
        name: Command name as typed (compared case-sensitively)
        search_dirs: Ordered PATH entries to search
        env: Environment used for the Windows PATHEXT check

    Returns:
        Path of the first matching executable, or None if there is none

    Examples:
        >>> find_executable('ls', ['/usr/bin', '/bin'])
        '/usr/bin/ls'
        >>> find_executable('no_such_cmd', ['/usr/bin']) is None
        True
    """
    if not name:
        return None

    for entry in search_dirs:
        candidates = list(_candidates(entry))
        # Within one entry an exact filename beats a stem match
        exact = [c for c in candidates if os.path.basename(c) == name]
        by_stem = [c for c in candidates
                   if os.path.basename(c) != name and _stem(os.path.basename(c)) == name]
        for candidate in exact + by_stem:
            if is_executable(candidate, env):
                logger.debug("resolved %s -> %s", name, candidate)
                return candidate
            logger.debug("ignoring non-executable match %s", candidate)

    return None
