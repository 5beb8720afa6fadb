"""Path and working directory management for lite-shell.

This module provides the PathManager class which handles:
- Current working directory tracking (the shell's only mutable state)
- Path resolution (relative to absolute)
- Home directory shorthand for cd
"""

import logging
import os
from typing import Mapping, Optional

from .exceptions import DirectoryNotFoundError, translate_os_error

logger = logging.getLogger(__name__)


class PathManager:
    """Manages paths and the working directory.

    This class encapsulates path-related operations including:
    - Tracking the current working directory
    - Resolving relative paths to absolute paths
    - Keeping the process working directory in step with the shell's

    Attributes:
        cwd: Current working directory (always absolute)
        sync_process: When True, change_directory also calls os.chdir
    """

    def __init__(self, initial_cwd: Optional[str] = None, sync_process: bool = True):
        """Initialize the path manager.

        Args:
            initial_cwd: Initial working directory (default: os.getcwd())
            sync_process: Update the real process cwd on change (default: True)
        """
        if initial_cwd is None:
            initial_cwd = os.getcwd()
        self.cwd = os.path.normpath(os.path.abspath(initial_cwd))
        self.sync_process = sync_process

    def resolve_path(self, path: str) -> str:
        """Resolve a relative or absolute path to an absolute path.

        Args:
            path: Path to resolve (can be relative or absolute)

        Returns:
            Absolute, normalized path

        Examples:
            resolve_path('/foo/bar') -> '/foo/bar'
            resolve_path('bar') with cwd='/foo' -> '/foo/bar'
            resolve_path('../baz') with cwd='/foo/bar' -> '/foo/baz'
        """
        if not path:
            return self.cwd

        if os.path.isabs(path):
            return os.path.normpath(path)
        return os.path.normpath(os.path.join(self.cwd, path))

    def expand_home(self, path: str, env: Optional[Mapping[str, str]] = None) -> str:
        """Replace a leading '~' with the home directory.

        Only '~' on its own and '~/...' are expanded; '~user' is left alone.
        HOME is taken from env when given, else from os.path.expanduser.
        """
        if path != "~" and not path.startswith("~/"):
            return path

        home = env.get("HOME") if env is not None else None
        if not home:
            home = os.path.expanduser("~")
        return home + path[1:]

    def change_directory(self, path: str, env: Optional[Mapping[str, str]] = None) -> str:
        """Change the current working directory.

        Args:
            path: New directory path (relative, absolute, or starting with '~')
            env: Shell environment used to look up HOME

        Returns:
            The new absolute working directory

        Raises:
            DirectoryNotFoundError: If the target does not exist or is not a
                directory. The working directory is left unchanged.
        """
        target = self.resolve_path(self.expand_home(path, env))

        if not os.path.isdir(target):
            raise DirectoryNotFoundError(path)

        if self.sync_process:
            try:
                os.chdir(target)
            except OSError as e:
                raise translate_os_error(e, path)

        logger.debug("cwd %s -> %s", self.cwd, target)
        self.cwd = target
        return self.cwd
