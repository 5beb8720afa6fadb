"""
CommandContext - Encapsulates all context needed for command execution.

This module provides the CommandContext dataclass that decouples commands
from the Shell class, making commands testable without a running shell or
the real process environment.
"""

from dataclasses import dataclass, field
from typing import MutableMapping, Optional, TYPE_CHECKING

from .path_manager import PathManager

if TYPE_CHECKING:
    from .classifier import Command, CommandClassifier
    from .process_runner import ProcessRunner


@dataclass
class CommandContext:
    """
    Encapsulates all context needed for command execution.

    This provides commands with access to:
    - The shell state (working directory, via path_manager)
    - Environment variables (PATH, HOME)
    - The classifier, for 'type'
    - The process runner, for external programs

    Commands should use this context instead of direct Shell access.

    Example:
        >>> from lite_shell.context import CommandContext
        >>> from lite_shell.path_manager import PathManager
        >>> ctx = CommandContext(path_manager=PathManager('/tmp', sync_process=False))
        >>> ctx.cwd
        '/tmp'
        >>> ctx.resolve_path('file.txt')
        '/tmp/file.txt'
    """

    path_manager: PathManager = field(default_factory=PathManager)
    env: MutableMapping[str, str] = field(default_factory=dict)
    classifier: Optional['CommandClassifier'] = None
    runner: Optional['ProcessRunner'] = None

    @property
    def cwd(self) -> str:
        """Current working directory of the shell."""
        return self.path_manager.cwd

    def resolve_path(self, path: str) -> str:
        """
        Resolve relative paths to absolute paths against the shell cwd.

        Examples:
            >>> ctx = CommandContext(path_manager=PathManager('/home/user', sync_process=False))
            >>> ctx.resolve_path('../data')
            '/home/data'
        """
        return self.path_manager.resolve_path(path)

    def change_directory(self, path: str) -> str:
        """Change the shell cwd; raises DirectoryNotFoundError on a bad target."""
        return self.path_manager.change_directory(path, self.env)

    def classify(self, token: str) -> 'Command':
        """Classify a token, building a classifier over env if none was given."""
        if self.classifier is None:
            from .classifier import CommandClassifier
            self.classifier = CommandClassifier(self.env)
        return self.classifier.classify(token)

    def __repr__(self):
        """String representation for debugging"""
        return (
            f"CommandContext(cwd={self.cwd!r}, "
            f"env_vars={len(self.env)})"
        )
