"""
Command classification.

Every command token maps to exactly one of three variants:
- BuiltinCommand: one of the fixed built-in names
- ExecutableCommand: an executable found on PATH
- UnrecognizedCommand: anything else, keeping the text for the error message

Built-in names always win over PATH, so a program called 'echo' on PATH can
never shadow the built-in.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Union

from .executable_locator import find_executable, search_path

logger = logging.getLogger(__name__)


class Builtin(Enum):
    """The closed set of built-in commands, valued by their names."""

    EXIT = 'exit'
    ECHO = 'echo'
    TYPE = 'type'
    PWD = 'pwd'
    CD = 'cd'

    @classmethod
    def lookup(cls, name: str) -> Optional['Builtin']:
        """Return the member called name (case-sensitive), or None."""
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True)
class BuiltinCommand:
    builtin: Builtin

    @property
    def name(self) -> str:
        return self.builtin.value


@dataclass(frozen=True)
class ExecutableCommand:
    """An external program resolved to a filesystem location."""

    path: str

    @property
    def name(self) -> str:
        """Invocation name: the stem of the final path segment."""
        return os.path.splitext(os.path.basename(self.path))[0]


@dataclass(frozen=True)
class UnrecognizedCommand:
    text: str

    @property
    def name(self) -> str:
        return self.text


Command = Union[BuiltinCommand, ExecutableCommand, UnrecognizedCommand]


class CommandClassifier:
    """
    Classifies command tokens against built-ins, then PATH.

    The environment mapping is held by reference and PATH is read from it on
    every call, so changes made between commands are seen immediately.

    Example:
        >>> classifier = CommandClassifier({'PATH': '/usr/bin'})
        >>> classifier.classify('echo')
        BuiltinCommand(builtin=<Builtin.ECHO: 'echo'>)
    """

    def __init__(self, env: Optional[Mapping[str, str]] = None):
        self.env = env if env is not None else os.environ

    def classify(self, token: str) -> Command:
        """
        Classify a single command token.

        Args:
            token: The command word as typed

        Returns:
            BuiltinCommand, ExecutableCommand or UnrecognizedCommand
        """
        builtin = Builtin.lookup(token)
        if builtin is not None:
            return BuiltinCommand(builtin)

        path = find_executable(token, search_path(self.env), self.env)
        if path is not None:
            return ExecutableCommand(path)

        logger.debug("unrecognized command %r", token)
        return UnrecognizedCommand(token)
