"""
Built-in shell commands registry.

The handlers live in the commands/ directory. This module loads them and
exposes the lookup used by the dispatcher.
"""

from typing import Callable, Optional

from .classifier import Builtin
from .commands import load_all_commands, BUILTINS as COMMANDS

# Load all command modules to populate the registry
load_all_commands()

BUILTINS = COMMANDS


def get_builtin(builtin: Builtin) -> Optional[Callable]:
    """
    Get a built-in command executor.

    Args:
        builtin: The Builtin member to look up

    Returns:
        The command function, or None if not found

    Example:
        >>> executor = get_builtin(Builtin.ECHO)
        >>> if executor:
        ...     executor(process)
    """
    return BUILTINS.get(builtin)
