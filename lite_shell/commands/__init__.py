"""
Built-in command implementations.

Each built-in lives in its own module and registers its handler against a
member of the closed Builtin enumeration. A handler takes a Process and
returns an exit status.
"""

import importlib
from typing import Callable, Dict

from ..classifier import Builtin

BUILTINS: Dict[Builtin, Callable] = {}

_COMMAND_MODULES = ('cd', 'echo', 'exit_cmd', 'pwd', 'type_cmd')


def register_command(builtin: Builtin):
    """
    Decorator that binds a handler to a Builtin member.

    Example:
        @register_command(Builtin.PWD)
        def cmd_pwd(process): ...
    """
    def decorator(func: Callable) -> Callable:
        BUILTINS[builtin] = func
        return func
    return decorator


def load_all_commands():
    """Import every command module so that BUILTINS is populated."""
    for module_name in _COMMAND_MODULES:
        importlib.import_module(f'{__name__}.{module_name}')

    missing = [b.value for b in Builtin if b not in BUILTINS]
    if missing:
        raise RuntimeError(f"built-ins without a handler: {', '.join(missing)}")
