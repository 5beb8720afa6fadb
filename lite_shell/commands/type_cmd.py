"""
TYPE command - describe how a name would be interpreted.

Note: Module name is type_cmd.py because 'type' is a Python builtin.
"""

from ..classifier import Builtin, BuiltinCommand, ExecutableCommand
from ..process import Process
from . import register_command
from .base import require_operand


@register_command(Builtin.TYPE)
def cmd_type(process: Process) -> int:
    """
    Report whether a name is a built-in, an executable on PATH, or unknown

    Usage: type name

    Examples:
        type echo     # echo is a shell builtin
        type ls       # ls is /usr/bin/ls
        type nope     # nope: not found
    """
    name = require_operand(process)
    command = process.context.classify(name)

    if isinstance(command, BuiltinCommand):
        process.stdout.write(f"{name} is a shell builtin\n")
        return 0

    if isinstance(command, ExecutableCommand):
        process.stdout.write(f"{name} is {command.path}\n")
        return 0

    process.stdout.write(f"{name}: not found\n")
    return 1
