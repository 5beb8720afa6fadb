"""
EXIT command - leave the shell.

Note: Module name is exit_cmd.py to avoid shadowing the exit() builtin.
"""

from ..classifier import Builtin
from ..exit_codes import EXIT_CODE_EXIT
from ..process import Process
from . import register_command


@register_command(Builtin.EXIT)
def cmd_exit(process: Process) -> int:
    """
    Stop the shell's read loop

    Usage: exit

    Arguments are ignored. The special return code tells the dispatcher to
    terminate after this command.
    """
    return EXIT_CODE_EXIT
