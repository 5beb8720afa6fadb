"""
ECHO command - print arguments.
"""

from ..classifier import Builtin
from ..process import Process
from . import register_command


@register_command(Builtin.ECHO)
def cmd_echo(process: Process) -> int:
    """
    Print arguments separated by single spaces, then a newline

    Usage: echo [arg...]
    """
    process.stdout.write(' '.join(process.args) + '\n')
    return 0
