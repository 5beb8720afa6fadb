"""
PWD command - print working directory.
"""

from ..classifier import Builtin
from ..process import Process
from . import register_command


@register_command(Builtin.PWD)
def cmd_pwd(process: Process) -> int:
    """
    Print working directory

    Usage: pwd

    Arguments are ignored.
    """
    process.stdout.write(f"{process.context.cwd}\n")
    return 0
