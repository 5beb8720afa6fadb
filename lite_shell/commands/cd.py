"""
CD command - change the working directory.
"""

from ..classifier import Builtin
from ..exceptions import FileSystemError
from ..process import Process
from . import register_command
from .base import handle_filesystem_error, require_operand


@register_command(Builtin.CD)
def cmd_cd(process: Process) -> int:
    """
    Change the shell working directory

    Usage: cd path

    Relative paths are resolved against the current directory and '~' stands
    for HOME. On failure the working directory is left unchanged.
    """
    path = require_operand(process)
    try:
        process.context.change_directory(path)
    except FileSystemError as e:
        return handle_filesystem_error(process, e)
    return 0
