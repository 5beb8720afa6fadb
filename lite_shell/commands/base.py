"""
Base utilities for command implementations.

This module provides common helper functions that command modules can use
to reduce code duplication and keep diagnostics consistent.
"""

from ..exceptions import FileSystemError, MissingOperandError
from ..process import Process


def write_error(process: Process, message: str, prefix_command: bool = True) -> int:
    """
    Write an error message to stderr.

    Args:
        process: The process object
        message: The error message
        prefix_command: If True, prefix message with command name

    Returns:
        Exit code (always 1)
    """
    if prefix_command:
        process.stderr.write(f"{process.command}: {message}\n")
    else:
        process.stderr.write(f"{message}\n")
    return 1


def require_operand(process: Process) -> str:
    """
    Return the first argument, or raise if there is none.

    Extra arguments are ignored.

    Raises:
        MissingOperandError: reported by Process.execute as
            '<command>: missing operand'
    """
    if not process.args:
        raise MissingOperandError(process.command)
    return process.args[0]


def handle_filesystem_error(process: Process, error: FileSystemError) -> int:
    """
    Report a filesystem error as '<command>: <path>: <reason>'.

    Example:
        try:
            process.context.change_directory(path)
        except FileSystemError as e:
            return handle_filesystem_error(process, e)
    """
    write_error(process, str(error))
    return error.exit_code


__all__ = [
    'write_error',
    'require_operand',
    'handle_filesystem_error',
]
