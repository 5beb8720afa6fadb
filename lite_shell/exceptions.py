"""
Custom exception hierarchy for lite-shell.

This module defines a structured exception hierarchy that provides:
- Clear error categorization
- Consistent one-line diagnostics
- Proper exit codes

Per-command errors (missing operand, bad cd target) are caught by
Process.execute and reported on stderr. ShellIOError is the only error that
escapes the dispatch loop: it means the interactive channel itself is broken.

Usage:
    from lite_shell.exceptions import DirectoryNotFoundError

    try:
        context.path_manager.change_directory(path)
    except DirectoryNotFoundError as e:
        process.stderr.write(f"cd: {e}\\n")
        return e.exit_code
"""

import errno
from typing import Optional

from .exit_codes import EXIT_CODE_NOT_FOUND


class ShellError(Exception):
    """
    Base class for all shell errors.

    All custom exceptions should inherit from this class.
    This allows catching all shell-specific errors with a single except clause.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


class ConfigError(ShellError):
    """
    Raised when a configuration value cannot be used.

    Example:
        raise ConfigError("LITE_SHELL_LOG_LEVEL", "LOUD")
    """

    def __init__(self, key: str, value: str, message: Optional[str] = None):
        if message is None:
            message = f"{key}: invalid value '{value}'"
        super().__init__(message, exit_code=2)
        self.key = key
        self.value = value


# =============================================================================
# File System Errors
# =============================================================================

class FileSystemError(ShellError):
    """
    Base class for filesystem-related errors.

    Raised when a path given to a built-in cannot be used.
    """

    def __init__(self, message: str, path: Optional[str] = None, exit_code: int = 1):
        super().__init__(message, exit_code)
        self.path = path


class DirectoryNotFoundError(FileSystemError):
    """
    Raised when a directory target does not exist or is not a directory.

    Example:
        raise DirectoryNotFoundError("/definitely/not/a/path")
    """

    def __init__(self, path: str, message: Optional[str] = None):
        if message is None:
            message = f"{path}: No such file or directory"
        super().__init__(message, path, exit_code=1)


class PermissionDeniedError(FileSystemError):
    """
    Raised when permission is denied for a filesystem operation.

    Example:
        raise PermissionDeniedError("/root")
    """

    def __init__(self, path: str, message: Optional[str] = None):
        if message is None:
            message = f"{path}: Permission denied"
        super().__init__(message, path, exit_code=1)


# =============================================================================
# Command Errors
# =============================================================================

class CommandError(ShellError):
    """
    Base class for command-related errors.

    Raised when command execution fails.
    """

    def __init__(self, command: str, message: str, exit_code: int = 1):
        super().__init__(message, exit_code)
        self.command = command


class CommandNotFoundError(CommandError):
    """
    Raised when a command is neither a built-in nor found on PATH.

    Example:
        raise CommandNotFoundError("nonexistent")
    """

    def __init__(self, command: str):
        message = f"{command}: not found"
        super().__init__(command, message, exit_code=EXIT_CODE_NOT_FOUND)


class MissingOperandError(CommandError):
    """
    Raised when a built-in that requires an argument gets none.

    Example:
        raise MissingOperandError("cd")
    """

    def __init__(self, command: str):
        message = f"{command}: missing operand"
        super().__init__(command, message, exit_code=1)


# =============================================================================
# Channel Errors
# =============================================================================

class ShellIOError(ShellError):
    """
    Raised when the shell's own I/O channel fails.

    Covers reading input, writing or flushing output, and spawning a
    resolved executable. Unlike the other errors this one ends the session.

    Example:
        raise ShellIOError("cannot read input", cause=exc)
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message, exit_code=1)
        self.cause = cause


# =============================================================================
# Utility Functions
# =============================================================================

def translate_os_error(error: OSError, path: Optional[str] = None) -> FileSystemError:
    """
    Translate an OSError raised by the os module into a FileSystemError.

    Args:
        error: The OSError to translate
        path: Optional path that caused the error (as the user typed it)

    Returns:
        Specific FileSystemError subclass

    Example:
        try:
            os.chdir(target)
        except OSError as e:
            raise translate_os_error(e, path)
    """
    display = path if path is not None else (error.filename or "unknown")

    if error.errno in (errno.ENOENT, errno.ENOTDIR):
        return DirectoryNotFoundError(display)

    if error.errno in (errno.EACCES, errno.EPERM):
        return PermissionDeniedError(display)

    return FileSystemError(f"{display}: {error.strerror or error}", path=display)
