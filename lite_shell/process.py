"""Process class for a single command execution"""

import logging
from typing import List, Optional, Callable

from .context import CommandContext
from .exceptions import CommandNotFoundError, ShellError, ShellIOError
from .exit_codes import EXIT_CODE_FAILURE
from .streams import OutputStream, ErrorStream

logger = logging.getLogger(__name__)


class Process:
    """Represents one command with its arguments, streams and context"""

    def __init__(
        self,
        command: str,
        args: List[str],
        stdout: Optional[OutputStream] = None,
        stderr: Optional[ErrorStream] = None,
        executor: Optional[Callable[['Process'], int]] = None,
        context: Optional[CommandContext] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name as typed
            args: Command arguments
            stdout: Output stream (default: in-memory buffer)
            stderr: Error stream (default: in-memory buffer)
            executor: Callable that executes the command and returns a status
            context: CommandContext with the shell state
        """
        self.command = command
        self.args = args
        self.stdout = stdout or OutputStream.to_buffer()
        self.stderr = stderr or ErrorStream.to_buffer()
        self.executor = executor
        self.context = context if context is not None else CommandContext()

        self.exit_code = 0

    @property
    def cwd(self) -> str:
        """Current working directory from context."""
        return self.context.cwd

    def execute(self) -> int:
        """
        Execute the process

        Per-command ShellErrors are reported on stderr as a one-line
        diagnostic. ShellIOError is a channel failure and propagates.

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        if self.executor is None:
            error = CommandNotFoundError(self.command)
            self.stderr.write(f"{error}\n")
            self.exit_code = error.exit_code
            return self.exit_code

        try:
            self.exit_code = self.executor(self)
        except ShellIOError:
            raise
        except ShellError as e:
            self.stderr.write(f"{e}\n")
            self.exit_code = e.exit_code
        except Exception as e:
            logger.exception("unexpected failure in %r", self)
            self.stderr.write(f"Error executing '{self.command}': {e}\n")
            self.exit_code = EXIT_CODE_FAILURE

        self.stdout.flush()
        self.stderr.flush()

        return self.exit_code

    def get_stdout(self) -> Optional[str]:
        """Get captured stdout contents"""
        return self.stdout.get_value()

    def get_stderr(self) -> Optional[str]:
        """Get captured stderr contents"""
        return self.stderr.get_value()

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
