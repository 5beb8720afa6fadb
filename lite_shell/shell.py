"""
Shell - the read, classify, execute, print loop.

The Shell owns the session state (working directory, environment, last exit
status) and dispatches each input line:

- built-in names run their handler from the registry
- executables found on PATH are spawned through the ProcessRunner and their
  captured output is relayed to the shell's own streams
- anything else is reported as '<name>: not found'

Only the exit built-in (or end of input) stops the loop. Per-command errors
become one-line diagnostics; ShellIOError propagates to the caller.
"""

import logging
import os
import sys
from enum import Enum
from typing import Callable, Dict, List, MutableMapping, Optional, TextIO

from .builtins import get_builtin
from .classifier import (
    BuiltinCommand,
    Command,
    CommandClassifier,
    ExecutableCommand,
)
from .config import ShellConfig
from .context import CommandContext
from .exceptions import ShellIOError
from .exit_codes import EXIT_CODE_EXIT, EXIT_CODE_SUCCESS
from .path_manager import PathManager
from .process import Process
from .process_runner import ProcessRunner, SubprocessRunner
from .streams import ErrorStream, OutputStream

logger = logging.getLogger(__name__)


class ShellStatus(Enum):
    RUNNING = 'running'
    TERMINATED = 'terminated'


class Shell:
    """
    Interactive shell session.

    Attributes:
        env: Shell environment variables (PATH is read from here on every lookup)
        path_manager: Working directory state
        classifier: Maps command tokens to Command variants
        runner: Spawns external programs
        status: RUNNING until exit or end of input
        last_exit_code: Status of the most recent command
    """

    def __init__(
        self,
        initial_env: Optional[Dict[str, str]] = None,
        initial_cwd: Optional[str] = None,
        runner: Optional[ProcessRunner] = None,
        stdout: Optional[OutputStream] = None,
        stderr: Optional[ErrorStream] = None,
        config: Optional[ShellConfig] = None,
        sync_process_cwd: bool = True,
    ):
        """
        Initialize a shell session.

        Args:
            initial_env: Environment variables, copied (default: os.environ itself,
                so PATH changes made while the shell runs are seen)
            initial_cwd: Starting directory (default: process cwd)
            runner: ProcessRunner for external programs (default: SubprocessRunner)
            stdout: Output stream (default: sys.stdout)
            stderr: Error stream (default: sys.stderr)
            config: ShellConfig (default: built-in defaults)
            sync_process_cwd: Whether cd also changes the process cwd
        """
        self.env: MutableMapping[str, str] = (
            os.environ if initial_env is None else dict(initial_env)
        )
        self.path_manager = PathManager(initial_cwd, sync_process=sync_process_cwd)
        self.classifier = CommandClassifier(self.env)
        self.runner = runner or SubprocessRunner()
        self.stdout = stdout or OutputStream.to_stdout()
        self.stderr = stderr or ErrorStream.to_stderr()
        self.config = config or ShellConfig()

        self.context = CommandContext(
            path_manager=self.path_manager,
            env=self.env,
            classifier=self.classifier,
            runner=self.runner,
        )

        self.status = ShellStatus.RUNNING
        self.last_exit_code = EXIT_CODE_SUCCESS

    @property
    def cwd(self) -> str:
        return self.path_manager.cwd

    @property
    def running(self) -> bool:
        return self.status is ShellStatus.RUNNING

    @staticmethod
    def parse_line(line: str) -> List[str]:
        """Split a line into words on runs of whitespace."""
        return line.split()

    def create_process(self, command: Command, token: str, args: List[str]) -> Process:
        """Bind a classified command to a Process with the right executor."""
        executor: Optional[Callable[[Process], int]] = None

        if isinstance(command, BuiltinCommand):
            executor = get_builtin(command.builtin)
        elif isinstance(command, ExecutableCommand):
            executor = self._external_executor(command)

        return Process(
            command=token,
            args=args,
            stdout=self.stdout,
            stderr=self.stderr,
            executor=executor,
            context=self.context,
        )

    @staticmethod
    def _external_executor(command: ExecutableCommand) -> Callable[[Process], int]:
        def run_external(process: Process) -> int:
            result = process.context.runner.run(
                command.path,
                [command.name] + process.args,
                cwd=process.cwd,
                env=process.context.env,
            )
            if result.stdout:
                process.stdout.write(result.stdout)
            if result.stderr:
                process.stderr.write(result.stderr)
            return result.exit_code
        return run_external

    def execute(self, line: str) -> int:
        """
        Execute one line of input.

        Args:
            line: Raw input line

        Returns:
            Exit status of the command (0 for an empty line or exit)

        Raises:
            ShellIOError: If output cannot be written or a program cannot be spawned
        """
        tokens = self.parse_line(line)
        if not tokens:
            return self.last_exit_code

        token, args = tokens[0], tokens[1:]
        command = self.classifier.classify(token)
        logger.debug("dispatch %r as %r args=%r", token, command, args)

        exit_code = self.create_process(command, token, args).execute()

        if exit_code == EXIT_CODE_EXIT:
            self.status = ShellStatus.TERMINATED
            exit_code = EXIT_CODE_SUCCESS

        self.last_exit_code = exit_code
        return exit_code

    def read_line(self, stdin: TextIO) -> Optional[str]:
        """
        Read one line of input.

        A line that cannot be decoded is reported and read as an empty line.

        Returns:
            The line, or None at end of input

        Raises:
            ShellIOError: If the input channel cannot be read
        """
        try:
            line = stdin.readline()
        except UnicodeDecodeError as e:
            logger.debug("undecodable input line: %s", e)
            self.stderr.write("lite-shell: input is not valid UTF-8\n")
            return "\n"
        except OSError as e:
            raise ShellIOError("cannot read input", cause=e)
        if not line:
            return None
        return line

    def run_interactive(self, stdin: Optional[TextIO] = None) -> int:
        """
        Run the prompt loop until exit or end of input.

        Args:
            stdin: Input stream (default: sys.stdin)

        Returns:
            Exit status of the last command
        """
        if stdin is None:
            stdin = sys.stdin

        while self.running:
            self.stdout.write(self.config.prompt)
            self.stdout.flush()

            line = self.read_line(stdin)
            if line is None:
                logger.debug("end of input")
                break

            self.execute(line)
            self.stdout.flush()
            self.stderr.flush()

        self.status = ShellStatus.TERMINATED
        return self.last_exit_code
