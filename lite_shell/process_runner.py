"""
ProcessRunner - Abstract interface for running external programs.

The dispatcher never talks to the operating system directly. It asks a
ProcessRunner to spawn a resolved executable, wait for it and hand back its
captured output. SubprocessRunner does this with the subprocess module;
tests substitute a runner that returns canned output.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Mapping, Optional

from .exceptions import ShellIOError

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of a finished external program."""

    exit_code: int
    stdout: bytes = b''
    stderr: bytes = b''


class ProcessRunner(ABC):
    """
    Abstract interface for external process execution.

    Implementations must block until the program has finished. There is no
    timeout and no cancellation.
    """

    @abstractmethod
    def run(
        self,
        path: str,
        argv: List[str],
        cwd: Optional[str] = None,
        env: Optional[Mapping[str, str]] = None
    ) -> RunResult:
        """
        Run an external program to completion.

        Args:
            path: Resolved location of the executable
            argv: Full argument vector; argv[0] is the invocation name
            cwd: Working directory for the child
            env: Environment for the child

        Returns:
            RunResult with exit status and captured stdout/stderr

        Raises:
            ShellIOError: If the program cannot be started
        """
        pass


class SubprocessRunner(ProcessRunner):
    """Runs programs with subprocess.run, capturing both output streams."""

    def run(
        self,
        path: str,
        argv: List[str],
        cwd: Optional[str] = None,
        env: Optional[Mapping[str, str]] = None
    ) -> RunResult:
        logger.debug("spawning %s argv=%r cwd=%s", path, argv, cwd)
        try:
            completed = subprocess.run(
                argv,
                executable=path,
                cwd=cwd,
                env=dict(env) if env is not None else None,
                stdin=subprocess.DEVNULL,
                capture_output=True,
            )
        except OSError as e:
            raise ShellIOError(f"cannot execute {path}", cause=e)

        logger.debug("%s exited with status %d", path, completed.returncode)
        return RunResult(
            exit_code=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
