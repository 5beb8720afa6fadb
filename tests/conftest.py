"""
Pytest configuration and shared fixtures for lite-shell tests.

This module provides reusable test fixtures for:
- A fake process runner that returns canned output
- Temporary PATH directories holding executable scripts
- Shell instances writing to in-memory buffers
"""

import os
import stat
import sys
from typing import List, Mapping, Optional

import pytest

from lite_shell.process_runner import ProcessRunner, RunResult


# ============================================================================
# Fake Process Runner
# ============================================================================

class FakeProcessRunner(ProcessRunner):
    """
    Process runner that records calls instead of spawning programs.

    Every call returns the configured RunResult.
    """

    def __init__(self, result: Optional[RunResult] = None):
        self.result = result or RunResult(exit_code=0)
        self.calls: List[dict] = []

    def run(self, path: str, argv: List[str], cwd: Optional[str] = None,
            env: Optional[Mapping[str, str]] = None) -> RunResult:
        self.calls.append({'path': path, 'argv': list(argv), 'cwd': cwd, 'env': env})
        return self.result


posix_only = pytest.mark.skipif(sys.platform == 'win32',
                                reason="relies on POSIX execute permissions")


def make_executable(directory, name: str, body: str = "#!/bin/sh\nexit 0\n"):
    """Create an executable script in directory and return its path as str."""
    path = directory / name
    path.write_text(body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(path)


def make_plain_file(directory, name: str, body: str = "data\n"):
    """Create a non-executable file in directory and return its path as str."""
    path = directory / name
    path.write_text(body)
    path.chmod(stat.S_IRUSR | stat.S_IWUSR)
    return str(path)


# ============================================================================
# Pytest Fixtures
# ============================================================================

@pytest.fixture
def fake_runner():
    """
    Provides a FakeProcessRunner.

    Example:
        def test_spawn(fake_runner):
            fake_runner.result = RunResult(0, b'hi\\n')
    """
    return FakeProcessRunner()


@pytest.fixture
def bin_dirs(tmp_path):
    """
    Provides two empty directories to use as PATH entries.

    Returns:
        tuple: (first, second) pathlib.Path objects, in search order
    """
    first = tmp_path / "bin1"
    second = tmp_path / "bin2"
    first.mkdir()
    second.mkdir()
    return first, second


@pytest.fixture
def work_dir(tmp_path):
    """
    Provides a directory tree for cd/pwd tests.

    Layout:
        work/
        work/sub/
        work/sub/deeper/
        work/file.txt
    """
    work = tmp_path / "work"
    (work / "sub" / "deeper").mkdir(parents=True)
    (work / "file.txt").write_text("not a directory")
    return work


@pytest.fixture
def make_shell(bin_dirs, work_dir, fake_runner):
    """
    Factory for shells that write to buffers and never touch the process cwd.

    Example:
        def test_echo(make_shell):
            shell = make_shell()
            shell.execute("echo hi")
            assert shell.stdout.get_value() == "hi\\n"
    """
    from lite_shell.shell import Shell
    from lite_shell.streams import ErrorStream, OutputStream

    def factory(env=None, cwd=None, runner=None):
        if env is None:
            env = {
                'PATH': os.pathsep.join(str(d) for d in bin_dirs),
                'HOME': str(work_dir),
            }
        return Shell(
            initial_env=env,
            initial_cwd=str(cwd or work_dir),
            runner=runner or fake_runner,
            stdout=OutputStream.to_buffer(),
            stderr=ErrorStream.to_buffer(),
            sync_process_cwd=False,
        )

    return factory


@pytest.fixture
def shell(make_shell):
    """Provides a shell built with the default make_shell settings."""
    return make_shell()
