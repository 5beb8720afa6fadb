"""Tests for ShellConfig and the command-line entry point."""

import io
import sys

import pytest

from lite_shell import cli
from lite_shell.config import DEFAULT_LOG_LEVEL, DEFAULT_PROMPT, ShellConfig, parse_log_level
from lite_shell.exceptions import ConfigError, ShellIOError


class TestShellConfig:
    """Tests for ShellConfig.from_env."""

    def test_defaults(self):
        config = ShellConfig.from_env({})
        assert config.prompt == DEFAULT_PROMPT == '$ '
        assert config.log_level == DEFAULT_LOG_LEVEL

    def test_prompt_from_env(self):
        assert ShellConfig.from_env({'LITE_SHELL_PROMPT': '% '}).prompt == '% '

    def test_log_level_from_env(self):
        config = ShellConfig.from_env({'LITE_SHELL_LOG_LEVEL': 'debug'})
        assert config.log_level == 'DEBUG'

    def test_invalid_log_level(self):
        with pytest.raises(ConfigError) as exc_info:
            ShellConfig.from_env({'LITE_SHELL_LOG_LEVEL': 'LOUD'})
        assert exc_info.value.key == 'LITE_SHELL_LOG_LEVEL'
        assert exc_info.value.exit_code == 2

    def test_parse_log_level_strips(self):
        assert parse_log_level(' info ') == 'INFO'


class TestMain:
    """Tests for cli.main."""

    def test_runs_until_exit(self, monkeypatch, capsys):
        monkeypatch.delenv('LITE_SHELL_PROMPT', raising=False)
        monkeypatch.delenv('LITE_SHELL_LOG_LEVEL', raising=False)
        monkeypatch.setattr(sys, 'stdin', io.StringIO('echo hi\nexit\n'))

        assert cli.main([]) == 0
        assert capsys.readouterr().out == '$ hi\n$ '

    def test_bad_log_level_flag(self, monkeypatch, capsys):
        monkeypatch.delenv('LITE_SHELL_LOG_LEVEL', raising=False)

        assert cli.main(['--log-level', 'LOUD']) == 2
        assert "--log-level: invalid value 'LOUD'" in capsys.readouterr().err

    def test_io_failure_exits_nonzero(self, monkeypatch, capsys):
        monkeypatch.delenv('LITE_SHELL_LOG_LEVEL', raising=False)

        def broken(self, stdin=None):
            raise ShellIOError('cannot read input')

        monkeypatch.setattr(cli.Shell, 'run_interactive', broken)

        assert cli.main([]) == 1
        assert 'lite-shell: cannot read input' in capsys.readouterr().err
