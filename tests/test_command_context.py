"""
Tests for CommandContext.

This module tests the CommandContext dataclass that encapsulates
command execution context.
"""

import pytest

from lite_shell.classifier import Builtin, BuiltinCommand, CommandClassifier, UnrecognizedCommand
from lite_shell.context import CommandContext
from lite_shell.exceptions import DirectoryNotFoundError
from lite_shell.path_manager import PathManager


class TestCommandContextCreation:
    """Test CommandContext creation and initialization"""

    def test_default_creation(self):
        """Test creating context with default values"""
        ctx = CommandContext()
        assert ctx.env == {}
        assert ctx.classifier is None
        assert ctx.runner is None

    def test_cwd_comes_from_path_manager(self, work_dir):
        """Test cwd reflects the path manager"""
        pm = PathManager(str(work_dir), sync_process=False)
        ctx = CommandContext(path_manager=pm)
        assert ctx.cwd == str(work_dir)

        pm.cwd = str(work_dir / "sub")
        assert ctx.cwd == str(work_dir / "sub")


class TestPathHandling:
    """Test path resolution and directory changes"""

    def test_resolve_relative_path(self, work_dir):
        ctx = CommandContext(path_manager=PathManager(str(work_dir), sync_process=False))
        assert ctx.resolve_path('file.txt') == str(work_dir / 'file.txt')

    def test_change_directory_uses_home_from_env(self, work_dir):
        """Test '~' is resolved with HOME from the context env"""
        ctx = CommandContext(
            path_manager=PathManager('/', sync_process=False),
            env={'HOME': str(work_dir)},
        )
        ctx.change_directory('~/sub')
        assert ctx.cwd == str(work_dir / 'sub')

    def test_change_directory_failure(self, work_dir):
        ctx = CommandContext(path_manager=PathManager(str(work_dir), sync_process=False))
        with pytest.raises(DirectoryNotFoundError):
            ctx.change_directory('missing')
        assert ctx.cwd == str(work_dir)


class TestClassify:
    """Test classification through the context"""

    def test_uses_given_classifier(self):
        classifier = CommandClassifier({'PATH': ''})
        ctx = CommandContext(classifier=classifier)
        assert ctx.classify('pwd') == BuiltinCommand(Builtin.PWD)

    def test_builds_classifier_from_env(self):
        """Test a classifier over env is created on first use"""
        ctx = CommandContext(env={'PATH': ''})
        assert ctx.classify('nonexistent_cmd_xyz') == UnrecognizedCommand('nonexistent_cmd_xyz')
        assert ctx.classifier is not None
        assert ctx.classifier.env is ctx.env


class TestRepresentation:

    def test_repr(self, work_dir):
        ctx = CommandContext(
            path_manager=PathManager(str(work_dir), sync_process=False),
            env={'A': '1', 'B': '2'},
        )
        text = repr(ctx)
        assert str(work_dir) in text
        assert 'env_vars=2' in text
