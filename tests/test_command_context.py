"""
Tests for CommandContext.

This module tests the CommandContext dataclass that encapsulates
command execution context.
"""

import os

import pytest

from relocate.config import RelocateConfig
from relocate.context import CommandContext
from relocate.exceptions import ConfigError
from relocate.navigation import NavigationState
from relocate.path_manager import PathManager


class TestCommandContextCreation:
    """Test CommandContext creation and initialization"""

    def test_default_creation(self, tmp_path, monkeypatch):
        """Test creating context with default values"""
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.delenv("RELOCATIONS", raising=False)
        ctx = CommandContext()
        assert ctx.store.path == os.path.join(str(tmp_path), ".relocations")
        assert ctx.state == NavigationState()
        assert ctx.env == {}

    def test_store_follows_config(self, tmp_path):
        """Test the store is created from the configured path"""
        path = str(tmp_path / "aliases")
        ctx = CommandContext(config=RelocateConfig(store_path=path))
        assert ctx.store.path == path

    def test_cwd_from_paths(self):
        """Test cwd is the path manager's logical directory"""
        ctx = CommandContext(paths=PathManager(initial_cwd="/home/user"))
        assert ctx.cwd == "/home/user"


class TestFromEnv:
    """Test CommandContext.from_env()"""

    def test_reads_store_and_state(self, tmp_path, monkeypatch):
        """Test settings and navigation state come from the environment"""
        monkeypatch.chdir(tmp_path)
        env = {
            "RELOCATIONS": str(tmp_path / "aliases"),
            "rp": "/pending",
            "r1": "/older",
            "RELOCATE_IGNORE_CASE": "y",
        }
        ctx = CommandContext.from_env(env)
        assert ctx.store.path == str(tmp_path / "aliases")
        assert ctx.state.pending == "/pending"
        assert ctx.state.pending_1_back == "/older"
        assert ctx.config.ignore_case
        assert ctx.env == env

    def test_env_is_copied(self, tmp_path, monkeypatch):
        """Test later changes to the mapping don't leak into the context"""
        monkeypatch.chdir(tmp_path)
        env = {"RELOCATIONS": str(tmp_path / "aliases")}
        ctx = CommandContext.from_env(env)
        env["rp"] = "/later"
        assert "rp" not in ctx.env

    def test_invalid_setting(self, tmp_path, monkeypatch):
        """Test a bad y/n setting is reported"""
        monkeypatch.chdir(tmp_path)
        with pytest.raises(ConfigError):
            CommandContext.from_env({"RELOCATE_MODIFY_ENVIRONMENT": "sometimes"})

    def test_explicit_config_wins(self, tmp_path, monkeypatch):
        """Test a config passed in is used instead of the environment's"""
        monkeypatch.chdir(tmp_path)
        config = RelocateConfig(store_path=str(tmp_path / "mine"))
        ctx = CommandContext.from_env({"RELOCATIONS": "/elsewhere"}, config=config)
        assert ctx.store.path == str(tmp_path / "mine")


class TestPathResolution:
    """Test path resolution methods"""

    def test_resolve_absolute_path(self):
        """Test resolving absolute paths"""
        ctx = CommandContext(paths=PathManager(initial_cwd="/home/user"))
        assert ctx.resolve_path("/tmp/file.txt") == "/tmp/file.txt"
        assert ctx.resolve_path("/") == "/"

    def test_resolve_relative_path(self):
        """Test resolving relative paths"""
        ctx = CommandContext(paths=PathManager(initial_cwd="/home/user"))
        assert ctx.resolve_path("docs/readme.md") == "/home/user/docs/readme.md"
        assert ctx.resolve_path("../../tmp") == "/tmp"


class TestComposer:
    """Test composer() method"""

    def test_uses_context_store(self, context):
        """Test the composer reads aliases from the context's store"""
        assert context.composer().store is context.store

    def test_case_setting(self, context):
        """Test the caseless tier follows the configuration"""
        assert not context.composer().resolver.allow_caseless
        context.config.ignore_case = True
        assert context.composer().resolver.allow_caseless

    def test_repr(self, context):
        """Test repr names the working directory and store"""
        text = repr(context)
        assert context.cwd in text
        assert context.store.path in text
