"""
Pytest configuration and shared fixtures for relocate tests.

This module provides reusable test fixtures for:
- Temporary directory trees to resolve prefixes against
- Alias stores backed by temporary files
- Command contexts and processes with captured output
"""

import os

import pytest

from relocate.alias_store import AliasStore
from relocate.config import RelocateConfig
from relocate.context import CommandContext
from relocate.navigation import NavigationState
from relocate.path_manager import PathManager
from relocate.process import Process


# ============================================================================
# Helper Functions
# ============================================================================

def make_dirs(base, *names):
    """Create base and subdirectories (nested with '/') under it; return base."""
    os.makedirs(str(base), exist_ok=True)
    for name in names:
        os.makedirs(os.path.join(str(base), name), exist_ok=True)
    return base


# ============================================================================
# Pytest Fixtures
# ============================================================================

@pytest.fixture
def store_path(tmp_path):
    """
    Provides the path of a not-yet-existing store file.

    Returns:
        str: Path inside a temporary directory
    """
    return str(tmp_path / "relocations")


@pytest.fixture
def store(store_path):
    """
    Provides an empty AliasStore backed by a temporary file.

    Example:
        def test_define(store):
            store.upsert('src', '/tmp/src')
            assert store.lookup('src') == '/tmp/src'
    """
    return AliasStore(store_path)


@pytest.fixture
def tree(tmp_path):
    """
    Provides a directory tree for prefix resolution.

    Layout:
        projects/
            alpha/  alpine/  Beta/  v1.2.3/
            alpha/src/main/  alpha/src/test/  alpha/docs/
        notes.txt  (a file, never matched)

    Returns:
        str: Path of the tree root
    """
    root = tmp_path / "tree"
    make_dirs(
        root,
        "projects/alpha/src/main",
        "projects/alpha/src/test",
        "projects/alpha/docs",
        "projects/alpine",
        "projects/Beta",
        "projects/v1.2.3",
    )
    (root / "notes.txt").write_text("not a directory")
    return str(root)


@pytest.fixture
def context(store, tree, monkeypatch):
    """
    Provides a CommandContext whose working directory is the tree root.

    The process's real working directory is restored after the test.
    """
    monkeypatch.chdir(tree)
    return CommandContext(
        config=RelocateConfig(store_path=store.path),
        store=store,
        state=NavigationState(),
        paths=PathManager(initial_cwd=tree),
    )


@pytest.fixture
def make_process(context):
    """
    Provides a factory for processes running a registered command.

    Example:
        def test_list(make_process):
            process = make_process('list')
            assert process.execute() == 0
    """
    from relocate.commands import get_builtin

    def factory(command, *args, name=None):
        return Process(
            command=name or command,
            args=list(args),
            executor=get_builtin(command),
            context=context,
        )

    return factory
