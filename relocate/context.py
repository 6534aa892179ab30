"""
CommandContext - Encapsulates all context needed for command execution.

This module provides the CommandContext dataclass that gives commands the
alias store, the navigation state and the working directory without tying
them to the command-line entry point.
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional
import os

from .alias_store import AliasStore
from .composer import PathComposer
from .config import RelocateConfig, default_store_path
from .navigation import NavigationState
from .path_manager import PathManager
from .resolver import PrefixResolver


@dataclass
class CommandContext:
    """
    Encapsulates all context needed for command execution.

    This provides commands with access to:
    - Settings
    - The alias store
    - The navigation state (commands replace it with updated copies)
    - The working directory

    Example:
        >>> ctx = CommandContext.from_env({'RELOCATIONS': '/tmp/relocations'})
        >>> ctx.store.path
        '/tmp/relocations'
    """

    config: RelocateConfig = field(default_factory=lambda: RelocateConfig(default_store_path()))
    store: Optional[AliasStore] = None
    state: NavigationState = field(default_factory=NavigationState)
    paths: PathManager = field(default_factory=PathManager)
    env: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if self.store is None:
            self.store = AliasStore(self.config.store_path)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None,
                 config: Optional[RelocateConfig] = None) -> "CommandContext":
        """
        Build a context from an environment mapping (default: os.environ).

        Raises:
            ConfigError: If a setting in env is invalid
        """
        env = dict(os.environ if env is None else env)
        config = config or RelocateConfig.from_env(env)
        return cls(
            config=config,
            store=AliasStore(config.store_path),
            state=NavigationState.from_env(env),
            paths=PathManager.from_env(env),
            env=env,
        )

    @property
    def cwd(self) -> str:
        """Current working directory (logical)."""
        return self.paths.cwd

    def resolve_path(self, path: str) -> str:
        """
        Resolve relative paths to absolute paths.

        Examples:
            >>> ctx = CommandContext(paths=PathManager('/home/user'))
            >>> ctx.resolve_path('../data')
            '/home/data'
        """
        return self.paths.resolve_path(path)

    def composer(self) -> PathComposer:
        """Return a PathComposer using this context's store and case setting."""
        return PathComposer(self.store, PrefixResolver(allow_caseless=self.config.ignore_case))

    def __repr__(self):
        """String representation for debugging"""
        return (
            f"CommandContext(cwd={self.cwd!r}, "
            f"store={self.store.path!r}, "
            f"state={self.state!r})"
        )
