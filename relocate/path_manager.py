"""Working directory management for relocate.

This module provides the PathManager class which handles:
- Tracking the logical current working directory (the one ``pwd`` prints)
- Remembering the previous directory for ``cd -``
- Changing directory, with failures reported against the offending path
"""

import logging
import os
from typing import Mapping, Optional

from .exceptions import DirectoryAccessError, UnsetVariableError, translate_os_error

logger = logging.getLogger(__name__)


class PathManager:
    """Manages the working directory.

    Paths are resolved logically, as the shell does: ``..`` removes the
    previous component instead of following symbolic links.

    Attributes:
        cwd: Current working directory (logical, absolute)
        oldpwd: Previous working directory, or None
    """

    def __init__(self, initial_cwd: Optional[str] = None, oldpwd: Optional[str] = None):
        """Initialize the path manager.

        Args:
            initial_cwd: Initial working directory (default: os.getcwd())
            oldpwd: Previous working directory (default: unset)
        """
        self.cwd = os.path.normpath(initial_cwd) if initial_cwd else os.getcwd()
        self.oldpwd = oldpwd or None

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "PathManager":
        """Create a path manager from PWD and OLDPWD.

        PWD is trusted only if it names the process's actual working directory.
        """
        cwd = os.getcwd()
        pwd = env.get("PWD")
        if pwd and os.path.isabs(pwd):
            try:
                if os.path.samefile(pwd, cwd):
                    cwd = pwd
            except OSError as e:
                logger.debug("Ignoring PWD %s: %s", pwd, e)
        return cls(initial_cwd=cwd, oldpwd=env.get("OLDPWD"))

    def resolve_path(self, path: str) -> str:
        """Resolve a relative or absolute path to a normalized absolute path.

        Args:
            path: Path to resolve (can be relative or absolute)

        Returns:
            Absolute path

        Examples:
            resolve_path('/foo/bar') -> '/foo/bar'
            resolve_path('bar') with cwd='/foo' -> '/foo/bar'
            resolve_path('../baz') with cwd='/foo/bar' -> '/foo/baz'
        """
        if not path:
            path = self.cwd
        if path.startswith("/"):
            return os.path.normpath(path)
        return os.path.normpath(os.path.join(self.cwd, path))

    def change_directory(self, path: str) -> str:
        """Change the working directory of this process.

        Args:
            path: New directory (relative paths are resolved against cwd)

        Returns:
            The new logical working directory

        Raises:
            DirectoryAccessError: If path is missing, not a directory, or not enterable
        """
        target = self.resolve_path(path)
        if not os.path.isdir(target):
            if os.path.exists(target):
                raise DirectoryAccessError(target, "Not a directory")
            raise DirectoryAccessError(target)
        try:
            os.chdir(target)
        except OSError as e:
            raise translate_os_error(e, target)

        self.oldpwd = self.cwd
        self.cwd = target
        logger.debug("Changed directory to %s", target)
        return target

    def previous_directory(self) -> str:
        """Return the directory ``cd -`` would go to.

        Raises:
            UnsetVariableError: If there is no previous directory
        """
        if not self.oldpwd:
            raise UnsetVariableError("OLDPWD")
        return self.oldpwd

    def get_cwd(self) -> str:
        """Get the current working directory."""
        return self.cwd
