"""Compose a directory from a relocation alias and subdirectory prefixes."""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .alias_store import CURRENT_DIRECTORY_ALIAS, ROOT_ALIAS, AliasStore
from .exceptions import EXIT_ADVISORY, EXIT_OK, MisuseError, SubdirectoryNotFoundError
from .resolver import MatchStatus, PrefixResolver

logger = logging.getLogger(__name__)

PARENT_DIRECTORY = ".."


@dataclass
class Composition:
    """
    A composed directory.

    Attributes:
        path: The directory the alias and prefixes lead to
        advisories: One message per prefix that matched more than one subdirectory
    """

    path: str
    advisories: List[str] = field(default_factory=list)

    @property
    def ambiguous(self) -> bool:
        return bool(self.advisories)

    @property
    def exit_code(self) -> int:
        return EXIT_ADVISORY if self.ambiguous else EXIT_OK


def join_segment(directory: str, segment: str) -> str:
    """Append one path segment without doubling the separator.

    Examples:
        >>> join_segment("", "usr")
        '/usr'
        >>> join_segment("/home/me", "src")
        '/home/me/src'
    """
    return f"{directory.rstrip('/')}/{segment}"


class PathComposer:
    """Builds a directory from an alias followed by subdirectory prefixes.

    ``.`` stands for the current working directory and ``/`` for the root
    directory. Every other alias is looked up in the store. Each prefix is
    then resolved against the directory built so far, except ``..``, which
    is appended as-is.

    Example:
        composer = PathComposer(store)
        composer.compose('proj', ['sr', 'ma']).path  # '/home/me/proj/src/main'
    """

    def __init__(self, store: AliasStore, resolver: Optional[PrefixResolver] = None):
        self.store = store
        self.resolver = resolver or PrefixResolver()

    def starting_directory(self, alias: str, cwd: Optional[str] = None) -> str:
        """Return the directory an alias starts from.

        The root alias starts from an empty string so that appended segments
        don't produce ``//``.

        Raises:
            AliasNotFoundError: If alias is not a built-in and not in the store
        """
        if alias == CURRENT_DIRECTORY_ALIAS:
            return cwd if cwd is not None else os.getcwd()
        if alias == ROOT_ALIAS:
            return ""
        return self.store.lookup(alias)

    def compose(self, alias: str, prefixes: Sequence[str] = (),
                cwd: Optional[str] = None) -> Composition:
        """Compose the directory for alias and prefixes.

        Args:
            alias: Relocation alias, ``.`` or ``/``
            prefixes: Subdirectory prefixes, applied left to right
            cwd: Directory that ``.`` stands for (default: os.getcwd())

        Returns:
            Composition with the final path and any ambiguity advisories

        Raises:
            AliasNotFoundError: If alias is not defined
            SubdirectoryNotFoundError: If a prefix matches no subdirectory
            MisuseError: If the resolver was called incorrectly
        """
        directory = self.starting_directory(alias, cwd)
        advisories = []

        for prefix in prefixes:
            if prefix == PARENT_DIRECTORY:
                # Not clamped at the root: '/ ..' yields '/..'.
                directory = join_segment(directory, prefix)
                continue

            # Search where the shell's cd would land: '..' is taken
            # logically, not through a symbolic link. The path stays literal.
            search_dir = os.path.normpath(directory) if directory else directory
            resolution = self.resolver.resolve(prefix, search_dir)
            if resolution.status == MatchStatus.MISUSED:
                raise MisuseError(resolution.advisory)
            if not resolution.ok:
                raise SubdirectoryNotFoundError(directory or "/", prefix, resolution.advisory)
            if resolution.advisory:
                advisories.append(resolution.advisory)
            directory = join_segment(directory, resolution.first_match)

        path = directory or "/"
        logger.debug("Composed %s %s -> %s", alias, list(prefixes), path)
        return Composition(path, advisories)
