"""Alias store for relocation aliases.

This module provides the AliasStore class which handles:
- Reading relocation aliases from the store file
- Defining aliases, refusing to replace an existing one unless forced
- Listing and searching aliases
- Rewriting the store atomically (write a temporary file, then rename)

The store file holds one record per line: ``<alias> <directory>``. Paths are
not escaped, so a directory name containing a newline cannot be stored.
Concurrent writers are not coordinated: the last rename wins.
"""

import logging
import os
import re
import stat
import tempfile
from typing import Iterable, Iterator, List, NamedTuple, Optional

from .exceptions import (
    AliasConflictError,
    AliasNotFoundError,
    InvalidAliasNameError,
    InvalidPathError,
    MisuseError,
    StoreError,
)

logger = logging.getLogger(__name__)

# Built-in pseudo-aliases. Neither is alphanumeric, so neither can clash with
# a user-defined alias.
CURRENT_DIRECTORY_ALIAS = "."
ROOT_ALIAS = "/"


class Alias(NamedTuple):
    """A relocation alias and the directory it relocates to."""

    name: str
    path: str

    def to_record(self) -> str:
        return f"{self.name} {self.path}"


def is_valid_alias_name(name: str) -> bool:
    """Return True if name is non-empty and made only of letters and digits."""
    return bool(name) and name.isalnum()


def parse_record(line: str) -> Optional[Alias]:
    """Parse one store line into an Alias, or None if it is not a record.

    Examples:
        >>> parse_record("src /home/me/src")
        Alias(name='src', path='/home/me/src')
        >>> parse_record("garbage") is None
        True
    """
    line = line.rstrip("\n")
    name, sep, path = line.partition(" ")
    if not sep or not name or not path:
        return None
    return Alias(name, path)


def current_umask() -> int:
    """Return the process umask (it can only be read by setting it)."""
    mask = os.umask(0)
    os.umask(mask)
    return mask


def atomic_write_text(path: str, content: str) -> None:
    """Write content to path atomically.

    The content goes to a temporary file in the same directory, which is then
    renamed over path with ``os.replace``. Readers see either the old file or
    the new one, never a partial write.

    If path is a symbolic link, the file it points to is replaced and the
    link is kept. A new file gets the mode ``open()`` would give it (0666
    less the umask) rather than mkstemp's 0600.
    """
    path = os.path.realpath(path)
    directory = os.path.dirname(path)
    os.makedirs(directory, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(
        dir=directory,
        prefix=f".{os.path.basename(path)}.",
        suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp_handle:
            tmp_handle.write(content)
            tmp_handle.flush()
            os.fsync(tmp_handle.fileno())
        if os.path.exists(path):
            mode = stat.S_IMODE(os.stat(path).st_mode)
        else:
            mode = 0o666 & ~current_umask()
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


class AliasStore:
    """Persistent mapping from relocation alias to directory.

    The store file is the only source of truth: every call re-reads it, and
    every mutation is a read, a filtered copy and an atomic replace.

    Example:
        store = AliasStore('~/.relocations')
        store.upsert('src', '/home/me/src')
        store.lookup('src')  # '/home/me/src'

    Attributes:
        path: Location of the store file
    """

    def __init__(self, path: str):
        """Initialize a store backed by the file at path.

        Args:
            path: Store file location (``~`` is expanded). The file need not exist.
        """
        self.path = os.path.expanduser(path)

    def _read_lines(self) -> List[str]:
        try:
            with open(self.path, encoding="utf-8") as handle:
                return handle.readlines()
        except FileNotFoundError:
            return []
        except OSError as e:
            raise StoreError(self.path, e.strerror or str(e))

    def load_all(self) -> List[Alias]:
        """Load every record in store order.

        Returns:
            List of aliases, in the order they appear in the file
        """
        aliases = []
        for line in self._read_lines():
            alias = parse_record(line)
            if alias is not None:
                aliases.append(alias)
        logger.debug("Loaded %d aliases from %s", len(aliases), self.path)
        return aliases

    def save_all(self, aliases: Iterable[Alias]) -> None:
        """Replace the whole store with the given records.

        Args:
            aliases: Records to write, in order
        """
        content = "".join(f"{alias.to_record()}\n" for alias in aliases)
        self._write(content)

    def _write(self, content: str) -> None:
        try:
            atomic_write_text(self.path, content)
        except OSError as e:
            raise StoreError(self.path, e.strerror or str(e))
        logger.debug("Rewrote %s", self.path)

    def lookup(self, name: str, quiet: bool = False) -> Optional[str]:
        """Get the directory an alias relocates to.

        Args:
            name: Alias name (case-sensitive exact match)
            quiet: If True, return None for a missing alias instead of raising

        Returns:
            The first stored directory for name, or None in quiet mode

        Raises:
            AliasNotFoundError: If name is not defined and quiet is False
        """
        for alias in self.load_all():
            if alias.name == name:
                return alias.path
        if quiet:
            return None
        raise AliasNotFoundError(name)

    def exists(self, name: str) -> bool:
        """Check if an alias is defined."""
        return self.lookup(name, quiet=True) is not None

    def upsert(self, name: str, path: str, force: bool = False,
               cwd: Optional[str] = None) -> str:
        """Define name to be an alias for path.

        Args:
            name: Alias name; letters and digits only
            path: Directory to alias. ``.`` means the current working directory;
                other relative paths are made absolute against it.
            force: Replace an existing alias with the same name
            cwd: Directory relative paths are taken from (default: os.getcwd())

        Returns:
            The directory that was stored

        Raises:
            InvalidAliasNameError: If name is empty or not alphanumeric
            InvalidPathError: If path is empty or cannot be stored on one line
            AliasConflictError: If name is already defined and force is False
        """
        if not is_valid_alias_name(name):
            raise InvalidAliasNameError(name)
        if not path:
            raise InvalidPathError()
        if "\n" in path:
            raise InvalidPathError("A directory to alias cannot contain a newline.")
        base = cwd if cwd is not None else os.getcwd()
        if path == CURRENT_DIRECTORY_ALIAS:
            path = base
        elif not os.path.isabs(path):
            path = os.path.normpath(os.path.join(base, path))

        existing = self.lookup(name, quiet=True)
        if existing is not None and not force:
            raise AliasConflictError(name, existing)

        # Work on raw lines so lines we cannot parse survive the rewrite.
        lines = [line for line in self._read_lines() if not line.startswith(name + " ")]
        if lines and not lines[-1].endswith("\n"):
            lines[-1] += "\n"
        lines.append(f"{Alias(name, path).to_record()}\n")
        self._write("".join(lines))

        if existing is not None:
            logger.debug("Replaced alias %s: %s -> %s", name, existing, path)
        else:
            logger.debug("Defined alias %s -> %s", name, path)
        return path

    def list_all(self) -> Iterator[Alias]:
        """Yield every alias, ordered by name ignoring case.

        Each call re-reads the store.
        """
        yield from sorted(self.load_all(), key=lambda a: (a.name.upper(), a.name, a.path))

    def names(self) -> List[str]:
        """List alias names in listing order."""
        return [alias.name for alias in self.list_all()]

    def find(self, pattern: str) -> Iterator[str]:
        """Yield the ``name path`` lines that contain a regular expression match.

        Args:
            pattern: Regular expression searched for in each listing line

        Raises:
            MisuseError: If pattern is not a valid regular expression
        """
        try:
            regex = re.compile(pattern)
        except re.error as e:
            raise MisuseError(f"Invalid pattern '{pattern}': {e}")
        for alias in self.list_all():
            line = alias.to_record()
            if regex.search(line):
                yield line

    def __contains__(self, name: str) -> bool:
        return self.exists(name)

    def __len__(self) -> int:
        return len(self.load_all())

    def __repr__(self) -> str:
        return f"AliasStore({self.path!r})"
