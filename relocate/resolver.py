"""Subdirectory prefix resolution for relocate.

This module provides the PrefixResolver class which finds the subdirectory of
a directory that a (possibly abbreviated) name refers to. Matching runs
through an ordered list of tiers and stops at the first tier that matches
anything:

1. plain: the name starts with the prefix
2. caseless: the name starts with the prefix, ignoring case (opt-in)
3. wildcard: the prefix contains dots, each of which matches any run of
   zero or more characters, anchored at the start of the name
4. non-prefix wildcard: as 3, but anywhere in the name (skipped when the
   prefix starts with a dot, since 3 already matched anywhere)

Within a tier, matches are sorted and the first one wins; the rest are
reported in an advisory message.
"""

import enum
import logging
import os
import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)


class MatchStatus(enum.Enum):
    """Outcome of resolving one prefix."""

    EXACTLY_ONE = 0
    MULTIPLE = 1
    NONE = 2
    MISUSED = 3


@dataclass
class Resolution:
    """
    Result of PrefixResolver.resolve().

    Attributes:
        status: How many subdirectories matched (or misuse)
        first_match: Name of the chosen subdirectory, if any
        advisory: Message for stderr: the other matches, or why nothing matched
        tier: Name of the tier that produced the matches
        matches: Every match from that tier, sorted
    """

    status: MatchStatus
    first_match: Optional[str] = None
    advisory: Optional[str] = None
    tier: Optional[str] = None
    matches: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True if a subdirectory was chosen (one match or several)."""
        return self.status in (MatchStatus.EXACTLY_ONE, MatchStatus.MULTIPLE)


def wildcard_pattern(prefix: str) -> str:
    """Build a regex where each dot in prefix matches zero or more characters.

    Examples:
        >>> wildcard_pattern("v..3")
        'v.*.*3'
    """
    return ".*".join(re.escape(part) for part in prefix.split("."))


class PlainPrefixMatcher:
    """Tier 1: case-sensitive prefix match."""

    name = "plain"
    label = "Also"

    def applies(self, prefix: str, allow_caseless: bool) -> bool:
        return True

    def match(self, name: str, prefix: str) -> bool:
        return name.startswith(prefix)


class CaselessPrefixMatcher:
    """Tier 2: prefix match ignoring case."""

    name = "caseless"
    label = "Also (ignoring case)"

    def applies(self, prefix: str, allow_caseless: bool) -> bool:
        return allow_caseless

    def match(self, name: str, prefix: str) -> bool:
        return name.lower().startswith(prefix.lower())


class WildcardPrefixMatcher:
    """Tier 3: dots in the prefix match anything, anchored at the start."""

    name = "wildcard"
    label = "Also (wildcards)"

    def applies(self, prefix: str, allow_caseless: bool) -> bool:
        return "." in prefix

    def match(self, name: str, prefix: str) -> bool:
        return re.match(wildcard_pattern(prefix), name, re.DOTALL) is not None


class WildcardSubstringMatcher:
    """Tier 4: dots in the prefix match anything, anywhere in the name."""

    name = "non-prefix wildcard"
    label = "Also (non-prefix wildcards)"

    def applies(self, prefix: str, allow_caseless: bool) -> bool:
        # A leading dot already lets tier 3 match anywhere.
        return "." in prefix and not prefix.startswith(".")

    def match(self, name: str, prefix: str) -> bool:
        return re.search(wildcard_pattern(prefix), name, re.DOTALL) is not None


# Order matters: it decides which directory wins in ambiguous trees.
DEFAULT_MATCHERS = (
    PlainPrefixMatcher(),
    CaselessPrefixMatcher(),
    WildcardPrefixMatcher(),
    WildcardSubstringMatcher(),
)


def list_subdirectories(directory: str) -> List[str]:
    """List the names of the immediate subdirectories of directory.

    Symbolic links to directories count as subdirectories.

    Raises:
        OSError: If directory cannot be listed
    """
    names = []
    with os.scandir(directory) as entries:
        for entry in entries:
            try:
                if entry.is_dir():
                    names.append(entry.name)
            except OSError:
                # Dangling or unreadable entry.
                continue
    return names


class PrefixResolver:
    """Resolves a subdirectory prefix against a directory.

    Example:
        resolver = PrefixResolver()
        result = resolver.resolve('doc', '/home/me')
        if result.ok:
            print(result.first_match)   # 'documents'

    Attributes:
        matchers: Tiers, tried in order
        allow_caseless: Default for the caseless tier
    """

    def __init__(self, matchers: Sequence = DEFAULT_MATCHERS, allow_caseless: bool = False):
        self.matchers = tuple(matchers)
        self.allow_caseless = allow_caseless

    def resolve(self, prefix: Optional[str], base_dir: Optional[str],
                allow_caseless: Optional[bool] = None) -> Resolution:
        """Find the subdirectory of base_dir that prefix refers to.

        Args:
            prefix: Start (or dotted abbreviation) of a subdirectory name
            base_dir: Directory to search; an empty string means the root
            allow_caseless: Override the resolver's caseless default

        Returns:
            Resolution with status EXACTLY_ONE, MULTIPLE, NONE or MISUSED
        """
        if prefix is None and base_dir is None:
            return Resolution(MatchStatus.MISUSED, advisory="No prefix or directory was specified.")
        if prefix is None or base_dir is None:
            return Resolution(MatchStatus.MISUSED, advisory="No directory was specified.")
        if allow_caseless is None:
            allow_caseless = self.allow_caseless

        directory = base_dir or "/"
        try:
            candidates = list_subdirectories(directory)
        except OSError as e:
            logger.debug("Cannot list %s: %s", directory, e)
            reason = e.strerror or str(e)
            return Resolution(
                MatchStatus.NONE,
                advisory=f"There's no subdirectory of {directory} that starts with "
                         f"'{prefix}' ({reason}).",
            )

        for matcher in self.matchers:
            if not matcher.applies(prefix, allow_caseless):
                continue
            matches = sorted(name for name in candidates if matcher.match(name, prefix))
            if matches:
                logger.debug("%s: '%s' matched %s in %s tier", directory, prefix, matches, matcher.name)
                return self._result(matches, matcher, directory, prefix)
            logger.debug("%s: no %s match for '%s'", directory, matcher.name, prefix)

        return Resolution(
            MatchStatus.NONE,
            advisory=f"There's no subdirectory of {directory} that starts with '{prefix}'.",
        )

    @staticmethod
    def _result(matches: List[str], matcher, directory: str, prefix: str) -> Resolution:
        if len(matches) == 1:
            return Resolution(MatchStatus.EXACTLY_ONE, first_match=matches[0],
                              tier=matcher.name, matches=matches)
        others = ", ".join(matches[1:])
        return Resolution(
            MatchStatus.MULTIPLE,
            first_match=matches[0],
            advisory=f"{matcher.label}: {directory} {prefix} -> {others}",
            tier=matcher.name,
            matches=matches,
        )
