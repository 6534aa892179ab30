"""relocate - directory aliases with subdirectory prefix matching."""

__version__ = "1.0.0"

from .alias_store import Alias, AliasStore  # noqa: E402
from .composer import Composition, PathComposer  # noqa: E402
from .navigation import NavigationState, apply_navigate_update, apply_query_update  # noqa: E402
from .resolver import MatchStatus, PrefixResolver, Resolution  # noqa: E402

__all__ = [
    "Alias",
    "AliasStore",
    "Composition",
    "PathComposer",
    "NavigationState",
    "apply_navigate_update",
    "apply_query_update",
    "MatchStatus",
    "PrefixResolver",
    "Resolution",
]
