"""Navigation state for relocate.

This module provides the NavigationState class, the session's record of
where relocation has been:

- ``r``  (current): the directory the last relocation moved to
- ``rr`` (previous): the directory it moved away from
- ``rp`` (pending): the most recently queried directory
- ``r1`` (pending, one back) and ``r2`` (pending, two back)

The state is immutable; the transition functions return a new state. The
shell session keeps it in exported environment variables, so reading it
from and writing it to an environment mapping are separate steps.
"""

import logging
from dataclasses import dataclass, fields, replace
from typing import Dict, List, Mapping, Tuple

logger = logging.getLogger(__name__)

# Environment variable name for each slot, in display order.
SLOT_VARIABLES = {
    "current": "r",
    "previous": "rr",
    "pending": "rp",
    "pending_1_back": "r1",
    "pending_2_back": "r2",
}
VARIABLE_SLOTS = {var: slot for slot, var in SLOT_VARIABLES.items()}


@dataclass(frozen=True)
class NavigationState:
    """
    Current/previous locations plus the chain of recently queried ones.

    An empty string means the slot is unset.

    Example:
        >>> state = NavigationState()
        >>> state = apply_query_update(state, '/tmp/a')
        >>> state = apply_query_update(state, '/tmp/b')
        >>> (state.pending, state.pending_1_back)
        ('/tmp/b', '/tmp/a')
    """

    current: str = ""
    previous: str = ""
    pending: str = ""
    pending_1_back: str = ""
    pending_2_back: str = ""

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "NavigationState":
        """Read the state from environment variables r, rr, rp, r1 and r2."""
        return cls(**{slot: env.get(var, "") for slot, var in SLOT_VARIABLES.items()})

    def to_env(self) -> Dict[str, str]:
        """Return every slot keyed by its environment variable name."""
        return {var: getattr(self, slot) for slot, var in SLOT_VARIABLES.items()}

    def get(self, var_name: str) -> str:
        """Get a slot by its environment variable name (r, rr, rp, r1, r2).

        Raises:
            KeyError: If var_name is not a navigation variable
        """
        return getattr(self, VARIABLE_SLOTS[var_name])

    def with_value(self, var_name: str, value: str) -> "NavigationState":
        """Return a copy with one slot, named by its variable, set to value.

        Raises:
            KeyError: If var_name is not a navigation variable
        """
        return replace(self, **{VARIABLE_SLOTS[var_name]: value})

    def items(self) -> List[Tuple[str, str]]:
        """List (variable, value) pairs in display order."""
        return [(SLOT_VARIABLES[f.name], getattr(self, f.name)) for f in fields(self)]

    def changes_from(self, other: "NavigationState") -> Dict[str, str]:
        """Return the variables whose values differ from other's."""
        return {
            var: value for var, value in self.items()
            if other.get(var) != value
        }


def apply_query_update(state: NavigationState, resolved_path: str) -> NavigationState:
    """Shift the pending chain and make resolved_path the pending location.

    r2 takes r1 and r1 takes rp, but an unset slot never overwrites the one
    after it.
    """
    new_state = replace(
        state,
        pending=resolved_path,
        pending_1_back=state.pending or state.pending_1_back,
        pending_2_back=state.pending_1_back or state.pending_2_back,
    )
    logger.debug("Pending chain: rp=%s r1=%s r2=%s", new_state.pending,
                 new_state.pending_1_back, new_state.pending_2_back)
    return new_state


def apply_navigate_update(state: NavigationState, old_cwd: str, new_cwd: str) -> NavigationState:
    """Record a change of working directory; a move to the same place is a no-op."""
    if old_cwd == new_cwd:
        return state
    logger.debug("Moved: rr=%s r=%s", old_cwd, new_cwd)
    return replace(state, previous=old_cwd, current=new_cwd)
