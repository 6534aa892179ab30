"""Configuration for relocate.

Settings are read from environment variables, the same way the shell seeds
its defaults (``HISTFILE`` and friends) from the environment it inherits.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigError

STORE_ENV_VAR = "RELOCATIONS"
DEFAULT_STORE_NAME = ".relocations"


def _yes_no(env: Mapping[str, str], name: str, default: bool) -> bool:
    value = env.get(name)
    if value is None or value == "":
        return default
    if value == "y":
        return True
    if value == "n":
        return False
    raise ConfigError(name, value)


def default_store_path(env: Optional[Mapping[str, str]] = None) -> str:
    """Return the alias store path: $RELOCATIONS, else ~/.relocations."""
    env = os.environ if env is None else env
    path = env.get(STORE_ENV_VAR)
    if path:
        return os.path.expanduser(path)
    home = env.get("HOME") or os.path.expanduser("~")
    return os.path.join(home, DEFAULT_STORE_NAME)


@dataclass
class RelocateConfig:
    """
    Runtime settings.

    Attributes:
        store_path: File holding the alias records
        define_short_aliases: Emit short shell names (r, rp, rs...) rather than long ones
        modify_environment: Whether query/navigate update the r/rr/rp/r1/r2 slots
        ignore_case: Allow the caseless tier when matching subdirectory prefixes
        debug: Log at DEBUG level
    """

    store_path: str
    define_short_aliases: bool = True
    modify_environment: bool = True
    ignore_case: bool = False
    debug: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "RelocateConfig":
        """Build a config from an environment mapping (default: os.environ).

        Raises:
            ConfigError: If a y/n variable holds anything else
        """
        env = os.environ if env is None else env
        return cls(
            store_path=default_store_path(env),
            define_short_aliases=_yes_no(env, "RELOCATE_DEFINE_SHORT_ALIASES", True),
            modify_environment=_yes_no(env, "RELOCATE_MODIFY_ENVIRONMENT", True),
            ignore_case=_yes_no(env, "RELOCATE_IGNORE_CASE", False),
            debug=_yes_no(env, "RELOCATE_DEBUG", False),
        )
