"""
Command registry for relocate.

Each module in this package implements one or more commands and registers
them with ``register_command``. The modules are imported the first time a
command is looked up.
"""

import importlib
from typing import Callable, Dict, List, Optional

BUILTINS: Dict[str, Callable] = {}

_COMMAND_MODULES = (
    "query",
    "go",
    "set",
    "listing",
    "find",
    "env",
    "ls",
    "init",
)


def register_command(*names: str) -> Callable:
    """
    Register a command function under one or more names.

    Example:
        @register_command('query', 'print')
        def cmd_query(process):
            ...
    """
    def decorator(func: Callable) -> Callable:
        for name in names:
            BUILTINS[name] = func
        return func

    return decorator


def load_all_commands() -> None:
    """Import every command module so that its commands are registered."""
    for module_name in _COMMAND_MODULES:
        importlib.import_module(f"{__name__}.{module_name}")


def get_builtin(command: str) -> Optional[Callable]:
    """
    Look up the function implementing a command.

    Returns:
        The command function, or None if there is no such command

    Example:
        >>> get_builtin('print') is get_builtin('query')
        True
    """
    load_all_commands()
    return BUILTINS.get(command)


def command_names() -> List[str]:
    """Return every registered command name, sorted."""
    load_all_commands()
    return sorted(BUILTINS)
