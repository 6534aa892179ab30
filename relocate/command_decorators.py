"""
Decorators shared by command implementations.

``command`` gives every command the same front end:
- ``-?``, ``-h`` or ``--help`` as the first argument prints the usage text
- a MisuseError is reported followed by the usage text on stderr
"""

import functools
from typing import Callable

from .exceptions import EXIT_OK, MisuseError

HELP_OPTIONS = ("-?", "-h", "--help")


def is_help_option(arg: str) -> bool:
    """Return True if arg asks for help."""
    return arg in HELP_OPTIONS


def format_usage(help_text: str, name: str) -> str:
    """Fill the command's display name into its usage text."""
    return help_text.format(name=name)


def command(help_text: str = "") -> Callable:
    """
    Wrap a command function with help and misuse handling.

    Args:
        help_text: Usage text; ``{name}`` is replaced by the display name

    Example:
        @register_command('list')
        @command(help_text="usage: {name}\\n")
        def cmd_list(process):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(process) -> int:
            if process.args and is_help_option(process.args[0]):
                process.stdout.write("\n" + format_usage(help_text, process.command))
                return EXIT_OK
            try:
                return func(process)
            except MisuseError as e:
                process.stderr.write(f"\n{e.message}\n")
                if help_text:
                    process.stderr.write("\n" + format_usage(help_text, process.command))
                return e.exit_code

        wrapper.help_text = help_text
        return wrapper

    return decorator
