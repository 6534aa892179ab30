"""
Base utilities for command implementations.

This module provides common helper functions that command modules can use
to reduce code duplication and maintain consistency.
"""

from typing import Iterable, List, Optional, Tuple

from ..exceptions import MisuseError
from ..navigation import apply_query_update
from ..process import Process


def write_error(process: Process, message: str):
    """
    Write a diagnostic message to stderr.

    Args:
        process: The process object
        message: The message (a trailing newline is added)
    """
    process.stderr.write(f"{message}\n")


def write_lines(process: Process, lines: Iterable[str]) -> int:
    """
    Write lines to stdout.

    Returns:
        Number of lines written
    """
    count = 0
    for line in lines:
        process.stdout.write(f"{line}\n")
        count += 1
    return count


def validate_arg_count(process: Process, min_args: int = 0, max_args: Optional[int] = None,
                       missing: str = "Missing arguments.",
                       too_many: str = "Too many arguments.") -> None:
    """
    Validate the number of arguments.

    Args:
        process: The process object
        min_args: Minimum required arguments
        max_args: Maximum allowed arguments (None = unlimited)
        missing: Message when there are too few arguments
        too_many: Message when there are too many arguments

    Raises:
        MisuseError: If the count is out of range
    """
    arg_count = len(process.args)
    if arg_count < min_args:
        raise MisuseError(missing)
    if max_args is not None and arg_count > max_args:
        raise MisuseError(too_many)


def split_leading_flag(args: List[str], flag: str) -> Tuple[bool, List[str]]:
    """
    Strip flag if it is the first argument.

    Only the first position is checked, so a later argument that happens to
    look like the flag (a directory named ``-f``, say) is left alone.

    Example:
        >>> split_leading_flag(['-f', 'src', '.'], '-f')
        (True, ['src', '.'])
    """
    if args and args[0] == flag:
        return True, args[1:]
    return False, list(args)


def record_query(process: Process, resolved_path: str) -> None:
    """Shift the pending chain, if the environment is allowed to change."""
    context = process.context
    if context.config.modify_environment:
        context.state = apply_query_update(context.state, resolved_path)


__all__ = [
    'write_error',
    'write_lines',
    'validate_arg_count',
    'split_leading_flag',
    'record_query',
]
