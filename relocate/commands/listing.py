"""
LIST and NAMES commands - show the defined relocation aliases.
"""

from ..process import Process
from ..command_decorators import command
from . import register_command
from .base import validate_arg_count, write_lines

LIST_HELP = """\
usage: {name}

Writes every relocation alias and the directory it relocates to,
one pair per line, ordered by alias ignoring case.

"""

NAMES_HELP = """\
usage: {name}

Writes the name of every relocation alias, one per line.

"""


@register_command('list')
@command(help_text=LIST_HELP)
def cmd_list(process: Process) -> int:
    """
    List aliases and their directories

    Usage: list
    """
    validate_arg_count(process, max_args=0)
    write_lines(process, (alias.to_record() for alias in process.context.store.list_all()))
    return 0


@register_command('names')
@command(help_text=NAMES_HELP)
def cmd_names(process: Process) -> int:
    """
    List alias names (used for shell completion)

    Usage: names
    """
    validate_arg_count(process, max_args=0)
    write_lines(process, process.context.store.names())
    return 0
