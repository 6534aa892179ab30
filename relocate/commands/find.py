"""
FIND command - search the alias listing.
"""

from ..process import Process
from ..command_decorators import command
from ..exceptions import EXIT_FAILURE
from . import register_command
from .base import validate_arg_count, write_lines

FIND_HELP = """\
usage: {name} pattern

Writes each 'alias dir' line of the alias listing that contains a
match for the regular expression 'pattern'.

"""


@register_command('find')
@command(help_text=FIND_HELP)
def cmd_find(process: Process) -> int:
    """
    Find aliases whose listing line matches a pattern

    Usage: find pattern
    """
    validate_arg_count(process, 1, 1, missing="The pattern to search for wasn't specified.")
    found = write_lines(process, process.context.store.find(process.args[0]))
    return 0 if found else EXIT_FAILURE
