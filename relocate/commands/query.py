"""
QUERY command - print the directory an alias and prefixes lead to.
"""

from ..process import Process
from ..command_decorators import command
from . import register_command
from .base import record_query, write_error, write_lines

QUERY_HELP = """\
usage: {name} alias [subdir-prefix ...]

Writes to the standard output the directory that 'alias' relocates
to or, if 'subdir-prefix'es are given, the subdirectory reached by
matching each prefix in turn against the subdirectories of the
directory reached so far. With no arguments, lists every alias.

A prefix matches the subdirectories that start with it. If none
do, and caseless matching is enabled (RELOCATE_IGNORE_CASE=y),
those that start with it ignoring case. If still none do and the
prefix contains dots, each dot may stand for any run of characters
at the start of the name, and then, unless the prefix starts with a
dot, anywhere in the name. When several subdirectories match, the
first in sorted order is used and the others are listed on the
standard error. A prefix of '..' moves up one directory.

The alias '.' stands for the current working directory and '/' for
the root directory.

If at least one prefix is given and a directory is found, 'rp' is
set to it, after 'r1' has been moved to 'r2' and 'rp' to 'r1'.

"""


@register_command('query', 'print')
@command(help_text=QUERY_HELP)
def cmd_query(process: Process) -> int:
    """
    Print the directory for an alias and subdirectory prefixes

    Usage: query [alias [subdir-prefix ...]]
    """
    context = process.context
    if not process.args:
        write_lines(process, (alias.to_record() for alias in context.store.list_all()))
        return 0

    alias, prefixes = process.args[0], process.args[1:]
    composition = context.composer().compose(alias, prefixes, cwd=context.cwd)
    for advisory in composition.advisories:
        write_error(process, advisory)
    process.stdout.write(f"{composition.path}\n")

    if prefixes:
        record_query(process, composition.path)
    return composition.exit_code
