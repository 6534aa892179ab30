"""
SET command - define a relocation alias.
"""

from ..process import Process
from ..command_decorators import command
from ..exceptions import MisuseError
from . import register_command
from .base import split_leading_flag

SET_HELP = """\
usage: {name} [-f] alias dir

Makes 'alias' a relocation alias for the directory 'dir'. If
'alias' already relocates somewhere, nothing changes unless '-f' is
given, in which case the old definition is replaced.

An alias consists of letters and digits only. If 'dir' is '.', the
absolute pathname of the current working directory is stored.

Aliases are stored one per line in ~/.relocations (or the file
named by RELOCATIONS). To remove one, edit that file.

"""


@register_command('set')
@command(help_text=SET_HELP)
def cmd_set(process: Process) -> int:
    """
    Define a relocation alias

    Usage: set [-f] alias dir
    """
    force, args = split_leading_flag(process.args, '-f')
    if not args:
        raise MisuseError(
            "Neither the relocation alias nor the directory it was to alias "
            "has been specified."
        )
    if len(args) == 1:
        raise MisuseError("The directory to alias wasn't specified.")
    if len(args) > 2:
        raise MisuseError("Too many arguments.")

    context = process.context
    context.store.upsert(args[0], args[1], force=force, cwd=context.cwd)
    return 0
