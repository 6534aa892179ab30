"""
GO command - change to the directory an alias and prefixes lead to.
"""

from ..process import Process
from ..command_decorators import command
from ..navigation import apply_navigate_update
from . import register_command
from .base import write_error

GO_HELP = """\
usage: {name} [alias [subdir-prefix ...]]

Changes the working directory to the directory that 'alias'
relocates to or, if 'subdir-prefix'es are given, to the
subdirectory reached by matching each prefix in turn (see the
query command for how prefixes are matched). With no arguments,
changes back to the previous directory.

If a prefix matches no subdirectory, the directory it was matched
against is named in the error message.

If the working directory actually changes, 'rr' is set to the old
working directory and 'r' to the new one.

"""


@register_command('go')
@command(help_text=GO_HELP)
def cmd_go(process: Process) -> int:
    """
    Change directory by alias and subdirectory prefixes

    Usage: go [alias [subdir-prefix ...]]
    """
    context = process.context
    exit_code = 0

    if process.args:
        alias, prefixes = process.args[0], process.args[1:]
        composition = context.composer().compose(alias, prefixes, cwd=context.cwd)
        for advisory in composition.advisories:
            write_error(process, advisory)
        target = composition.path
        exit_code = composition.exit_code
    else:
        target = context.paths.previous_directory()

    old_cwd = context.cwd
    new_cwd = context.paths.change_directory(target)
    process.stdout.write(f"{new_cwd}\n")

    if process.args and context.config.modify_environment:
        context.state = apply_navigate_update(context.state, old_cwd, new_cwd)
    return exit_code
