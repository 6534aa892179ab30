"""
LS and LL commands - list the directory held by a navigation variable.
"""

import subprocess

from ..process import Process
from ..command_decorators import command
from ..exceptions import EXIT_FAILURE, EXIT_MISUSE, MisuseError, UnsetVariableError
from ..navigation import VARIABLE_SLOTS
from . import register_command
from .base import write_error

LS_HELP = """\
usage: {name} var [option ...] [file ...]

where 'var' is one of r, rr, rp, r1 or r2, and 'option ...' and
'file ...' are passed on to the 'ls' command, which is run inside
the directory that the environment variable 'var' holds.

An error message is output if 'var' isn't set.

"""


def _run_ls(process: Process, long_format: bool) -> int:
    if not process.args:
        raise MisuseError("The variable naming the directory wasn't specified.")
    var_name, ls_args = process.args[0], process.args[1:]
    if var_name not in VARIABLE_SLOTS:
        raise MisuseError(f"'{var_name}' is not one of: {', '.join(VARIABLE_SLOTS)}.")

    directory = process.context.state.get(var_name)
    if not directory:
        raise UnsetVariableError(var_name)

    argv = ["ls", "-l"] if long_format else ["ls"]
    try:
        result = subprocess.run(argv + ls_args, cwd=directory, capture_output=True, text=True)
    except OSError as e:
        write_error(process, f"{directory}: {e.strerror or e}")
        return EXIT_FAILURE
    process.stdout.write(result.stdout)
    process.stderr.write(result.stderr)
    # ls's own misuse status must not read as ours.
    if result.returncode == EXIT_MISUSE:
        return EXIT_FAILURE
    return result.returncode


@register_command('ls')
@command(help_text=LS_HELP)
def cmd_ls(process: Process) -> int:
    """
    Short listing of the directory in a navigation variable

    Usage: ls var [option ...] [file ...]
    """
    return _run_ls(process, long_format=False)


@register_command('ll')
@command(help_text=LS_HELP)
def cmd_ll(process: Process) -> int:
    """
    Long listing of the directory in a navigation variable

    Usage: ll var [option ...] [file ...]
    """
    return _run_ls(process, long_format=True)
