"""
ENV command - display the navigation variables.
"""

from ..process import Process
from ..command_decorators import command
from . import register_command
from .base import validate_arg_count

ENV_HELP = """\
usage: {name}

Writes the current values of the environment variables that the
relocation commands set: r, rr, rp, r1 and r2. Unset ones are
skipped.

"""


@register_command('env')
@command(help_text=ENV_HELP)
def cmd_env(process: Process) -> int:
    """
    Display the navigation variables

    Usage: env
    """
    validate_arg_count(process, max_args=0)
    for name, value in process.context.state.items():
        if value:
            process.stdout.write(f"{name:<2} {value}\n")
    return 0
