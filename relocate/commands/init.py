"""
INIT command - print the shell integration script.
"""

from ..process import Process
from ..command_decorators import command
from ..exceptions import MisuseError
from ..shell_integration import integration_script, supported_shell
from . import register_command
from .base import validate_arg_count

INIT_HELP = """\
usage: {name} [bash]

Writes the bash functions (r, rp, rs, rg, re, rr, lrp, lsrp, lrr,
lsrr, or their long relocate-... forms when
RELOCATE_DEFINE_SHORT_ALIASES=n) that drive relocate from an
interactive shell. Add this to ~/.bashrc:

    eval "$(relocate init)"

"""


@register_command('init')
@command(help_text=INIT_HELP)
def cmd_init(process: Process) -> int:
    """
    Print the shell integration script

    Usage: init [bash]
    """
    validate_arg_count(process, max_args=1)
    shell = process.args[0] if process.args else None
    if not supported_shell(shell):
        raise MisuseError(f"Unsupported shell '{shell}'.")
    process.stdout.write(integration_script(process.context.config))
    return 0
