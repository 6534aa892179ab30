"""Bash integration for relocate.

A child process cannot change its parent shell's working directory or
environment, so the commands that need to (go and query) run in shell mode:
their output is turned into bash that the calling function evals. This
module renders that bash, plus the script that defines the user-facing
functions and their completions.
"""

import shlex
from typing import List, NamedTuple, Optional

from .config import RelocateConfig
from .navigation import NavigationState

PROGRAM = "relocate"


class ShellFunction(NamedTuple):
    """One user-facing shell function."""

    short_name: str
    long_name: str
    command: str
    fixed_args: tuple = ()
    # Output is bash to eval (the command may cd or export).
    evaluated: bool = False
    # Takes an alias as its first argument.
    completes_aliases: bool = False


SHELL_FUNCTIONS = (
    ShellFunction("r", "relocate-go", "go", evaluated=True, completes_aliases=True),
    ShellFunction("rp", "relocate-print", "query", evaluated=True, completes_aliases=True),
    ShellFunction("rs", "relocate-set", "set", completes_aliases=True),
    ShellFunction("rg", "relocate-find", "find", completes_aliases=True),
    ShellFunction("re", "relocate-env", "env"),
    ShellFunction("lrp", "relocate-long-list-rp", "ll", ("rp",)),
    ShellFunction("lsrp", "relocate-short-list-rp", "ls", ("rp",)),
    ShellFunction("lrr", "relocate-long-list-rr", "ll", ("rr",)),
    ShellFunction("lsrr", "relocate-short-list-rr", "ls", ("rr",)),
)


def render_shell_output(output: str, old_cwd: str, new_cwd: str,
                        old_state: NavigationState, new_state: NavigationState,
                        exit_code: int) -> str:
    """Render a command's effects as bash for the caller to eval.

    Args:
        output: What the command wrote to stdout
        old_cwd: Working directory before the command
        new_cwd: Working directory after the command
        old_state: Navigation state before the command
        new_state: Navigation state after the command
        exit_code: The command's exit status, which the bash reproduces

    Returns:
        Bash statements, one per line
    """
    lines: List[str] = []
    if output:
        lines.append(f"printf '%s' {shlex.quote(output)}")
    if new_cwd != old_cwd:
        lines.append(f"cd -- {shlex.quote(new_cwd)}")
    for var, value in new_state.changes_from(old_state).items():
        lines.append(f"export {var}={shlex.quote(value)}")
    lines.append(f"(exit {exit_code})")
    return "\n".join(lines) + "\n"


def _function_definition(function: ShellFunction, name: str, program: str) -> str:
    args = " ".join([function.command, *function.fixed_args])
    if function.evaluated:
        return f'{name}() {{ eval "$(command {program} --shell -N {name} {args} "$@")"; }}'
    if function.command == "set":
        return (f'{name}() {{ command {program} -N {name} {args} "$@" '
                f'&& relocate-update-completions; }}')
    return f'{name}() {{ command {program} -N {name} {args} "$@"; }}'


def integration_script(config: RelocateConfig, program: str = PROGRAM) -> str:
    """Build the bash that defines the relocation functions.

    Short names (r, rp, rs...) are used unless config.define_short_aliases is
    off, in which case the long ones (relocate-go, relocate-print...) are.

    Usage in ~/.bashrc:
        eval "$(relocate init)"
    """
    short = config.define_short_aliases
    lines = ["# relocate shell integration", ""]
    completed = []

    for function in SHELL_FUNCTIONS:
        name = function.short_name if short else function.long_name
        lines.append(_function_definition(function, name, program))
        if function.completes_aliases:
            completed.append(name)

    if short:
        # Relocate relative to the current directory.
        lines.append('rr() { r . "$@"; }')

    lines.extend([
        "",
        "relocate-update-completions() {",
        f'    complete -W "$(command {program} names 2>/dev/null)" {" ".join(completed)}',
        "}",
        "relocate-update-completions",
    ])
    return "\n".join(lines) + "\n"


def supported_shell(name: Optional[str]) -> bool:
    return name in (None, "bash")
