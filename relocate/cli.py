"""Command-line entry point for relocate."""

import io
import logging
import os
import sys
from dataclasses import dataclass
from typing import List, Mapping, Optional, TextIO, Tuple

from . import __version__
from .commands import command_names, get_builtin
from .context import CommandContext
from .exceptions import EXIT_MISUSE, EXIT_OK, MisuseError, RelocateError, UnknownCommandError
from .process import Process
from .shell_integration import render_shell_output

logger = logging.getLogger(__name__)

_log_handler: Optional[logging.Handler] = None

MAIN_HELP = """\
usage: relocate [--shell] [--debug] [-N name] command [arg ...]

Directory aliases with subdirectory prefix matching.

commands:
  query [alias [prefix ...]]   print the directory (alias: print)
  go [alias [prefix ...]]      change to the directory
  set [-f] alias dir           define an alias
  list                         list aliases and directories
  names                        list alias names
  find pattern                 search the alias listing
  env                          show r, rr, rp, r1 and r2
  ls var [ls-arg ...]          short listing of the directory in var
  ll var [ls-arg ...]          long listing of the directory in var
  init [bash]                  print the shell integration script

options:
  --shell      write bash to eval instead of plain output
  --debug      log debugging information to stderr
  -N name      name to use for the command in messages
  --version    print the version and exit

Each command accepts -?, -h or --help.
"""


@dataclass
class GlobalOptions:
    shell: bool = False
    debug: bool = False
    name: Optional[str] = None
    help: bool = False
    version: bool = False


def parse_global_args(argv: List[str]) -> Tuple[GlobalOptions, Optional[str], List[str]]:
    """
    Split argv into global options, the command name and its arguments.

    Global options must come before the command; everything after it is
    passed to the command untouched.

    Raises:
        MisuseError: If -N has no value or an unknown option precedes the command
    """
    options = GlobalOptions()
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--shell":
            options.shell = True
        elif arg == "--debug":
            options.debug = True
        elif arg == "-N":
            if i + 1 >= len(argv):
                raise MisuseError("The -N option needs a name.")
            options.name = argv[i + 1]
            i += 1
        elif arg in ("-?", "-h", "--help"):
            options.help = True
        elif arg == "--version":
            options.version = True
        elif arg.startswith("-"):
            raise MisuseError(f"{arg}: unknown option")
        else:
            return options, arg, argv[i + 1:]
        i += 1
    return options, None, []


def configure_logging(debug: bool, stream: Optional[TextIO] = None) -> None:
    """Send relocate's log records to stderr; DEBUG if requested, else WARNING."""
    global _log_handler
    root = logging.getLogger("relocate")
    if _log_handler is not None:
        root.removeHandler(_log_handler)
    _log_handler = logging.StreamHandler(stream or sys.stderr)
    _log_handler.setFormatter(logging.Formatter("%(name)s: %(levelname)s: %(message)s"))
    root.addHandler(_log_handler)
    root.setLevel(logging.DEBUG if debug else logging.WARNING)


def main(argv: Optional[List[str]] = None, env: Optional[Mapping[str, str]] = None,
         stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> int:
    """
    Run one relocate command.

    Args:
        argv: Arguments after the program name (default: sys.argv[1:])
        env: Environment mapping (default: os.environ)
        stdout: Output stream (default: sys.stdout)
        stderr: Error stream (default: sys.stderr)

    Returns:
        Exit code
    """
    argv = sys.argv[1:] if argv is None else argv
    env = os.environ if env is None else env
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    try:
        options, command_name, args = parse_global_args(argv)
        if options.version:
            stdout.write(f"relocate {__version__}\n")
            return EXIT_OK
        if options.help:
            stdout.write(MAIN_HELP)
            return EXIT_OK
        if command_name is None:
            stderr.write(MAIN_HELP)
            return EXIT_MISUSE

        context = CommandContext.from_env(env)
        configure_logging(options.debug or context.config.debug, stderr)

        executor = get_builtin(command_name)
        if executor is None:
            raise UnknownCommandError(command_name)
    except RelocateError as e:
        stderr.write(f"relocate: {e.message}\n")
        return e.exit_code

    logger.debug("Running %s %s (commands: %s)", command_name, args, command_names())
    process = Process(
        command=options.name or command_name,
        args=args,
        stdout=io.StringIO() if options.shell else stdout,
        stderr=stderr,
        executor=executor,
        context=context,
    )
    old_cwd, old_state = context.cwd, context.state
    exit_code = process.execute()

    if options.shell:
        stdout.write(render_shell_output(
            process.get_stdout(), old_cwd, context.cwd, old_state, context.state, exit_code,
        ))
    stdout.flush()
    return exit_code


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
