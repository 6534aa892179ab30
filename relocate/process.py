"""Process class for running one relocate command"""

import io
from typing import Callable, List, Optional, TextIO

from .context import CommandContext
from .exceptions import RelocateError

# Status when no function implements the command, as in the shell.
EXIT_NO_SUCH_COMMAND = 127


class Process:
    """
    One invocation of a command: its arguments, streams and exit code.

    Commands receive the process and write paths to ``stdout`` and
    diagnostics to ``stderr``; anything they raise is turned into a message
    and an exit code here.
    """

    def __init__(
        self,
        command: str,
        args: List[str],
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        executor: Optional[Callable] = None,
        context: Optional[CommandContext] = None,
    ):
        """
        Args:
            command: Name the command is shown as in usage and diagnostics
            args: Arguments after the command name
            stdout: Output stream (default: in-memory buffer)
            stderr: Error stream (default: in-memory buffer)
            executor: Function implementing the command
            context: Store, navigation state and working directory
        """
        self.command = command
        self.args = args
        self.stdout = stdout if stdout is not None else io.StringIO()
        self.stderr = stderr if stderr is not None else io.StringIO()
        self.executor = executor
        self.context = context if context is not None else CommandContext()
        self.exit_code = 0

    def _fail(self, message: str, exit_code: int) -> int:
        self.stderr.write(f"{message}\n")
        self.exit_code = exit_code
        return exit_code

    def execute(self) -> int:
        """
        Run the command.

        Returns:
            The command's exit code; 127 if there is no executor
        """
        if self.executor is None:
            return self._fail(f"{self.command}: no such command", EXIT_NO_SUCH_COMMAND)

        try:
            self.exit_code = self.executor(self)
        except KeyboardInterrupt:
            raise
        except RelocateError as e:
            self._fail(e.message, e.exit_code)
        except Exception as e:
            self._fail(f"Error executing '{self.command}': {e}", 1)

        self.stdout.flush()
        self.stderr.flush()
        return self.exit_code

    def get_stdout(self) -> str:
        """Get stdout contents (only for in-memory buffers)"""
        return self.stdout.getvalue()

    def get_stderr(self) -> str:
        """Get stderr contents (only for in-memory buffers)"""
        return self.stderr.getvalue()

    def __repr__(self):
        return f"Process({' '.join([self.command, *self.args])})"
