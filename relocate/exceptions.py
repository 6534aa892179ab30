"""
Custom exception hierarchy for relocate.

This module defines a structured exception hierarchy that provides:
- Clear error categorization (misuse, not found, conflict)
- Consistent error messages
- Proper exit codes

Usage:
    from relocate.exceptions import AliasNotFoundError

    try:
        store.lookup(name)
    except AliasNotFoundError as e:
        print(f"Error: {e}")
        return e.exit_code
"""

from typing import Optional


# Exit statuses shared by every command.
EXIT_OK = 0
EXIT_MISUSE = 1
EXIT_FAILURE = 2
# Succeeded, but more than one subdirectory matched a prefix.
EXIT_ADVISORY = 3


class RelocateError(Exception):
    """
    Base class for all relocate errors.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: EXIT_FAILURE)
    """

    def __init__(self, message: str, exit_code: int = EXIT_FAILURE):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


# =============================================================================
# Misuse Errors
# =============================================================================

class MisuseError(RelocateError):
    """
    Raised when a command is called incorrectly.

    Commands print their usage text after the message when this is raised.

    Example:
        raise MisuseError("Too many arguments.")
    """

    def __init__(self, message: str):
        super().__init__(message, exit_code=EXIT_MISUSE)


class InvalidAliasNameError(MisuseError):
    """
    Raised when an alias name is empty or contains non-alphanumeric characters.

    Example:
        raise InvalidAliasNameError("my-dir")
    """

    def __init__(self, name: str):
        if not name:
            message = "The empty string is not a valid relocation alias."
        else:
            invalid = "".join(ch for ch in name if not ch.isalnum())
            message = (
                f"There are invalid characters ({invalid}) in the "
                f"relocation alias '{name}'."
            )
        super().__init__(message)
        self.name = name


class InvalidPathError(MisuseError):
    """Raised when the directory to alias is empty."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "An empty string is not a valid directory to alias.")


class UnknownCommandError(MisuseError):
    """Raised when the CLI is asked for a command it does not have."""

    def __init__(self, command: str):
        super().__init__(f"{command}: unknown command")
        self.command = command


class ConfigError(MisuseError):
    """
    Raised when a configuration variable holds an unsupported value.

    Example:
        raise ConfigError("RELOCATE_MODIFY_ENVIRONMENT", "maybe")
    """

    def __init__(self, variable: str, value: str):
        message = (
            f"{variable} must be set to 'y' or 'n': "
            f"'{value}' is an invalid value for it."
        )
        super().__init__(message)
        self.variable = variable
        self.value = value


# =============================================================================
# Lookup Errors
# =============================================================================

class AliasNotFoundError(RelocateError):
    """
    Raised when no relocation alias with the given name exists.

    Example:
        raise AliasNotFoundError("proj")
    """

    def __init__(self, name: str):
        super().__init__(f"There is no relocation alias named '{name}'.")
        self.name = name


class SubdirectoryNotFoundError(RelocateError):
    """
    Raised when no subdirectory of a directory matches a prefix.

    Example:
        raise SubdirectoryNotFoundError("/home/user", "doc")
    """

    def __init__(self, directory: str, prefix: str, message: Optional[str] = None):
        if message is None:
            message = f"There's no subdirectory of {directory} that starts with '{prefix}'."
        super().__init__(message)
        self.directory = directory
        self.prefix = prefix


class DirectoryAccessError(RelocateError):
    """
    Raised when a directory cannot be entered (missing, not a directory,
    permission denied).

    Example:
        raise DirectoryAccessError("/root", "Permission denied")
    """

    def __init__(self, path: str, reason: Optional[str] = None):
        if reason:
            message = f"{path}: {reason}"
        else:
            message = f"{path}: No such file or directory"
        super().__init__(message)
        self.path = path
        self.reason = reason


class UnsetVariableError(RelocateError):
    """
    Raised when a navigation state slot is needed but not set.

    Example:
        raise UnsetVariableError("rp")
    """

    def __init__(self, var_name: str):
        super().__init__(f"The environment variable '{var_name}' isn't set.")
        self.var_name = var_name


# =============================================================================
# Store Errors
# =============================================================================

class AliasConflictError(RelocateError):
    """
    Raised when defining an alias that is already bound without forcing.

    Attributes:
        name: The alias that was being defined
        existing_path: The directory the alias currently relocates to
    """

    def __init__(self, name: str, existing_path: str):
        message = (
            f"The relocation alias '{name}' has already been defined: it\n"
            f"relocates to {existing_path}.\n"
            f"\n"
            f"Use the '-f' option to force replacement of the existing alias\n"
            f"(or choose a different alias)."
        )
        super().__init__(message)
        self.name = name
        self.existing_path = existing_path


class StoreError(RelocateError):
    """
    Raised when the alias store file cannot be read or written.

    Example:
        raise StoreError("/home/user/.relocations", "Permission denied")
    """

    def __init__(self, path: str, details: str):
        super().__init__(f"{path}: {details}")
        self.path = path


def translate_os_error(error: OSError, path: Optional[str] = None) -> DirectoryAccessError:
    """
    Translate an OSError raised while entering or listing a directory.

    Args:
        error: The OSError that was raised
        path: Optional path that caused the error

    Returns:
        DirectoryAccessError naming the offending path

    Example:
        try:
            os.chdir(path)
        except OSError as e:
            raise translate_os_error(e, path)
    """
    target = path or error.filename or "unknown"
    if isinstance(error, FileNotFoundError):
        return DirectoryAccessError(target, "No such file or directory")
    if isinstance(error, NotADirectoryError):
        return DirectoryAccessError(target, "Not a directory")
    if isinstance(error, PermissionError):
        return DirectoryAccessError(target, "Permission denied")
    return DirectoryAccessError(target, error.strerror or str(error))
