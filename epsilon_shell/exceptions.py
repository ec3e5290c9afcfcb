"""
Custom exceptions for the shell.
"""

from typing import Optional


class BaseShellError(Exception):
    """Base exception class for shell errors."""

    pass


class CommandError(BaseShellError):
    """Exception reported to the user and stopped at the command boundary."""

    pass


class EmptyInputError(CommandError):
    """Exception raised when the input line is empty or whitespace only."""

    def __init__(self) -> None:
        super().__init__("No command specified.")


class UnknownCommandError(CommandError):
    """Exception raised when a command or sub-command name is not recognized."""

    def __init__(self, name: str, usage: Optional[str] = None) -> None:
        self.name = name
        self.usage = usage
        message = f"Unknown command: {name}"
        if usage:
            message += f'. Use "{usage}"'
        super().__init__(message)


class MissingArgumentsError(CommandError):
    """Exception raised when a command is missing required tokens."""

    def __init__(self, usage: str) -> None:
        self.usage = usage
        super().__init__(f'No arguments specified. Use "{usage}"')


class InvalidPathError(CommandError):
    """Exception raised when a path segment tries to leave the current directory."""

    def __init__(self, segment: str = "") -> None:
        self.segment = segment
        super().__init__("Invalid path specified.")


class NotFoundError(CommandError):
    """Exception raised when a file or directory does not exist."""

    def __init__(self, kind: str, name: str, location: str) -> None:
        self.kind = kind
        self.name = name
        self.location = location
        super().__init__(f"{kind} not found: {name} in {location}")


class OperationFailedError(CommandError):
    """Exception raised when a file system or launcher operation fails."""

    pass


class FileSystemError(BaseShellError):
    """Exception raised for virtual file system errors."""

    pass


class ApplicationError(BaseShellError):
    """Exception raised for desktop launching errors."""

    pass


class ConfigurationError(BaseShellError):
    """Exception raised for configuration errors."""

    pass
