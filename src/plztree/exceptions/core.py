"""
Exception classes for plztree command tree compilation and resolution.

This module defines the exception types raised while loading a configuration,
compiling it into a grammar, parsing an invocation against that grammar and
resolving the matched command back to its definition.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ErrorContext:
    """
    Location information for configuration errors.

    Captures where in the command tree (and optionally in which file) an error
    was detected so messages can point the user at the offending definition.

    Params:
        command_path: Keys of the commands from the root down to the offending one
        config_path: Configuration file the tree was loaded from, if known
    """

    command_path: list[str] = field(default_factory=list)
    config_path: Path | None = None

    def format_location(self) -> str:
        """
        Format location information for inclusion in an error message.

        Returns:
            Indented location lines, empty when nothing is known
        """
        lines = []

        if self.command_path:
            lines.append(f"  in command '{' '.join(self.command_path)}'")

        if self.config_path is not None:
            lines.append(f"  in file {self.config_path}")

        return "\n".join(lines)


class PlzTreeError(Exception):
    """Base exception for all plztree errors."""

    pass


class ConfigLoadError(PlzTreeError):
    """Raised when a configuration document cannot be read or validated."""

    def __init__(self, source: str, reason: str):
        """
        Initialize the exception.

        Params:
            source: File path or description of the configuration source
            reason: Why loading failed
        """
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot load configuration from {source}: {reason}")


class DuplicateCommandNameError(PlzTreeError):
    """Raised when two visible sibling commands resolve to the same name."""

    def __init__(
        self,
        name: str,
        keys: list[str],
        context: ErrorContext | None = None,
    ):
        """
        Initialize the exception.

        Params:
            name: The colliding command name
            keys: Map keys of the commands sharing that name
            context: Location of the parent command, if any
        """
        self.name = name
        self.keys = keys
        self.context = context

        message = f"Commands {', '.join(repr(k) for k in keys)} all resolve to the name '{name}'"
        if context:
            location = context.format_location()
            if location:
                message = f"{message}\n{location}"

        super().__init__(message)


class ReservedArgumentError(PlzTreeError):
    """Raised when a variable key collides with a reserved argument identifier."""

    def __init__(self, variable_key: str, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            variable_key: The variable key that uses a reserved identifier
            context: Location of the command where the collision happened
        """
        self.variable_key = variable_key
        self.context = context

        message = (
            f"Variable '{variable_key}' uses an identifier reserved for alias arguments; "
            f"rename the variable"
        )
        if context:
            location = context.format_location()
            if location:
                message = f"{message}\n{location}"

        super().__init__(message)


class CommandResolutionError(PlzTreeError):
    """Raised when a matched command cannot be found in the configuration.

    This means the compiled grammar and the configuration tree have diverged,
    which is a programming error rather than a user mistake.
    """

    def __init__(self, command_name: str, available: list[str]):
        self.command_name = command_name
        self.available = available
        super().__init__(
            f"Matched command '{command_name}' has no definition; available: {available}"
        )


class GrammarParseError(PlzTreeError):
    """Raised when the grammar engine rejects an invocation."""

    def __init__(self, message: str, usage: str | None = None):
        """
        Initialize the exception.

        Params:
            message: Parser error message
            usage: Usage text of the parser that rejected the input
        """
        self.message = message
        self.usage = usage
        super().__init__(message)


class UnsupportedPlatformError(PlzTreeError):
    """Raised when the running platform is not one plztree knows about."""

    def __init__(self, platform_name: str):
        self.platform_name = platform_name
        super().__init__(f"Unsupported platform '{platform_name}'")
