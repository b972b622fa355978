"""Exception hierarchy with structured diagnostics.

Only conditions that make a whole module unusable raise. Per-tag, per-file
and per-tool problems are reported into the run log instead.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "DocumentLoadError",
    "GettextError",
    "InvalidLocaleError",
    "ToolNotFoundError",
]


class GettextError(Exception):
    """Base exception for all htmlgettext errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize GettextError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(GettextError):
    """Module or run setup is unusable.

    Raised before any work starts: missing or unwritable locale directory,
    missing gettext executables, invalid locale configuration.
    """


class InvalidLocaleError(ConfigurationError, ValueError):
    """Locale tag cannot be parsed, lacks a region, or is not supported."""


class ToolNotFoundError(ConfigurationError):
    """External gettext executable is not installed or not on PATH.

    Attributes:
        tool: Executable name that could not be started
    """

    def __init__(self, tool: str) -> None:
        """Initialize ToolNotFoundError.

        Args:
            tool: Executable name that could not be started
        """
        super().__init__(ErrorTemplate.tool_not_found(tool))
        self.tool = tool


class DocumentLoadError(GettextError):
    """Document could not be read or contains no markup at all."""
