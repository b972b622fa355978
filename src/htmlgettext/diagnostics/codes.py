"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages reported during a run.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

from htmlgettext.enums import Severity

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Tag grammar errors
        2000-2999: Dictionary errors (hash registration and resolution)
        3000-3999: Document errors (loading, mode markers)
        4000-4999: External tool errors
        5000-5999: Catalog consistency (compiled output, fuzzy entries)
        6000-6999: Configuration and module selection
    """

    # Tag grammar (1000-1999)
    INVALID_TAG = 1001

    # Dictionary (2000-2999)
    HASH_NOT_FOUND = 2001
    PREHASHED_SOURCE_TAG = 2002
    HASH_COLLISION = 2003
    EMPTY_BOUND_VALUE = 2004

    # Document (3000-3999)
    DOCUMENT_UNREADABLE = 3001
    INVALID_MODE = 3002
    DOCUMENT_UNWRITABLE = 3003

    # External tools (4000-4999)
    TOOL_FAILED = 4001
    TOOL_NO_OUTPUT = 4002
    TOOL_NOT_FOUND = 4003

    # Catalog consistency (5000-5999)
    MO_NOT_CREATED = 5001
    FUZZY_ENTRIES = 5002
    PO_MISSING = 5003

    # Configuration (6000-6999)
    MODULE_SKIPPED = 6001
    MODULE_FAILED = 6002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable description
        severity: Severity recorded in the run log
        hint: Suggestion for fixing the problem
        path: File the diagnostic refers to (None when not file-specific)
    """

    code: DiagnosticCode
    message: str
    severity: Severity = Severity.ERROR
    hint: str | None = None
    path: str | None = None

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic as a single log line.

        Example output:
            error[HASH_NOT_FOUND]: Hash 'deadbe' ... (help: Was the string removed?)

        Returns:
            Formatted message
        """
        text = f"{self.severity}[{self.code.name}]: {self.message}"
        if self.hint:
            text = f"{text} (help: {self.hint})"
        return text
