"""Diagnostic system for htmlgettext runs.

Provides structured diagnostics with codes and hints, the exception
hierarchy for fatal setup errors, and the run-scoped log.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ConfigurationError,
    DocumentLoadError,
    GettextError,
    InvalidLocaleError,
    ToolNotFoundError,
)
from .log import LogEntry, RunLog
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "DocumentLoadError",
    "ErrorTemplate",
    "GettextError",
    "InvalidLocaleError",
    "LogEntry",
    "RunLog",
    "ToolNotFoundError",
]
