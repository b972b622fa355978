"""Run-scoped log.

A RunLog is created per extract/compile run and passed explicitly to every
component. Entries keep their order and severity so callers can print them,
test them, or derive an exit status. Every entry is mirrored to the stdlib
logger of this module.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from htmlgettext.enums import Severity

from .codes import Diagnostic, DiagnosticCode

if TYPE_CHECKING:
    from collections.abc import Iterator

__all__ = ["LogEntry", "RunLog"]

logger = logging.getLogger(__name__)

_LEVELS: dict[Severity, int] = {
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}

# A path starts the message or follows whitespace, a quote, "=" or "(".
_PATH_START = r"(?<![^\s'\"=(])"


def _root_pattern(root: Path) -> re.Pattern[str]:
    """Match ``root`` where it starts an absolute path in a message.

    ``/x/site`` matches ``/x/site/a.html`` and a bare ``/x/site`` but not the
    sibling ``/x/site-blog``. For the filesystem root only the leading
    separator of each absolute path matches, so ``/srv/a`` reads ``./srv/a``.
    """
    sep = re.escape(os.sep)
    stem = str(root).rstrip(os.sep)
    if not stem or root.anchor == str(root):
        return re.compile(rf"{_PATH_START}{re.escape(stem)}(?={sep}[^\s{sep}])")
    return re.compile(rf"{_PATH_START}{re.escape(stem)}(?=[{sep}\s'\":,;)]|$)")


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One line of the run log.

    Attributes:
        severity: Entry severity
        message: Message with absolute paths already shortened
        code: Diagnostic code when the entry came from a Diagnostic
    """

    severity: Severity
    message: str
    code: DiagnosticCode | None = None

    def format(self) -> str:
        """Render as ``SEVERITY: message`` (info entries have no prefix)."""
        if self.severity is Severity.INFO:
            return self.message
        return f"{self.severity.upper()}: {self.message}"


class RunLog:
    """Ordered, severity-tagged log owned by one run.

    Args:
        root: Absolute paths below this directory are printed relative to it
            as ``./...``. None leaves messages untouched.
    """

    __slots__ = ("_entries", "_root")

    def __init__(self, root: Path | None = None) -> None:
        self._entries: list[LogEntry] = []
        self._root = _root_pattern(root.resolve()) if root is not None else None

    def add(
        self,
        severity: Severity,
        message: str,
        code: DiagnosticCode | None = None,
    ) -> LogEntry:
        """Append an entry and mirror it to the stdlib logger."""
        if self._root is not None:
            message = self._root.sub(".", message)
        entry = LogEntry(severity=severity, message=message, code=code)
        self._entries.append(entry)
        logger.log(_LEVELS[severity], "%s", message)
        return entry

    def info(self, message: str) -> LogEntry:
        return self.add(Severity.INFO, message)

    def warning(self, message: str) -> LogEntry:
        return self.add(Severity.WARNING, message)

    def error(self, message: str) -> LogEntry:
        return self.add(Severity.ERROR, message)

    def report(self, diagnostic: Diagnostic) -> LogEntry:
        """Append a structured diagnostic.

        The path, when present, prefixes the message so that entries stay
        readable once detached from the diagnostic object.
        """
        message = diagnostic.message
        if diagnostic.hint:
            message = f"{message} {diagnostic.hint}"
        if diagnostic.path and not message.startswith(diagnostic.path):
            message = f"{diagnostic.path}: {message}"
        return self.add(diagnostic.severity, message, diagnostic.code)

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        return tuple(self._entries)

    @property
    def errors(self) -> tuple[LogEntry, ...]:
        """Entries with ERROR severity."""
        return tuple(e for e in self._entries if e.severity is Severity.ERROR)

    @property
    def has_errors(self) -> bool:
        return any(e.severity is Severity.ERROR for e in self._entries)

    def codes(self) -> list[DiagnosticCode]:
        """Diagnostic codes in order of appearance (entries without a code skipped)."""
        return [e.code for e in self._entries if e.code is not None]

    def lines(self) -> list[str]:
        return [e.format() for e in self._entries]

    def clear(self) -> None:
        self._entries.clear()

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
