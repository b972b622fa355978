"""Enumerations for htmlgettext type-safe constants.

Uses StrEnum for automatic string conversion.
StrEnum members are strings themselves, so they compare equal to the raw
values found in documents and log output.

Python 3.13+.
"""

from enum import StrEnum

__all__ = [
    "DocumentMode",
    "Severity",
    "SynthesisOutcome",
]


class DocumentMode(StrEnum):
    """Value of the ``<meta name="gettext">`` mode marker.

    StrEnum provides automatic string conversion: str(DocumentMode.REPLACE) == "replace"
    """

    TRANSLATE = "translate"
    """Source template: scanned for strings, never written by the compiler."""

    REPLACE = "replace"
    """Generated locale file: rebuilt from the template on every compile."""

    CHERRY_PICK = "cherry-pick"
    """Hand-edited locale file: only its tagged values are refreshed."""


class Severity(StrEnum):
    """Severity of a run log entry.

    StrEnum provides automatic string conversion: str(Severity.ERROR) == "error"
    """

    INFO = "info"
    """Progress report; never affects the exit status."""

    WARNING = "warning"
    """Worth a look but does not fail the run."""

    ERROR = "error"
    """Something failed or needs review; the run exits with status 1."""


class SynthesisOutcome(StrEnum):
    """Result of producing one locale file.

    StrEnum provides automatic string conversion: str(SynthesisOutcome.INVALID) == "invalid"
    """

    REPLACED = "replace"
    """Target was (re)built from a clone of the template."""

    CHERRY_PICKED = "cherry-pick"
    """Existing target was re-translated in place."""

    INVALID = "invalid"
    """Target carries no recognized mode marker; left untouched."""

    FAILED = "failed"
    """Target could not be read or written; left untouched."""
