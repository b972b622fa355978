"""Produce per-locale copies of a translated template.

The target file decides how it is produced:

- absent: clone the template, mark it ``replace``, translate, write;
- ``replace``: same as absent (the old file is overwritten);
- ``cherry-pick``: keep the file and refresh only its tagged values;
- anything else: report and leave the file untouched.

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from htmlgettext.diagnostics import DocumentLoadError, ErrorTemplate
from htmlgettext.enums import DocumentMode, SynthesisOutcome
from htmlgettext.markup import clone_document, load_document, read_mode, set_mode, write_document

if TYPE_CHECKING:
    from lxml import etree

    from htmlgettext.diagnostics import RunLog
    from htmlgettext.locale_utils import LocaleTarget

    from .dictionary import Dictionary
    from .translator import DocumentTranslator

__all__ = ["LocaleFileSynthesizer", "localized_file_name"]


def localized_file_name(path: Path, locale: LocaleTarget) -> Path:
    """Return ``dir/<stem>.<lang-REGION><suffix>`` for a source path.

    Example:
        >>> localized_file_name(Path("site/index.html"), LocaleTarget("cs", "CZ"))
        PosixPath('site/index.cs-CZ.html')
    """
    return path.with_name(f"{path.stem}.{locale.web}{path.suffix}")


class LocaleFileSynthesizer:
    """Write one translated locale file per (template, locale).

    Args:
        translator: Translator applied to every produced document
        log: Run log
    """

    __slots__ = ("_log", "_translator")

    def __init__(self, translator: DocumentTranslator, log: RunLog) -> None:
        self._translator = translator
        self._log = log

    def synthesize(
        self,
        template: etree._ElementTree,
        dictionary: Dictionary,
        target: Path,
        locale: str,
        default_domain: str,
    ) -> SynthesisOutcome:
        """Produce ``target`` for ``locale``.

        The template is never mutated.

        Returns:
            How the target was handled
        """
        label = str(target)
        if target.exists():
            try:
                existing = load_document(target)
            except DocumentLoadError as e:
                self._log.report(ErrorTemplate.document_unreadable(label, str(e)))
                return SynthesisOutcome.FAILED
            mode = read_mode(existing)
        else:
            existing = None
            mode = DocumentMode.REPLACE

        if mode == DocumentMode.REPLACE:
            document = clone_document(template)
            set_mode(document, DocumentMode.REPLACE)
            outcome = SynthesisOutcome.REPLACED
        elif mode == DocumentMode.CHERRY_PICK and existing is not None:
            document = existing
            outcome = SynthesisOutcome.CHERRY_PICKED
        else:
            self._log.report(ErrorTemplate.invalid_mode(label, mode))
            return SynthesisOutcome.INVALID

        self._translator.translate(document, dictionary, default_domain, locale, source=label)
        try:
            write_document(document, target)
        except OSError as e:
            self._log.report(ErrorTemplate.document_unwritable(label, str(e)))
            return SynthesisOutcome.FAILED
        self._log.info(f"  ✓ {label} ({outcome})")
        return outcome
