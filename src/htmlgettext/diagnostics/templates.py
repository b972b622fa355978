"""Diagnostic message templates.

Centralized factories for every non-fatal problem a run can report.
Python 3.13+. Zero external dependencies.
"""

from htmlgettext.constants import MARKUP_NAME, MODE_META_NAME
from htmlgettext.enums import DocumentMode, Severity

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized diagnostic templates.

    All run log diagnostics are created here, which keeps messages
    consistent and testable by code rather than by text.
    """

    @staticmethod
    def invalid_tag(tag: str, path: str | None = None) -> Diagnostic:
        """Tag does not match ``[domain:](attribute|.)[#hash]``."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_TAG,
            message=f"Invalid {MARKUP_NAME} tag '{tag}'",
            hint="Expected [domain:](attribute|.)[#hash]",
            path=path,
        )

    @staticmethod
    def hash_not_found(tag: str, key: str, path: str | None = None) -> Diagnostic:
        """Hashed tag refers to a string missing from the dictionary.

        Args:
            tag: Raw tag as written in the document
            key: Dictionary key that was looked up
            path: Document being translated

        Returns:
            Diagnostic for HASH_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.HASH_NOT_FOUND,
            message=f"Tag '{tag}' ({key}) not found in dictionary; left unchanged",
            hint="Was the corresponding string removed from the source file?",
            path=path,
        )

    @staticmethod
    def prehashed_source_tag(tag: str, path: str | None = None) -> Diagnostic:
        """Source template carries a tag that already has a hash."""
        return Diagnostic(
            code=DiagnosticCode.PREHASHED_SOURCE_TAG,
            message=f"Source tag '{tag}' is already hashed; tag dropped",
            hint="Source files must use unhashed tags such as '.' or 'title'",
            path=path,
        )

    @staticmethod
    def hash_collision(key: str, existing: str, incoming: str) -> Diagnostic:
        """Two different canonical strings produced the same dictionary key.

        Args:
            key: Colliding dictionary key
            existing: String already registered under the key
            incoming: String that was rejected

        Returns:
            Diagnostic for HASH_COLLISION
        """
        return Diagnostic(
            code=DiagnosticCode.HASH_COLLISION,
            message=f"Hash collision on '{key}': keeping '{existing}', rejecting '{incoming}'",
            hint="Reword one of the strings",
        )

    @staticmethod
    def empty_bound_value(tag: str, path: str | None = None) -> Diagnostic:
        """Unhashed tag in a locale file points at an empty value."""
        return Diagnostic(
            code=DiagnosticCode.EMPTY_BOUND_VALUE,
            message=f"Tag '{tag}' has no text to translate; left unchanged",
            path=path,
        )

    @staticmethod
    def document_unreadable(path: str, reason: str) -> Diagnostic:
        """Document could not be loaded."""
        return Diagnostic(
            code=DiagnosticCode.DOCUMENT_UNREADABLE,
            message=f"Cannot load document: {reason}",
            path=path,
        )

    @staticmethod
    def document_unwritable(path: str, reason: str) -> Diagnostic:
        """Generated document could not be written."""
        return Diagnostic(
            code=DiagnosticCode.DOCUMENT_UNWRITABLE,
            message=f"Cannot write document: {reason}",
            path=path,
        )

    @staticmethod
    def invalid_mode(path: str, found: str | None) -> Diagnostic:
        """Existing locale file carries no usable mode marker.

        Args:
            path: Locale file that was skipped
            found: Marker value found (None when the meta element is absent)

        Returns:
            Diagnostic for INVALID_MODE
        """
        expected = f"{DocumentMode.REPLACE}|{DocumentMode.CHERRY_PICK}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_MODE,
            message=f"{MODE_META_NAME} meta not set or invalid ({found!r}); file skipped",
            hint=f"Expected <meta name='{MODE_META_NAME}' content='{expected}'/>",
            path=path,
        )

    @staticmethod
    def tool_failed(command: str, returncode: int, output: str) -> Diagnostic:
        """External tool exited with a non-zero status.

        Args:
            command: Shell-quoted command line for the log
            returncode: Process exit status
            output: Combined stdout/stderr as produced by the tool

        Returns:
            Diagnostic for TOOL_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.TOOL_FAILED,
            message=f"Command failed with status {returncode}: {command}\n{output}".rstrip(),
        )

    @staticmethod
    def tool_no_output(command: str) -> Diagnostic:
        """External tool succeeded but produced nothing to read."""
        return Diagnostic(
            code=DiagnosticCode.TOOL_NO_OUTPUT,
            message=f"Command produced no output: {command}",
        )

    @staticmethod
    def tool_not_found(tool: str) -> Diagnostic:
        """External executable is missing or cannot be started."""
        return Diagnostic(
            code=DiagnosticCode.TOOL_NOT_FOUND,
            message=f"Required command '{tool}' not found or not executable",
            hint="Install GNU gettext",
        )

    @staticmethod
    def mo_not_created(po_file: str, mo_file: str) -> Diagnostic:
        """Compiled catalog is missing after msgfmt."""
        return Diagnostic(
            code=DiagnosticCode.MO_NOT_CREATED,
            message=f"Failed to create {mo_file} from {po_file}",
            path=po_file,
        )

    @staticmethod
    def fuzzy_entries(po_file: str, msgids: tuple[str, ...]) -> Diagnostic:
        """Catalog still contains fuzzy-matched translations."""
        sample = ", ".join(repr(m) for m in msgids[:3])
        more = f" and {len(msgids) - 3} more" if len(msgids) > 3 else ""
        return Diagnostic(
            code=DiagnosticCode.FUZZY_ENTRIES,
            message=f"{po_file} contains fuzzy translations: {sample}{more}",
            hint="Review the entries and remove the fuzzy flag",
            path=po_file,
        )

    @staticmethod
    def po_missing(po_file: str) -> Diagnostic:
        """Locale catalog to compile does not exist."""
        return Diagnostic(
            code=DiagnosticCode.PO_MISSING,
            message=f"Catalog {po_file} does not exist; run extract first",
            path=po_file,
        )

    @staticmethod
    def module_skipped(module: str, reason: str) -> Diagnostic:
        """Module does not take part in this run."""
        return Diagnostic(
            code=DiagnosticCode.MODULE_SKIPPED,
            message=f"{module}: Skipped. {reason}",
            severity=Severity.INFO,
            path=module,
        )

    @staticmethod
    def module_failed(module: str, reason: str) -> Diagnostic:
        """Module setup raised a configuration error."""
        return Diagnostic(
            code=DiagnosticCode.MODULE_FAILED,
            message=f"{module}: {reason}",
            path=module,
        )
