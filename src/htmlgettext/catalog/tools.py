"""External gettext tool invocation.

Every tool runs from a structured argument list (never a shell string) with
captured output and an explicit exit-status check. Failures are reported to
the run log with the full command line and the tool's own output; only a
missing executable raises.

Python 3.13+.
"""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING

from htmlgettext.constants import PACKAGE_VERSION, REQUIRED_TOOLS
from htmlgettext.diagnostics import ConfigurationError, ErrorTemplate, ToolNotFoundError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from htmlgettext.diagnostics import RunLog

__all__ = [
    "GettextToolchain",
    "ToolResult",
    "ToolRunner",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ToolResult:
    """Outcome of one external command.

    Attributes:
        args: Argument list as executed
        returncode: Process exit status
        stdout: Captured standard output
        stderr: Captured standard error
    """

    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def command(self) -> str:
        """Command line quoted for display."""
        return shlex.join(self.args)

    @property
    def output(self) -> str:
        return "\n".join(part for part in (self.stdout.strip(), self.stderr.strip()) if part)


class ToolRunner:
    """Run commands with ``subprocess`` and capture their output.

    Subclass or replace to run without real executables.
    """

    def run(self, args: Sequence[str], *, cwd: Path | None = None) -> ToolResult:
        """Run a command to completion.

        Raises:
            ToolNotFoundError: If the executable cannot be started
        """
        argv = tuple(str(a) for a in args)
        logger.debug("Running %s", shlex.join(argv))
        try:
            completed = subprocess.run(
                argv,
                cwd=cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            raise ToolNotFoundError(argv[0]) from e
        return ToolResult(argv, completed.returncode, completed.stdout, completed.stderr)

    def which(self, name: str) -> str | None:
        return shutil.which(name)


class GettextToolchain:
    """Typed wrappers around xgettext, msginit, msgmerge and msgfmt.

    Args:
        log: Run log receiving success and failure lines
        runner: Command runner (default: real subprocesses)
    """

    __slots__ = ("_log", "_runner")

    def __init__(self, log: RunLog, runner: ToolRunner | None = None) -> None:
        self._log = log
        self._runner = runner if runner is not None else ToolRunner()

    @property
    def runner(self) -> ToolRunner:
        return self._runner

    def check_requirements(self) -> None:
        """Verify every gettext executable is on PATH.

        Raises:
            ConfigurationError: Naming the first missing tool
        """
        for tool in REQUIRED_TOOLS:
            if self._runner.which(tool) is None:
                raise ToolNotFoundError(tool)

    def _run(self, args: Sequence[str], success: str, *, cwd: Path | None = None) -> ToolResult:
        result = self._runner.run(args, cwd=cwd)
        if result.ok:
            self._log.info(f"  ⚡ {success}")
        else:
            self._log.report(ErrorTemplate.tool_failed(result.command, result.returncode, result.output))
        return result

    def xgettext(
        self,
        files: Sequence[Path | str],
        pot_file: Path,
        *,
        package_name: str,
        language: str,
        options: Sequence[str] = (),
        package_version: str = PACKAGE_VERSION,
        cwd: Path | None = None,
    ) -> ToolResult:
        """Merge strings of ``files`` into ``pot_file`` (which must exist)."""
        if not files:
            msg = "xgettext needs at least one input file"
            raise ConfigurationError(msg)
        args = [
            "xgettext",
            "--verbose",
            "--omit-header",
            "--join-existing",
            "--from-code=UTF-8",
            "--sort-by-file",
            f"--package-version={package_version}",
            f"--package-name={package_name}",
            f"--language={language}",
            *options,
            f"--output={pot_file}",
            *(str(f) for f in files),
        ]
        return self._run(args, f"Extracted {len(files)} {language} file(s) into {pot_file}", cwd=cwd)

    def msginit(self, pot_file: Path, po_file: Path, locale: str) -> ToolResult:
        args = [
            "msginit",
            "--no-translator",
            f"--input={pot_file}",
            f"--locale={locale}",
            f"--output-file={po_file}",
        ]
        return self._run(args, f"Created {po_file}")

    def msgmerge_update(self, po_file: Path, pot_file: Path) -> ToolResult:
        args = ["msgmerge", "--previous", "--update", str(po_file), str(pot_file)]
        return self._run(args, f"Updated {po_file}")

    def msgmerge_stdout(self, po_file: Path, pot_file: Path) -> ToolResult:
        """Merge without fuzzy matching and return the catalog on stdout."""
        args = ["msgmerge", "--no-fuzzy-matching", str(po_file), str(pot_file)]
        return self._run(args, f"Merged {po_file} with {pot_file}")

    def msgfmt(self, po_file: Path, mo_file: Path) -> ToolResult:
        args = ["msgfmt", "--strict", f"--output-file={mo_file}", str(po_file)]
        return self._run(args, f"Compiled {po_file} into {mo_file}")
