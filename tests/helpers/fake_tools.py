"""In-process stand-ins for the GNU gettext executables.

FakeRunner records every command and emulates the side effects the
pipelines rely on, using Babel where a real catalog file is needed.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from babel.messages.mofile import write_mo
from babel.messages.pofile import read_po

from htmlgettext.catalog import ToolResult, ToolRunner
from htmlgettext.diagnostics import ToolNotFoundError


def _option(args: Sequence[str], name: str) -> str | None:
    prefix = f"{name}="
    for arg in args:
        if arg.startswith(prefix):
            return arg[len(prefix) :]
    return None


class FakeRunner(ToolRunner):
    """Record commands; emulate msginit, msgfmt and msgmerge.

    Args:
        missing: Tools reported as absent by which()
        failing: Tools that exit with status 1
    """

    def __init__(
        self,
        *,
        missing: Sequence[str] = (),
        failing: Sequence[str] = (),
    ) -> None:
        self.missing = set(missing)
        self.failing = set(failing)
        self.calls: list[tuple[str, ...]] = []
        self.virtual_sources: list[str] = []

    def which(self, name: str) -> str | None:
        return None if name in self.missing else f"/usr/bin/{name}"

    def tools(self) -> list[str]:
        return [call[0] for call in self.calls]

    def run(self, args: Sequence[str], *, cwd: Path | None = None) -> ToolResult:
        argv = tuple(str(a) for a in args)
        self.calls.append(argv)
        tool = argv[0]
        if tool in self.missing:
            raise ToolNotFoundError(tool)
        if tool in self.failing:
            return ToolResult(argv, 1, "", f"{tool}: simulated failure")
        stdout = getattr(self, f"_{tool}")(argv, cwd)
        return ToolResult(argv, 0, stdout, "")

    def _xgettext(self, argv: tuple[str, ...], cwd: Path | None) -> str:
        for arg in argv:
            if arg.endswith("html_strings.py"):
                self.virtual_sources.append(Path(arg).read_text(encoding="utf-8"))
        return ""

    def _msginit(self, argv: tuple[str, ...], cwd: Path | None) -> str:
        pot = Path(_option(argv, "--input") or "")
        output = Path(_option(argv, "--output-file") or "")
        output.write_text(pot.read_text(encoding="utf-8"), encoding="utf-8")
        return ""

    def _msgmerge(self, argv: tuple[str, ...], cwd: Path | None) -> str:
        if "--update" in argv:
            return ""
        po_file = Path(argv[-2])
        return po_file.read_text(encoding="utf-8")

    def _msgfmt(self, argv: tuple[str, ...], cwd: Path | None) -> str:
        output = Path(_option(argv, "--output-file") or "")
        with Path(argv[-1]).open("rb") as f:
            catalog = read_po(f)
        with output.open("wb") as f:
            write_mo(f, catalog, use_fuzzy=False)
        return ""
