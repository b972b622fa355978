"""Catalog layout of one translatable module.

A module is a directory with a ``locale/`` subdirectory::

    <module>/
        locale/
            messages.pot
            LINGUAS
            cs_CZ.po
            cs_CZ/LC_MESSAGES/<module>.mo
        install/dist/locale/       (optional, browser catalogs)
            messages.pot
            cs-CZ.json

The text domain is the module directory name.

Python 3.13+.
"""

from __future__ import annotations

import fnmatch
import os
from itertools import batched
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from htmlgettext.constants import (
    DEFAULT_DOMAIN,
    EXCLUDE_FILES,
    LINGUAS_FILENAME,
    LOCALE_DIR,
    POT_FILENAME,
    POT_HEADER,
)
from htmlgettext.diagnostics import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from htmlgettext.catalog import GettextToolchain
    from htmlgettext.diagnostics import RunLog
    from htmlgettext.locale_utils import LocaleConfig

__all__ = [
    "GettextModule",
    "ModulePathResolver",
    "ModuleResolver",
]


class ModuleResolver(Protocol):
    """Maps a file to the text domain of the module that owns it."""

    def domain_for(self, path: Path) -> str:
        """Return the default text domain for ``path``."""


class ModulePathResolver:
    """Resolve domains from a set of module directories.

    The deepest module directory containing the file wins; files outside
    every module fall back to ``messages``.
    """

    __slots__ = ("_roots",)

    def __init__(self, module_paths: Iterable[Path]) -> None:
        roots = {Path(p).resolve() for p in module_paths}
        self._roots = sorted(roots, key=lambda p: len(p.parts), reverse=True)

    def domain_for(self, path: Path) -> str:
        resolved = Path(path).resolve()
        for root in self._roots:
            if resolved.is_relative_to(root):
                return root.name
        return DEFAULT_DOMAIN


def _check_directory(path: Path) -> None:
    if not path.is_dir():
        msg = f"Directory {path} does not exist"
        raise ConfigurationError(msg)
    if not os.access(path, os.R_OK | os.W_OK | os.X_OK):
        msg = f"Directory {path} is not readable and writable"
        raise ConfigurationError(msg)


class GettextModule:
    """Paths, locales and files of one module.

    Construction validates the layout and the toolchain, then creates the
    catalog template skeleton and ``LINGUAS`` when they are missing.

    Args:
        path: Module directory (the directory holding ``locale/``)
        locales: Supported locales of the run
        toolchain: Gettext toolchain; its requirements are checked here
        log: Run log
        name: Package name for catalog headers (default: directory name)
        linguas: Read and create locale/LINGUAS (off for browser catalogs)

    Raises:
        ConfigurationError: If the layout or toolchain is unusable
    """

    def __init__(
        self,
        path: Path,
        locales: LocaleConfig,
        toolchain: GettextToolchain,
        log: RunLog,
        *,
        name: str | None = None,
        linguas: bool = True,
    ) -> None:
        self.path = Path(path).resolve()
        self.name = name or self.path.name
        self.domain = self.path.name
        self.toolchain = toolchain
        self.log = log
        self.locale_dir = self.path / LOCALE_DIR
        self.pot_file = self.locale_dir / POT_FILENAME
        self.linguas_file = self.locale_dir / LINGUAS_FILENAME

        _check_directory(self.path)
        _check_directory(self.locale_dir)
        toolchain.check_requirements()

        if not self.pot_file.exists():
            self.pot_file.write_text(POT_HEADER, encoding="utf-8")
            log.info(f"  ✓ Created {self.pot_file}")
        if linguas and not self.linguas_file.exists():
            self.linguas_file.write_text("\n".join(locales.posix_codes) + "\n", encoding="utf-8")
            log.info(f"  ✓ Created {self.linguas_file}")

        listed = self._read_linguas() if linguas else []
        self.locales: tuple[str, ...] = tuple(
            dict.fromkeys([*locales.posix_codes, *listed, locales.default.posix])
        )

    def _read_linguas(self) -> list[str]:
        lines = self.linguas_file.read_text(encoding="utf-8").splitlines()
        return [line.strip() for line in lines if line.strip() and not line.lstrip().startswith("#")]

    def __repr__(self) -> str:
        return f"GettextModule({str(self.path)!r}, domain={self.domain!r})"

    def po_file(self, locale: str) -> Path:
        return self.locale_dir / f"{locale}.po"

    def mo_file(self, locale: str) -> Path:
        return self.locale_dir / locale / "LC_MESSAGES" / f"{self.domain}.mo"

    def relative(self, path: Path) -> str:
        """Return ``./relative/path`` for a file inside the module."""
        return f"./{Path(path).relative_to(self.path).as_posix()}"

    def find_files(self, patterns: Sequence[str], exclude: Sequence[str] = EXCLUDE_FILES) -> list[Path]:
        """List files matching any of ``patterns``, sorted.

        Exclusion patterns are matched against ``./relative/path``.
        """
        found: list[Path] = []
        for directory, dirnames, filenames in os.walk(self.path):
            dirnames.sort()
            for filename in sorted(filenames):
                if not any(fnmatch.fnmatch(filename, p) for p in patterns):
                    continue
                path = Path(directory) / filename
                relative = self.relative(path)
                if any(fnmatch.fnmatch(relative, p) for p in exclude):
                    continue
                found.append(path)
        return found

    @staticmethod
    def batches(files: Sequence[Path], size: int) -> Iterator[tuple[Path, ...]]:
        """Split ``files`` into groups of at most ``size``."""
        return batched(files, size)
