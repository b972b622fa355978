"""Bridge between document strings and gettext catalogs.

Two directions:

- Lookup: canonical string -> translated string for a (domain, locale),
  served from compiled ``.mo`` catalogs through Babel.
- Emit: canonical strings found in HTML -> entries of a virtual Python
  source that ``xgettext`` merges into the catalog template.

Lookup returns the message unchanged when no translation exists, which is
also what an identical translation looks like. Callers cannot tell the two
apart.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from babel.support import NullTranslations, Translations

from htmlgettext.syntax import normalize

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = [
    "CatalogLookup",
    "CatalogTemplateWriter",
    "MoCatalogLookup",
    "StaticCatalogLookup",
]

logger = logging.getLogger(__name__)


class CatalogLookup(Protocol):
    """Translation lookup injected into the document translator."""

    def lookup(self, domain: str, message: str, locale: str) -> str:
        """Translate ``message`` in ``domain`` for a POSIX ``locale``.

        Returns:
            The translation, or ``message`` itself when there is none
        """


class MoCatalogLookup:
    """Lookup backed by compiled catalogs on disk.

    Each domain maps to a directory laid out as
    ``<dir>/<locale>/LC_MESSAGES/<domain>.mo``. Catalogs are loaded lazily and
    cached per (domain, locale) until reload().

    Args:
        domain_dirs: Domain name -> locale directory
    """

    __slots__ = ("_cache", "_domain_dirs")

    def __init__(self, domain_dirs: Mapping[str, Path]) -> None:
        self._domain_dirs: dict[str, Path] = {name: Path(path) for name, path in domain_dirs.items()}
        self._cache: dict[tuple[str, str], NullTranslations] = {}

    @property
    def domains(self) -> tuple[str, ...]:
        return tuple(self._domain_dirs)

    def bind(self, domain: str, directory: Path) -> None:
        """Add or replace a domain directory."""
        self._domain_dirs[domain] = Path(directory)
        self._cache = {k: v for k, v in self._cache.items() if k[0] != domain}

    def reload(self) -> None:
        """Forget loaded catalogs so recompiled ``.mo`` files are picked up."""
        self._cache.clear()

    def _translations(self, domain: str, locale: str) -> NullTranslations:
        key = (domain, locale)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        directory = self._domain_dirs.get(domain)
        if directory is None:
            logger.debug("No catalog directory bound for domain %s", domain)
            translations: NullTranslations = NullTranslations()
        else:
            translations = Translations.load(dirname=directory, locales=[locale], domain=domain)
        self._cache[key] = translations
        return translations

    def lookup(self, domain: str, message: str, locale: str) -> str:
        return self._translations(domain, locale).gettext(message)


class StaticCatalogLookup:
    """Lookup over an in-memory table.

    Args:
        catalogs: (domain, locale) -> {msgid: msgstr}
    """

    __slots__ = ("_catalogs",)

    def __init__(self, catalogs: Mapping[tuple[str, str], Mapping[str, str]]) -> None:
        self._catalogs = {key: dict(table) for key, table in catalogs.items()}

    def lookup(self, domain: str, message: str, locale: str) -> str:
        return self._catalogs.get((domain, locale), {}).get(message, message)


class CatalogTemplateWriter:
    """Collect HTML strings as input for ``xgettext -L Python``.

    Strings with an explicit domain become ``dgettext("domain", "...")``
    calls, the rest ``_("...")``. Each call is preceded by a comment that
    ``xgettext --add-comments`` copies into the template as the extracted
    comment. Identical entries are emitted once.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[tuple[str | None, str, str], None] = {}

    def emit(self, domain: str | None, text: str, comment: str = "") -> None:
        if text:
            self._entries[(domain, text, normalize(comment))] = None

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def render(self) -> str:
        """Return the virtual source text."""
        lines: list[str] = []
        for domain, text, comment in self._entries:
            if comment:
                lines.append(f"# {comment}")
            literal = json.dumps(text, ensure_ascii=False)
            if domain:
                lines.append(f"dgettext({json.dumps(domain)}, {literal})")
            else:
                lines.append(f"_({literal})")
        return "\n".join(lines) + "\n" if lines else ""

    def write(self, path: Path) -> None:
        path.write_text(self.render(), encoding="utf-8")
