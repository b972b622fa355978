"""Re-inject translations into a hashed document.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from htmlgettext.diagnostics import ErrorTemplate
from htmlgettext.markup import scan
from htmlgettext.syntax import content_hash, format_tags, normalize

if TYPE_CHECKING:
    from lxml import etree

    from htmlgettext.catalog import CatalogLookup
    from htmlgettext.diagnostics import RunLog

    from .dictionary import Dictionary

__all__ = ["DocumentTranslator"]


class DocumentTranslator:
    """Write translated strings into every annotated element of a document.

    For each tag:

    - unhashed (a hand-added tag in a cherry-picked file): the bound value is
      normalized, hashed and registered, then translated;
    - hashed: the canonical string is resolved through the dictionary; a
      missing key is reported once and the tag is kept verbatim with its
      bound value untouched.

    Args:
        catalog: Translation lookup
        log: Run log receiving per-tag diagnostics
    """

    __slots__ = ("_catalog", "_log")

    def __init__(self, catalog: CatalogLookup, log: RunLog) -> None:
        self._catalog = catalog
        self._log = log

    def translate(
        self,
        document: etree._ElementTree,
        dictionary: Dictionary,
        default_domain: str,
        locale: str,
        *,
        source: str = "<document>",
    ) -> int:
        """Translate ``document`` in place.

        ``dictionary`` is not modified; strings registered for unhashed tags
        live in a private copy so that one locale never sees another's
        registrations.

        Args:
            document: Document to mutate
            dictionary: Keys of the template the document derives from
            default_domain: Domain for tags without an explicit prefix
            locale: POSIX locale to translate into
            source: Path or label used in diagnostics

        Returns:
            Number of bound values written
        """
        known = dictionary.copy()
        written = 0
        for node in scan(document, ensure_utf8=True):
            tags: list[str] = []
            for raw, annotation in node.tags(self._log, path=source):
                domain = annotation.domain or default_domain
                if annotation.hash is None:
                    canonical: str | None = normalize(node.read(annotation.keyword))
                    if not canonical:
                        self._log.report(ErrorTemplate.empty_bound_value(raw, source))
                        tags.append(raw)
                        continue
                    hash_value = content_hash(canonical)
                    known.register(domain, hash_value, canonical, self._log)
                else:
                    hash_value = annotation.hash
                    canonical = known.resolve(domain, hash_value)
                    if canonical is None:
                        key = known.key(domain, hash_value)
                        self._log.report(ErrorTemplate.hash_not_found(raw, key, source))
                        tags.append(raw)
                        continue
                node.write(annotation.keyword, self._catalog.lookup(domain, canonical, locale))
                tags.append(annotation.with_hash(hash_value).format())
                written += 1
            node.set_marker(format_tags(tags))
        return written
