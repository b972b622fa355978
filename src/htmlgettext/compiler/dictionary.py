"""Per-document string dictionary.

The builder turns a ``translate``-mode source document into a template whose
tags carry content hashes, plus the dictionary needed to map those hashes
back to their canonical strings when the template is translated.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from htmlgettext.diagnostics import ErrorTemplate
from htmlgettext.markup import clone_document, scan
from htmlgettext.syntax import content_hash, format_tags, normalize

if TYPE_CHECKING:
    from lxml import etree

    from htmlgettext.diagnostics import RunLog
    from htmlgettext.syntax import Annotation

__all__ = [
    "BuildResult",
    "Dictionary",
    "DictionaryBuilder",
    "SourceString",
]


class Dictionary(Mapping[str, str]):
    """Mapping ``"{domain}:#{hash}"`` -> canonical string.

    Registration is first-wins: a key already bound to a different string is
    reported as a collision and left unchanged.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._entries: dict[str, str] = dict(entries or {})

    @staticmethod
    def key(domain: str, hash_value: str) -> str:
        return f"{domain}:#{hash_value}"

    def register(self, domain: str, hash_value: str, canonical: str, log: RunLog | None = None) -> bool:
        """Bind ``canonical`` under its key.

        Returns:
            False when the key was already bound to a different string
        """
        key = self.key(domain, hash_value)
        existing = self._entries.setdefault(key, canonical)
        if existing != canonical:
            if log is not None:
                log.report(ErrorTemplate.hash_collision(key, existing, canonical))
            return False
        return True

    def resolve(self, domain: str, hash_value: str) -> str | None:
        return self._entries.get(self.key(domain, hash_value))

    def copy(self) -> Dictionary:
        return Dictionary(self._entries)

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Dictionary({self._entries!r})"


@dataclass(frozen=True, slots=True)
class SourceString:
    """A canonical string found in a source document.

    Attributes:
        text: Canonical string (the catalog msgid)
        domain: Explicit tag domain, None for the file's default domain
        comment: Where the string came from, for translators
    """

    text: str
    domain: str | None
    comment: str


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Output of DictionaryBuilder.build().

    Attributes:
        template: Copy of the source with every valid tag hashed
        dictionary: Keys of every hashed tag in the template
        strings: Canonical strings in document order, for catalog extraction
    """

    template: etree._ElementTree
    dictionary: Dictionary
    strings: tuple[SourceString, ...]


class DictionaryBuilder:
    """Build hashed templates from ``translate``-mode source documents.

    Args:
        default_domain: Domain for tags without an explicit ``domain:`` prefix
        log: Run log receiving per-tag diagnostics
    """

    __slots__ = ("_default_domain", "_log")

    def __init__(self, default_domain: str, log: RunLog) -> None:
        self._default_domain = default_domain
        self._log = log

    def build(self, document: etree._ElementTree, *, source: str = "<document>") -> BuildResult:
        """Hash every tag of a source document.

        The source document is not modified. Tags that already carry a hash
        are reported and dropped; tags whose bound value normalizes to an
        empty string are dropped silently.

        Args:
            document: Parsed source document
            source: Path or label used in comments and diagnostics

        Returns:
            BuildResult with the template, dictionary and extracted strings
        """
        template = clone_document(document)
        dictionary = Dictionary()
        strings: list[SourceString] = []

        for node in scan(template, ensure_utf8=True):
            excerpt = node.describe()
            hashed: list[Annotation] = []
            for raw, annotation in node.tags(self._log, path=source):
                if annotation.hash is not None:
                    self._log.report(ErrorTemplate.prehashed_source_tag(raw, source))
                    continue
                canonical = normalize(node.read(annotation.keyword))
                if not canonical:
                    continue
                hash_value = content_hash(canonical)
                dictionary.register(
                    annotation.domain or self._default_domain, hash_value, canonical, self._log
                )
                hashed.append(annotation.with_hash(hash_value))
                if annotation.binds_text:
                    comment = f"{source}: Text content of {excerpt}"
                else:
                    comment = f"{source}: Attribute {annotation.keyword} of {excerpt}"
                strings.append(SourceString(canonical, annotation.domain, comment))
            node.set_marker(format_tags(hashed))

        return BuildResult(template=template, dictionary=dictionary, strings=tuple(strings))
