"""Tag grammar for the ``gettext`` markup attribute.

The attribute value is a whitespace-separated list of tags::

    tag     := [domain ":"] keyword ["#" hash]
    keyword := "." | word        ("." binds the element text)
    domain  := word
    hash    := word

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from htmlgettext.diagnostics import ErrorTemplate

if TYPE_CHECKING:
    from collections.abc import Iterable

    from htmlgettext.diagnostics import RunLog

__all__ = [
    "TEXT_KEYWORD",
    "Annotation",
    "format_tags",
    "parse_tag",
    "parse_tags",
]

TEXT_KEYWORD = "."

_TAG_RE = re.compile(
    r"^(?:(?P<domain>\w+):)?(?P<keyword>\w+|\.)(?:#(?P<hash>\w+))?$",
    re.ASCII,
)


@dataclass(frozen=True, slots=True)
class Annotation:
    """One parsed tag.

    Attributes:
        keyword: "." for the element text, otherwise an attribute name
        domain: Explicit text domain, None to use the file's default
        hash: Content hash, None when the tag has not been hashed yet
    """

    keyword: str
    domain: str | None = None
    hash: str | None = None

    @property
    def binds_text(self) -> bool:
        return self.keyword == TEXT_KEYWORD

    def with_hash(self, hash_value: str) -> Annotation:
        """Return a copy carrying ``hash_value``."""
        return replace(self, hash=hash_value)

    def format(self) -> str:
        """Serialize back to ``[domain:]keyword[#hash]``."""
        text = self.keyword
        if self.domain:
            text = f"{self.domain}:{text}"
        if self.hash:
            text = f"{text}#{self.hash}"
        return text

    def __str__(self) -> str:
        return self.format()


def parse_tag(tag: str) -> Annotation | None:
    """Parse a single tag, returning None when it does not match the grammar."""
    match = _TAG_RE.match(tag)
    if match is None:
        return None
    return Annotation(
        keyword=match.group("keyword"),
        domain=match.group("domain"),
        hash=match.group("hash"),
    )


def parse_tags(
    text: str,
    log: RunLog | None = None,
    *,
    path: str | None = None,
) -> list[tuple[str, Annotation]]:
    """Parse a ``gettext`` attribute value.

    Invalid tags are skipped; each one is reported to ``log`` when given.
    A raw tag repeated in the same attribute is kept once.

    Args:
        text: Attribute value
        log: Run log receiving INVALID_TAG diagnostics
        path: Document path used in diagnostics

    Returns:
        (raw tag, Annotation) pairs in attribute order
    """
    result: list[tuple[str, Annotation]] = []
    seen: set[str] = set()
    for raw in text.split():
        if raw in seen:
            continue
        seen.add(raw)
        annotation = parse_tag(raw)
        if annotation is None:
            if log is not None:
                log.report(ErrorTemplate.invalid_tag(raw, path))
            continue
        result.append((raw, annotation))
    return result


def format_tags(annotations: Iterable[Annotation | str]) -> str:
    """Join annotations (or raw tags kept verbatim) into an attribute value."""
    return " ".join(a.format() if isinstance(a, Annotation) else a for a in annotations)
