"""HTML document access for annotated markup.

Documents are parsed with lxml's recovering HTML parser (libxml2), so
malformed markup never aborts a run. Serialization keeps the doctype and
writes raw UTF-8 characters rather than numeric character references.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from lxml import etree

from htmlgettext.constants import MARKUP_NAME, MODE_META_NAME
from htmlgettext.diagnostics import DocumentLoadError
from htmlgettext.syntax.tags import TEXT_KEYWORD, Annotation, parse_tags

if TYPE_CHECKING:
    from pathlib import Path

    from htmlgettext.diagnostics import RunLog

__all__ = [
    "AnnotatedNode",
    "clone_document",
    "ensure_charset",
    "load_document",
    "parse_document",
    "read_mode",
    "scan",
    "serialize_document",
    "set_mode",
    "write_document",
]


def _parser() -> etree.HTMLParser:
    return etree.HTMLParser(encoding="utf-8", recover=True, no_network=True)


def parse_document(content: str) -> etree._ElementTree:
    """Parse HTML text into a document tree.

    Raises:
        DocumentLoadError: If the text contains no markup at all
    """
    try:
        root = etree.fromstring(content.encode("utf-8"), parser=_parser())
    except etree.LxmlError as e:
        msg = str(e) or "Document is not parseable HTML"
        raise DocumentLoadError(msg) from e
    if root is None:
        msg = "Document is empty"
        raise DocumentLoadError(msg)
    return root.getroottree()


def load_document(path: Path) -> etree._ElementTree:
    """Read and parse an HTML file.

    Raises:
        DocumentLoadError: If the file cannot be read, is not UTF-8, or is empty
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"{path}: {e}"
        raise DocumentLoadError(msg) from e
    try:
        return parse_document(content)
    except DocumentLoadError as e:
        msg = f"{path}: {e}"
        raise DocumentLoadError(msg) from e


def serialize_document(document: etree._ElementTree) -> str:
    """Serialize a document, doctype included, as HTML text."""
    text = etree.tostring(document, method="html", encoding="unicode")
    return text if text.endswith("\n") else f"{text}\n"


def write_document(document: etree._ElementTree, path: Path) -> None:
    """Write a document as UTF-8."""
    path.write_text(serialize_document(document), encoding="utf-8")


def clone_document(document: etree._ElementTree) -> etree._ElementTree:
    """Return an independent copy of ``document``.

    Round-trips through serialization so the doctype survives the copy.
    """
    return parse_document(serialize_document(document))


def _mode_metas(document: etree._ElementTree) -> list[etree._Element]:
    return [
        meta
        for meta in document.iter("meta")
        if (meta.get("name") or "").strip().lower() == MODE_META_NAME
    ]


def read_mode(document: etree._ElementTree) -> str | None:
    """Return the ``<meta name="gettext">`` content, or None when absent."""
    for meta in _mode_metas(document):
        content = meta.get("content")
        if content is not None:
            return content.strip()
    return None


def set_mode(document: etree._ElementTree, mode: str) -> bool:
    """Overwrite every mode marker with ``mode``.

    Returns:
        False when the document carries no marker to overwrite
    """
    metas = _mode_metas(document)
    for meta in metas:
        meta.set("content", mode)
    return bool(metas)


def _is_utf8(charset: str) -> bool:
    return charset.strip(" \t\"'").lower().replace("_", "-") in {"utf-8", "utf8"}


def ensure_charset(document: etree._ElementTree) -> bool:
    """Declare UTF-8 in ``<head>``.

    Documents are always written as UTF-8, so any other declared charset is
    rewritten to UTF-8. A document without a declaration gets a
    ``<meta charset="UTF-8">`` as the first element of ``<head>``.

    Returns:
        True when a declaration was inserted or rewritten
    """
    root = document.getroot()
    for meta in root.iter("meta"):
        charset = meta.get("charset")
        if charset is not None:
            if _is_utf8(charset):
                return False
            meta.set("charset", "UTF-8")
            return True
        http_equiv = (meta.get("http-equiv") or "").lower()
        content = meta.get("content") or ""
        if http_equiv == "content-type" and "charset=" in content.lower():
            declared = content.lower().split("charset=", 1)[1].split(";", 1)[0]
            if _is_utf8(declared):
                return False
            meta.set("content", "text/html; charset=UTF-8")
            return True
    head = root.find("head")
    if head is None:
        return False
    meta = etree.Element("meta", charset="UTF-8")
    meta.tail = head.text
    head.insert(0, meta)
    return True


@dataclass(frozen=True, slots=True)
class AnnotatedNode:
    """An element carrying the ``gettext`` marker attribute.

    Attributes:
        element: Owning element; bound values are read from and written to it
    """

    element: etree._Element

    @property
    def marker(self) -> str:
        return self.element.get(MARKUP_NAME) or ""

    def set_marker(self, value: str) -> None:
        self.element.set(MARKUP_NAME, value)

    def tags(self, log: RunLog | None = None, *, path: str | None = None) -> list[tuple[str, Annotation]]:
        """Parse the marker value, reporting invalid tags to ``log``."""
        return parse_tags(self.marker, log, path=path)

    def read(self, keyword: str) -> str:
        """Return the bound value: element text for ".", else the attribute (raw)."""
        if keyword == TEXT_KEYWORD:
            return str(self.element.xpath("string()"))
        return self.element.get(keyword) or ""

    def write(self, keyword: str, value: str) -> None:
        """Replace the bound value.

        Writing the element text drops all child nodes and leaves a single
        text node.
        """
        if keyword != TEXT_KEYWORD:
            self.element.set(keyword, value)
            return
        for child in list(self.element):
            self.element.remove(child)
        self.element.text = value

    def describe(self) -> str:
        """Short markup excerpt used in catalog comments and diagnostics."""
        return f'<{self.element.tag} {MARKUP_NAME}="{self.marker}">'


def scan(document: etree._ElementTree, *, ensure_utf8: bool = False) -> list[AnnotatedNode]:
    """Find every annotated element in document order.

    Args:
        document: Parsed document
        ensure_utf8: Insert a UTF-8 charset declaration first when missing

    Returns:
        Annotated nodes; empty when nothing is marked
    """
    if ensure_utf8:
        ensure_charset(document)
    return [
        AnnotatedNode(element)
        for element in document.iter()
        if isinstance(element.tag, str) and element.get(MARKUP_NAME) is not None
    ]
