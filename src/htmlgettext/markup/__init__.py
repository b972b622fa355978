"""Annotated HTML document access.

Python 3.13+.
"""

from .document import (
    AnnotatedNode,
    clone_document,
    ensure_charset,
    load_document,
    parse_document,
    read_mode,
    scan,
    serialize_document,
    set_mode,
    write_document,
)

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
