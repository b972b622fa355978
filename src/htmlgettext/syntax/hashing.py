"""Content hashing for string identity.

A translatable string is identified by the first characters of the SHA-1
digest of its canonical form. Canonicalization collapses ASCII whitespace
runs to a single space and trims the ends, so re-indenting markup never
changes an identity.

Python 3.13+. Zero external dependencies.
"""

import hashlib
import re

from htmlgettext.constants import HASH_LENGTH

__all__ = ["content_hash", "normalize"]

# ASCII-only: U+00A0 and other Unicode spaces are content, not layout.
_WHITESPACE_RE = re.compile(r"\s+", re.ASCII)


def normalize(text: str) -> str:
    """Return the canonical form of a translatable string.

    Idempotent: ``normalize(normalize(s)) == normalize(s)``.

    Example:
        >>> normalize("  Hello,\\n\\t world ")
        'Hello, world'
    """
    return _WHITESPACE_RE.sub(" ", text).strip(" ")


def content_hash(canonical: str) -> str:
    """Hash a canonical string into its short identity.

    Args:
        canonical: Already normalized string

    Returns:
        Lowercase hex prefix of the SHA-1 digest of the UTF-8 bytes
    """
    return hashlib.sha1(canonical.encode("utf-8")).hexdigest()[:HASH_LENGTH]
