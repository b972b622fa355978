"""Tag grammar and content identity.

Python 3.13+. Zero external dependencies.
"""

from .hashing import content_hash, normalize
from .tags import TEXT_KEYWORD, Annotation, format_tags, parse_tag, parse_tags

__all__ = [
    "TEXT_KEYWORD",
    "Annotation",
    "content_hash",
    "format_tags",
    "normalize",
    "parse_tag",
    "parse_tags",
]
