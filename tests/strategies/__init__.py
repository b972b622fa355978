"""Hypothesis strategies for htmlgettext property-based testing.

Usage:
    from tests.strategies import gettext_annotations, translatable_text
"""

from .markup import gettext_annotations, hashes, tag_words, translatable_text

__all__ = [
    "gettext_annotations",
    "hashes",
    "tag_words",
    "translatable_text",
]
