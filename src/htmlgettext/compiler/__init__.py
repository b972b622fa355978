"""Dictionary building, translation and locale file synthesis.

Python 3.13+.
"""

from .dictionary import BuildResult, Dictionary, DictionaryBuilder, SourceString
from .synthesizer import LocaleFileSynthesizer, localized_file_name
from .translator import DocumentTranslator

__all__ = [
    "BuildResult",
    "Dictionary",
    "DictionaryBuilder",
    "DocumentTranslator",
    "LocaleFileSynthesizer",
    "SourceString",
    "localized_file_name",
]
