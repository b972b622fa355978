"""htmlgettext - gettext catalogs for annotated HTML documents.

Marks translatable text and attributes in HTML with a ``gettext`` attribute,
identifies every string by a short content hash, extracts the strings into
gettext catalogs and writes translated per-locale copies of each document.

Public API:
    DictionaryBuilder - Hash the tags of a source document
    DocumentTranslator - Write translations into a hashed document
    LocaleFileSynthesizer - Produce per-locale files (replace / cherry-pick)
    convert_catalog - Merged PO text to a JSON string table
    run_extract / run_compile - Whole-module pipelines
    RunConfig, LocaleConfig, LocaleTarget - Configuration

Exceptions:
    GettextError - Base exception class
    ConfigurationError - Unusable module, locale or toolchain setup
    DocumentLoadError - Unreadable document

Submodules:
    htmlgettext.syntax - Tag grammar and content hashing
    htmlgettext.markup - HTML document access
    htmlgettext.catalog - Catalog lookup, conversion and gettext tools
    htmlgettext.diagnostics - Diagnostics and the run log
"""

from .catalog import (
    CatalogLookup,
    MoCatalogLookup,
    StaticCatalogLookup,
    convert_catalog,
)
from .compiler import Dictionary, DictionaryBuilder, DocumentTranslator, LocaleFileSynthesizer
from .config import RunConfig
from .diagnostics import ConfigurationError, DocumentLoadError, GettextError, RunLog
from .enums import DocumentMode, Severity, SynthesisOutcome
from .locale_utils import LocaleConfig, LocaleTarget
from .project import run_compile, run_extract
from .syntax import content_hash, normalize

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("htmlgettext")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CatalogLookup",
    "ConfigurationError",
    "Dictionary",
    "DictionaryBuilder",
    "DocumentLoadError",
    "DocumentMode",
    "DocumentTranslator",
    "GettextError",
    "LocaleConfig",
    "LocaleFileSynthesizer",
    "LocaleTarget",
    "MoCatalogLookup",
    "RunConfig",
    "RunLog",
    "Severity",
    "StaticCatalogLookup",
    "SynthesisOutcome",
    "__version__",
    "content_hash",
    "convert_catalog",
    "normalize",
    "run_compile",
    "run_extract",
]
