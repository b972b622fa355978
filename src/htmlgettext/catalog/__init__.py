"""Gettext catalog access, conversion and tooling.

Python 3.13+.
"""

from .bridge import CatalogLookup, CatalogTemplateWriter, MoCatalogLookup, StaticCatalogLookup
from .stringtable import StringTable, convert_catalog, parse_headers, write_json_catalog
from .tools import GettextToolchain, ToolResult, ToolRunner

__all__ = [
    "CatalogLookup",
    "CatalogTemplateWriter",
    "GettextToolchain",
    "MoCatalogLookup",
    "StaticCatalogLookup",
    "StringTable",
    "ToolResult",
    "ToolRunner",
    "convert_catalog",
    "parse_headers",
    "write_json_catalog",
]
