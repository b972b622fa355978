"""Module discovery and extract/compile orchestration.

Python 3.13+.
"""

from .compiler import Compiler, JavascriptCompiler, fuzzy_messages
from .extractor import Extractor, JavascriptExtractor
from .module import GettextModule, ModulePathResolver, ModuleResolver
from .runner import run_compile, run_extract, select_modules

__all__ = [
    "Compiler",
    "Extractor",
    "GettextModule",
    "JavascriptCompiler",
    "JavascriptExtractor",
    "ModulePathResolver",
    "ModuleResolver",
    "fuzzy_messages",
    "run_compile",
    "run_extract",
    "select_modules",
]
