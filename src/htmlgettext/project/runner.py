"""Extract and compile runs over several modules.

A run selects the modules that have a locale directory, sets each one up
(a configuration error skips that module only) and processes them in
order. The returned RunLog holds everything that happened.

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from htmlgettext.catalog import GettextToolchain, MoCatalogLookup
from htmlgettext.constants import JS_DIST_DIR, LOCALE_DIR
from htmlgettext.diagnostics import ConfigurationError, ErrorTemplate, RunLog

from .compiler import Compiler, JavascriptCompiler
from .extractor import Extractor, JavascriptExtractor
from .module import GettextModule, ModulePathResolver

if TYPE_CHECKING:
    from collections.abc import Iterable

    from htmlgettext.catalog import CatalogLookup, ToolRunner
    from htmlgettext.config import RunConfig

__all__ = ["run_compile", "run_extract", "select_modules"]


def select_modules(paths: Iterable[Path], log: RunLog, *, subdir: str = LOCALE_DIR) -> list[Path]:
    """Keep the directories that contain ``subdir``, logging the others."""
    selected: list[Path] = []
    for path in dict.fromkeys(Path(p).resolve() for p in paths):
        if (path / subdir).is_dir():
            selected.append(path)
        else:
            log.report(ErrorTemplate.module_skipped(str(path), f"No {subdir} directory found."))
    return selected


def _open_modules(
    paths: Iterable[Path],
    config: RunConfig,
    toolchain: GettextToolchain,
    log: RunLog,
) -> list[GettextModule]:
    modules: list[GettextModule] = []
    for path in select_modules(paths, log):
        try:
            modules.append(GettextModule(path, config.locales, toolchain, log))
        except ConfigurationError as e:
            log.report(ErrorTemplate.module_failed(str(path), str(e)))
    return modules


def _js_module(module: GettextModule, config: RunConfig) -> GettextModule | None:
    dist = module.path / JS_DIST_DIR
    if not (dist / LOCALE_DIR).is_dir():
        return None
    try:
        return GettextModule(
            dist, config.locales, module.toolchain, module.log, name=module.name, linguas=False
        )
    except ConfigurationError as e:
        module.log.report(ErrorTemplate.module_failed(str(dist), str(e)))
        return None


def run_extract(
    paths: Iterable[Path],
    config: RunConfig,
    log: RunLog | None = None,
    *,
    runner: ToolRunner | None = None,
) -> RunLog:
    """Extract catalogs of every module in ``paths``.

    Args:
        paths: Module directories
        config: Run configuration
        log: Run log to append to (a new one is created when None)
        runner: Command runner for the gettext tools

    Returns:
        The run log
    """
    log = log if log is not None else RunLog()
    toolchain = GettextToolchain(log, runner)
    for module in _open_modules(paths, config, toolchain, log):
        try:
            Extractor(module, config).extract()
            js_module = _js_module(module, config)
            if js_module is not None:
                JavascriptExtractor(js_module, config).extract()
        except ConfigurationError as e:
            log.report(ErrorTemplate.module_failed(str(module.path), str(e)))
    return log


def run_compile(
    paths: Iterable[Path],
    config: RunConfig,
    log: RunLog | None = None,
    *,
    runner: ToolRunner | None = None,
    catalog: CatalogLookup | None = None,
) -> RunLog:
    """Compile catalogs, then generate translated HTML and browser catalogs.

    All catalogs are compiled before any HTML is translated so that tags
    referring to another module's domain see its fresh translations.

    Args:
        paths: Module directories
        config: Run configuration
        log: Run log to append to (a new one is created when None)
        runner: Command runner for the gettext tools
        catalog: Translation lookup (default: compiled catalogs of the
            selected modules plus ``config.domains``)

    Returns:
        The run log
    """
    log = log if log is not None else RunLog()
    toolchain = GettextToolchain(log, runner)
    modules = _open_modules(paths, config, toolchain, log)
    if catalog is None:
        catalog = MoCatalogLookup(
            {**{m.domain: m.locale_dir for m in modules}, **config.domains}
        )
    resolver = ModulePathResolver(m.path for m in modules)
    compilers = [Compiler(m, config, catalog, resolver) for m in modules]

    for compiler in compilers:
        try:
            compiler.compile_catalogs()
        except ConfigurationError as e:
            log.report(ErrorTemplate.module_failed(str(compiler.module.path), str(e)))
    reload = getattr(catalog, "reload", None)
    if callable(reload):
        reload()
    for compiler in compilers:
        compiler.translate_html()
        js_module = _js_module(compiler.module, config)
        if js_module is None:
            continue
        try:
            JavascriptCompiler(compiler.module, js_module.locale_dir).compile()
        except ConfigurationError as e:
            log.report(ErrorTemplate.module_failed(str(js_module.path), str(e)))
    return log
