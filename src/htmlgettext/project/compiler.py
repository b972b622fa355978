"""Catalog compilation and locale file generation for a module.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from babel.messages.pofile import read_po

from htmlgettext.catalog import convert_catalog, write_json_catalog
from htmlgettext.compiler import (
    DictionaryBuilder,
    DocumentTranslator,
    LocaleFileSynthesizer,
    localized_file_name,
)
from htmlgettext.constants import POT_FILENAME
from htmlgettext.diagnostics import DocumentLoadError, ErrorTemplate, InvalidLocaleError
from htmlgettext.enums import DocumentMode
from htmlgettext.locale_utils import LocaleTarget
from htmlgettext.markup import load_document, read_mode

if TYPE_CHECKING:
    from pathlib import Path

    from htmlgettext.catalog import CatalogLookup
    from htmlgettext.config import RunConfig

    from .module import GettextModule, ModuleResolver

__all__ = ["Compiler", "JavascriptCompiler", "fuzzy_messages"]


def fuzzy_messages(po_file: Path) -> tuple[str, ...]:
    """Return msgids of active entries flagged fuzzy (header excluded)."""
    with po_file.open("rb") as f:
        catalog = read_po(f)
    return tuple(
        message.id if isinstance(message.id, str) else message.id[0]
        for message in catalog
        if message.id and message.fuzzy
    )


class Compiler:
    """Compile locale catalogs and generate translated HTML for one module.

    Args:
        module: Module to compile
        config: Run configuration
        catalog: Lookup used for translation
        resolver: Default-domain resolution for HTML files
    """

    def __init__(
        self,
        module: GettextModule,
        config: RunConfig,
        catalog: CatalogLookup,
        resolver: ModuleResolver,
    ) -> None:
        self.module = module
        self.config = config
        self.catalog = catalog
        self.resolver = resolver
        self.log = module.log
        self.toolchain = module.toolchain

    def compile_catalogs(self) -> None:
        """Run msgfmt for every module locale and flag catalogs needing review."""
        self.log.info(f"{self.module.name}: compiling catalogs")
        for locale in self.module.locales:
            po_file = self.module.po_file(locale)
            if not po_file.exists():
                self.log.report(ErrorTemplate.po_missing(str(po_file)))
                continue
            mo_file = self.module.mo_file(locale)
            mo_file.parent.mkdir(parents=True, exist_ok=True)
            if not self.toolchain.msgfmt(po_file, mo_file).ok:
                continue
            if not mo_file.exists():
                self.log.report(ErrorTemplate.mo_not_created(str(po_file), str(mo_file)))
                continue
            try:
                fuzzy = fuzzy_messages(po_file)
            except (OSError, ValueError) as e:
                self.log.report(ErrorTemplate.document_unreadable(str(po_file), str(e)))
                continue
            if fuzzy:
                self.log.report(ErrorTemplate.fuzzy_entries(str(po_file), fuzzy))

    def translate_html(self) -> None:
        """Generate locale files for every ``translate``-mode HTML document."""
        self.log.info(f"{self.module.name}: generating translated HTML")
        translator = DocumentTranslator(self.catalog, self.log)
        synthesizer = LocaleFileSynthesizer(translator, self.log)
        targets = self.config.locales.translation_targets
        for path in self.module.find_files(["*.html"], self.config.exclude):
            relative = self.module.relative(path)
            try:
                document = load_document(path)
            except DocumentLoadError as e:
                self.log.report(ErrorTemplate.document_unreadable(relative, str(e)))
                continue
            if read_mode(document) != DocumentMode.TRANSLATE:
                continue
            domain = self.resolver.domain_for(path)
            result = DictionaryBuilder(domain, self.log).build(document, source=relative)
            for target in targets:
                synthesizer.synthesize(
                    result.template,
                    result.dictionary,
                    localized_file_name(path, target),
                    target.posix,
                    domain,
                )


class JavascriptCompiler:
    """Write ``<lang-REGION>.json`` browser catalogs for one module.

    Each module catalog is merged with the browser template so that the JSON
    holds only strings the browser code uses.

    Args:
        module: Module owning the translated locale catalogs
        locale_dir: Browser catalog directory (``install/dist/locale``)
    """

    def __init__(self, module: GettextModule, locale_dir: Path) -> None:
        self.module = module
        self.locale_dir = locale_dir
        self.log = module.log
        self.toolchain = module.toolchain

    def compile(self) -> None:
        self.log.info(f"{self.module.name}: compiling browser catalogs")
        pot_file = self.locale_dir / POT_FILENAME
        for locale in self.module.locales:
            try:
                target = LocaleTarget.parse(locale)
            except InvalidLocaleError as e:
                self.log.error(str(e))
                continue
            po_file = self.module.po_file(locale)
            if not po_file.exists():
                self.log.report(ErrorTemplate.po_missing(str(po_file)))
                continue
            result = self.toolchain.msgmerge_stdout(po_file, pot_file)
            if not result.ok:
                continue
            if not result.stdout.strip():
                self.log.report(ErrorTemplate.tool_no_output(result.command))
                continue
            json_file = self.locale_dir / f"{target.web}.json"
            write_json_catalog(convert_catalog(result.stdout), json_file)
            self.log.info(f"  ✓ Wrote {json_file}")
