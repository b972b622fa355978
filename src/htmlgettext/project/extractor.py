"""Catalog extraction for a module.

Builds ``locale/messages.pot`` from source files and ``translate``-mode HTML
documents, then creates or refreshes every locale catalog.

Python 3.13+.
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from htmlgettext.catalog import CatalogTemplateWriter
from htmlgettext.compiler import DictionaryBuilder
from htmlgettext.constants import JS_README
from htmlgettext.diagnostics import DocumentLoadError, ErrorTemplate
from htmlgettext.enums import DocumentMode
from htmlgettext.markup import load_document, read_mode

if TYPE_CHECKING:
    from htmlgettext.config import RunConfig

    from .module import GettextModule

__all__ = ["Extractor", "JavascriptExtractor"]

_HTML_OPTIONS = ("--no-location", "--add-comments")


class Extractor:
    """Extract translatable strings of one module into its catalogs.

    Args:
        module: Module to extract
        config: Run configuration
    """

    def __init__(self, module: GettextModule, config: RunConfig) -> None:
        self.module = module
        self.config = config
        self.log = module.log
        self.toolchain = module.toolchain

    def extract(self) -> None:
        self.log.info(f"{self.module.name}: extracting {self.module.path}")
        self.generate_pot()
        self.generate_po_files()

    def generate_pot(self) -> None:
        """Merge strings of every source group and of HTML into the template."""
        for pattern in self.config.source_patterns:
            files = self.module.find_files([pattern.glob], self.config.exclude)
            for batch in self.module.batches(files, self.config.batch_size):
                self.toolchain.xgettext(
                    [self.module.relative(f) for f in batch],
                    self.module.pot_file,
                    package_name=self.module.name,
                    language=pattern.language,
                    options=pattern.options,
                    package_version=self.config.package_version,
                    cwd=self.module.path,
                )
        self.extract_html()

    def collect_html(self) -> CatalogTemplateWriter:
        """Gather canonical strings of every ``translate``-mode HTML file."""
        writer = CatalogTemplateWriter()
        for path in self.module.find_files(["*.html"], self.config.exclude):
            relative = self.module.relative(path)
            try:
                document = load_document(path)
            except DocumentLoadError as e:
                self.log.report(ErrorTemplate.document_unreadable(relative, str(e)))
                continue
            if read_mode(document) != DocumentMode.TRANSLATE:
                continue
            builder = DictionaryBuilder(self.module.domain, self.log)
            result = builder.build(document, source=relative)
            for string in result.strings:
                writer.emit(string.domain, string.text, string.comment)
        return writer

    def extract_html(self) -> None:
        writer = self.collect_html()
        if not writer:
            return
        with tempfile.TemporaryDirectory(prefix="htmlgettext-") as tmp:
            source = Path(tmp) / "html_strings.py"
            writer.write(source)
            self.toolchain.xgettext(
                [source],
                self.module.pot_file,
                package_name=self.module.name,
                language="Python",
                options=_HTML_OPTIONS,
                package_version=self.config.package_version,
            )

    def generate_po_files(self) -> None:
        """Create missing locale catalogs and merge the template into existing ones."""
        for locale in self.module.locales:
            po_file = self.module.po_file(locale)
            if po_file.exists():
                self.toolchain.msgmerge_update(po_file, self.module.pot_file)
            else:
                self.toolchain.msginit(self.module.pot_file, po_file, locale)


class JavascriptExtractor(Extractor):
    """Extract the browser catalog template of ``install/dist``.

    Only the template is produced; translations stay in the parent module's
    locale catalogs and are merged at compile time.
    """

    def extract(self) -> None:
        self.log.info(f"{self.module.name}: extracting browser strings from {self.module.path}")
        self.generate_pot()
        readme = self.module.locale_dir / "README.txt"
        readme.write_text(JS_README, encoding="utf-8")
