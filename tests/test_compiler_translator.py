"""Tests for compiler/translator.py: writing translations into documents.

Python 3.13+.
"""

from __future__ import annotations

import html

from hypothesis import event, given

from htmlgettext.catalog import StaticCatalogLookup
from htmlgettext.compiler import Dictionary, DictionaryBuilder, DocumentTranslator
from htmlgettext.diagnostics import DiagnosticCode, RunLog
from htmlgettext.markup import clone_document, parse_document, scan, serialize_document
from htmlgettext.syntax import content_hash, normalize
from tests.strategies import translatable_text

HELLO = content_hash("Hello")
CATALOG = StaticCatalogLookup(
    {
        ("mydomain", "cs_CZ"): {"Hello": "Ahoj", "Logo": "Znak"},
        ("nav", "cs_CZ"): {"Home": "Domů"},
    }
)


def _page(body: str, mode: str = "translate") -> str:
    return (
        f'<!DOCTYPE html><html><head><meta name="gettext" content="{mode}"></head>'
        f"<body>{body}</body></html>"
    )


class TestTranslate:
    """Hashed and unhashed tags."""

    def test_hello_scenario(self) -> None:
        """Text is replaced by the catalog translation; the tag keeps its hash."""
        log = RunLog()
        source = parse_document(_page('<span gettext=".">Hello</span>'))
        built = DictionaryBuilder("mydomain", log).build(source)
        document = clone_document(built.template)

        written = DocumentTranslator(CATALOG, log).translate(
            document, built.dictionary, "mydomain", "cs_CZ"
        )

        node = scan(document)[0]
        assert written == 1
        assert node.read(".") == "Ahoj"
        assert node.marker == f".#{HELLO}"
        assert len(log) == 0

    def test_explicit_domain_and_attribute(self) -> None:
        dictionary = Dictionary(
            {f"nav:#{content_hash('Home')}": "Home", f"mydomain:#{content_hash('Logo')}": "Logo"}
        )
        document = parse_document(
            _page(
                f'<a gettext="nav:.#{content_hash("Home")}">Home</a>'
                f'<img gettext="alt#{content_hash("Logo")}" alt="Logo">'
            )
        )
        DocumentTranslator(CATALOG, RunLog()).translate(document, dictionary, "mydomain", "cs_CZ")
        link, image = scan(document)
        assert link.read(".") == "Domů"
        assert image.read("alt") == "Znak"

    def test_missing_translation_keeps_source(self) -> None:
        """Lookup falls back to the canonical string itself."""
        dictionary = Dictionary({f"mydomain:#{content_hash('Bye')}": "Bye"})
        document = parse_document(_page(f'<p gettext=".#{content_hash("Bye")}">  Bye </p>'))
        DocumentTranslator(CATALOG, RunLog()).translate(document, dictionary, "mydomain", "cs_CZ")
        assert scan(document)[0].read(".") == "Bye"

    def test_missing_hash_reported_and_kept(self) -> None:
        """attr#deadbe missing from the dictionary: one error, nothing changed."""
        log = RunLog()
        document = parse_document(_page('<img gettext="alt#deadbe" alt="Old">'))
        DocumentTranslator(CATALOG, log).translate(document, Dictionary(), "mydomain", "cs_CZ")
        node = scan(document)[0]
        assert node.marker == "alt#deadbe"
        assert node.read("alt") == "Old"
        assert log.codes() == [DiagnosticCode.HASH_NOT_FOUND]
        assert "mydomain:#deadbe" in log.entries[0].message

    def test_unhashed_tag_registered(self) -> None:
        """A hand-added tag is hashed from its current value and translated."""
        dictionary = Dictionary()
        document = parse_document(_page('<b gettext=".">\n  Hello\n</b>', mode="cherry-pick"))
        DocumentTranslator(CATALOG, RunLog()).translate(document, dictionary, "mydomain", "cs_CZ")
        node = scan(document)[0]
        assert node.marker == f".#{HELLO}"
        assert node.read(".") == "Ahoj"
        assert len(dictionary) == 0

    def test_unhashed_empty_value(self) -> None:
        log = RunLog()
        document = parse_document(_page('<b gettext="title">x</b>', mode="cherry-pick"))
        DocumentTranslator(CATALOG, log).translate(document, Dictionary(), "mydomain", "cs_CZ")
        assert scan(document)[0].marker == "title"
        assert log.codes() == [DiagnosticCode.EMPTY_BOUND_VALUE]

    def test_idempotent(self) -> None:
        """Translating twice with the same inputs changes nothing the second time."""
        source = parse_document(
            _page('<p gettext=". title" title="Logo">Hello <i>world</i></p><b gettext="alt#deadbe">x</b>')
        )
        built = DictionaryBuilder("mydomain", RunLog()).build(source)
        document = clone_document(built.template)
        translator = DocumentTranslator(CATALOG, RunLog())
        translator.translate(document, built.dictionary, "mydomain", "cs_CZ")
        once = serialize_document(document)
        translator.translate(document, built.dictionary, "mydomain", "cs_CZ")
        assert serialize_document(document) == once

    @given(translatable_text())
    def test_identity_catalog_preserves_text(self, text: str) -> None:
        """PROPERTY: with no translations, bound values become their canonical form."""
        source = parse_document(_page(f'<p gettext=".">{html.escape(text)}</p>'))
        built = DictionaryBuilder("d", RunLog()).build(source)
        document = clone_document(built.template)
        log = RunLog()
        DocumentTranslator(StaticCatalogLookup({}), log).translate(
            document, built.dictionary, "d", "de_DE"
        )
        event(f"changed={normalize(text) != text}")
        assert scan(document)[0].read(".") == normalize(text)
        assert not log.has_errors
