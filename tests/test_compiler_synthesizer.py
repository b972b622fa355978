"""Tests for compiler/synthesizer.py: per-locale file production.

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from htmlgettext.catalog import StaticCatalogLookup
from htmlgettext.compiler import (
    BuildResult,
    DictionaryBuilder,
    DocumentTranslator,
    LocaleFileSynthesizer,
    localized_file_name,
)
from htmlgettext.diagnostics import DiagnosticCode, RunLog
from htmlgettext.enums import SynthesisOutcome
from htmlgettext.locale_utils import LocaleTarget
from htmlgettext.markup import load_document, parse_document, read_mode, scan, serialize_document
from htmlgettext.syntax import content_hash

SOURCE = """<!DOCTYPE html>
<html>
<head><meta name="gettext" content="translate"><title gettext=".">Shop</title></head>
<body>
<h1 gettext=".">Hello</h1>
<img gettext="alt" alt="Logo" src="logo.png">
</body>
</html>
"""

CATALOG = StaticCatalogLookup(
    {("shop", "cs_CZ"): {"Shop": "Obchod", "Hello": "Ahoj", "Logo": "Znak", "Extra": "Navíc"}}
)


@pytest.fixture
def built() -> BuildResult:
    return DictionaryBuilder("shop", RunLog()).build(parse_document(SOURCE))


@pytest.fixture
def synthesizer(run_log: RunLog) -> LocaleFileSynthesizer:
    return LocaleFileSynthesizer(DocumentTranslator(CATALOG, run_log), run_log)


class TestLocalizedFileName:
    def test_web_locale_inserted(self) -> None:
        target = localized_file_name(Path("site/index.html"), LocaleTarget.parse("cs_CZ"))
        assert target == Path("site/index.cs-CZ.html")


class TestSynthesize:
    """Every state of the target file."""

    def test_absent_target_replaced(
        self, tmp_path: Path, built: BuildResult, synthesizer: LocaleFileSynthesizer
    ) -> None:
        target = tmp_path / "index.cs-CZ.html"
        outcome = synthesizer.synthesize(built.template, built.dictionary, target, "cs_CZ", "shop")

        assert outcome is SynthesisOutcome.REPLACED
        document = load_document(target)
        assert read_mode(document) == "replace"
        assert [n.read(".") for n in scan(document)[:2]] == ["Obchod", "Ahoj"]
        assert scan(document)[2].read("alt") == "Znak"

    def test_template_untouched(
        self, tmp_path: Path, built: BuildResult, synthesizer: LocaleFileSynthesizer
    ) -> None:
        before = serialize_document(built.template)
        synthesizer.synthesize(built.template, built.dictionary, tmp_path / "a.html", "cs_CZ", "shop")
        assert serialize_document(built.template) == before
        assert read_mode(built.template) == "translate"

    def test_replace_target_overwritten(
        self, tmp_path: Path, built: BuildResult, synthesizer: LocaleFileSynthesizer
    ) -> None:
        target = tmp_path / "index.cs-CZ.html"
        target.write_text(
            '<html><head><meta name="gettext" content="replace"></head>'
            "<body><p>stale</p></body></html>",
            encoding="utf-8",
        )
        outcome = synthesizer.synthesize(built.template, built.dictionary, target, "cs_CZ", "shop")
        assert outcome is SynthesisOutcome.REPLACED
        text = target.read_text(encoding="utf-8")
        assert "stale" not in text
        assert "Ahoj" in text

    def test_cherry_pick_preserves_untagged(
        self, tmp_path: Path, built: BuildResult, synthesizer: LocaleFileSynthesizer
    ) -> None:
        """Only tagged values change; untagged content survives verbatim."""
        target = tmp_path / "index.cs-CZ.html"
        target.write_text(
            '<!DOCTYPE html>\n<html><head><meta name="gettext" content="cherry-pick"></head>\n'
            "<body>\n"
            f'<h1 gettext=".#{content_hash("Hello")}">Hello</h1>\n'
            '<p class="local">Jen pro Česko</p>\n'
            '<em gettext=".">Extra</em>\n'
            "</body></html>\n",
            encoding="utf-8",
        )
        outcome = synthesizer.synthesize(built.template, built.dictionary, target, "cs_CZ", "shop")

        assert outcome is SynthesisOutcome.CHERRY_PICKED
        document = load_document(target)
        assert read_mode(document) == "cherry-pick"
        heading, extra = scan(document)
        assert heading.read(".") == "Ahoj"
        assert extra.read(".") == "Navíc"
        assert extra.marker == f".#{content_hash('Extra')}"
        local = document.getroot().find(".//p[@class='local']")
        assert local is not None
        assert local.text == "Jen pro Česko"
        assert "Extra" not in dict(built.dictionary).values()

    @pytest.mark.parametrize("mode", ["replace", "cherry-pick"])
    def test_repeated_runs_byte_identical(self, tmp_path: Path, mode: str) -> None:
        """PROPERTY: a second run over unchanged files rewrites the same bytes."""
        source = tmp_path / "index.html"
        source.write_text(SOURCE, encoding="utf-8")
        target = tmp_path / "index.cs-CZ.html"
        if mode == "cherry-pick":
            target.write_text(
                '<!DOCTYPE html>\n<html><head><meta name="gettext" content="cherry-pick"></head>\n'
                '<body>\n<h1 gettext=".">Hello</h1>\n<p>Jen pro Česko</p>\n'
                '<img gettext="alt" alt="Logo" src="logo.png">\n</body></html>\n',
                encoding="utf-8",
            )

        def run() -> bytes:
            log = RunLog()
            built = DictionaryBuilder("shop", log).build(load_document(source))
            synthesizer = LocaleFileSynthesizer(DocumentTranslator(CATALOG, log), log)
            synthesizer.synthesize(built.template, built.dictionary, target, "cs_CZ", "shop")
            assert not log.has_errors, log.lines()
            return target.read_bytes()

        first = run()
        assert run() == first
        assert run() == first
        text = first.decode("utf-8")
        assert "&#" not in text
        assert "Ahoj" in text
        assert 'alt="Znak"' in text
        assert ("Česko" in text) is (mode == "cherry-pick")
        assert read_mode(parse_document(text)) == mode

    @pytest.mark.parametrize(
        "head",
        ['<meta name="gettext" content="translate">', '<meta name="gettext" content="bogus">', ""],
    )
    def test_invalid_marker_skipped(
        self,
        tmp_path: Path,
        built: BuildResult,
        synthesizer: LocaleFileSynthesizer,
        run_log: RunLog,
        head: str,
    ) -> None:
        target = tmp_path / "index.cs-CZ.html"
        original = f"<html><head>{head}</head><body><p>mine</p></body></html>"
        target.write_text(original, encoding="utf-8")

        outcome = synthesizer.synthesize(built.template, built.dictionary, target, "cs_CZ", "shop")

        assert outcome is SynthesisOutcome.INVALID
        assert target.read_text(encoding="utf-8") == original
        assert run_log.codes() == [DiagnosticCode.INVALID_MODE]
        assert "replace|cherry-pick" in run_log.entries[0].message

    def test_unreadable_target(
        self,
        tmp_path: Path,
        built: BuildResult,
        synthesizer: LocaleFileSynthesizer,
        run_log: RunLog,
    ) -> None:
        target = tmp_path / "index.cs-CZ.html"
        target.write_bytes(b"\xff\xfe<html>")
        outcome = synthesizer.synthesize(built.template, built.dictionary, target, "cs_CZ", "shop")
        assert outcome is SynthesisOutcome.FAILED
        assert run_log.codes() == [DiagnosticCode.DOCUMENT_UNREADABLE]
