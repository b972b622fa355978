"""Tests for project/module.py: module layout, locales and file discovery.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from htmlgettext.catalog import GettextToolchain
from htmlgettext.constants import POT_HEADER
from htmlgettext.diagnostics import ConfigurationError, RunLog, ToolNotFoundError
from htmlgettext.locale_utils import LocaleConfig
from htmlgettext.project import GettextModule, ModulePathResolver
from tests.helpers.fake_tools import FakeRunner

LOCALES = LocaleConfig.from_tags(["en_US", "cs_CZ"])


def _open(path: Path, runner: FakeRunner | None = None, **kwargs: object) -> GettextModule:
    log = RunLog()
    return GettextModule(path, LOCALES, GettextToolchain(log, runner or FakeRunner()), log, **kwargs)


class TestSetup:
    """Validation and bootstrap files."""

    def test_missing_module(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="does not exist"):
            _open(tmp_path / "nope")

    def test_missing_locale_dir(self, tmp_path: Path) -> None:
        (tmp_path / "shop").mkdir()
        with pytest.raises(ConfigurationError, match="locale"):
            _open(tmp_path / "shop")

    def test_missing_tool(self, make_module: Callable[..., Path]) -> None:
        with pytest.raises(ToolNotFoundError, match="msgfmt"):
            _open(make_module(), FakeRunner(missing=["msgfmt"]))

    def test_bootstrap_files(self, make_module: Callable[..., Path]) -> None:
        module = _open(make_module("shop"))
        assert module.name == module.domain == "shop"
        assert module.pot_file.read_text(encoding="utf-8") == POT_HEADER
        assert module.linguas_file.read_text(encoding="utf-8") == "en_US\ncs_CZ\n"

    def test_existing_files_kept(self, make_module: Callable[..., Path]) -> None:
        path = make_module("shop", {"locale/messages.pot": "# mine\n", "locale/LINGUAS": "de_DE\n"})
        module = _open(path)
        assert module.pot_file.read_text(encoding="utf-8") == "# mine\n"
        assert module.locales == ("en_US", "cs_CZ", "de_DE")

    def test_locales_union_default_last(self, make_module: Callable[..., Path]) -> None:
        path = make_module("shop", {"locale/LINGUAS": "# comment\nsk_SK\n\ncs_CZ\n"})
        assert _open(path).locales == ("en_US", "cs_CZ", "sk_SK")
        config = LocaleConfig.from_tags(["cs_CZ"])
        log = RunLog()
        module = GettextModule(path, config, GettextToolchain(log, FakeRunner()), log)
        assert module.locales == ("cs_CZ", "sk_SK", "en_US")

    def test_linguas_disabled(self, make_module: Callable[..., Path]) -> None:
        path = make_module("shop")
        module = _open(path, name="parent", linguas=False)
        assert not module.linguas_file.exists()
        assert module.name == "parent"
        assert module.domain == "shop"

    def test_catalog_paths(self, make_module: Callable[..., Path]) -> None:
        module = _open(make_module("shop"))
        assert module.po_file("cs_CZ") == module.path / "locale" / "cs_CZ.po"
        assert module.mo_file("cs_CZ") == module.path / "locale" / "cs_CZ" / "LC_MESSAGES" / "shop.mo"


class TestFindFiles:
    def test_patterns_and_excludes(self, make_module: Callable[..., Path]) -> None:
        files = {
            name: ""
            for name in [
                "b.js",
                "a.js",
                "sub/c.js",
                "vendor/lib.js",
                "sub/vendor/deep.js",
                "tmp/cache.js",
                ".hidden/x.js",
                "sub/.y.js",
                "page.html",
            ]
        }
        module = _open(make_module("shop", files))
        found = [module.relative(p) for p in module.find_files(["*.js"])]
        assert found == ["./a.js", "./b.js", "./sub/c.js"]

    def test_custom_exclude(self, make_module: Callable[..., Path]) -> None:
        module = _open(make_module("shop", {"a.py": "", "build/b.py": ""}))
        found = [module.relative(p) for p in module.find_files(["*.py"], ["*/build/*"])]
        assert found == ["./a.py"]

    @given(st.integers(min_value=0, max_value=350), st.integers(min_value=1, max_value=120))
    def test_batches(self, count: int, size: int) -> None:
        """PROPERTY: batches cover every file once, in order, none larger than size."""
        files = [Path(f"f{i}.js") for i in range(count)]
        batches = list(GettextModule.batches(files, size))
        event(f"batch_count={min(len(batches), 4)}")
        assert [f for batch in batches for f in batch] == files
        assert all(0 < len(batch) <= size for batch in batches)


class TestModulePathResolver:
    def test_deepest_module_wins(self, tmp_path: Path) -> None:
        outer, inner = tmp_path / "site", tmp_path / "site" / "modules" / "shop"
        inner.mkdir(parents=True)
        resolver = ModulePathResolver([outer, inner])
        assert resolver.domain_for(inner / "views" / "index.html") == "shop"
        assert resolver.domain_for(outer / "index.html") == "site"

    def test_outside_every_module(self, tmp_path: Path) -> None:
        assert ModulePathResolver([tmp_path / "a"]).domain_for(tmp_path / "b" / "x.html") == "messages"
