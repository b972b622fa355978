"""Run configuration.

Immutable, validated settings shared by every module of an extract or
compile run. Values come from keyword arguments, a TOML file, or both
(command-line flags override the file).

Example ``htmlgettext.toml``::

    [htmlgettext]
    locales = ["en_US", "cs_CZ", "de_DE"]
    default_locale = "en_US"
    exclude = ["*/vendor/*", "*/tmp/*", "*/.*"]
    batch_size = 100
    package_version = "1.0"

    [htmlgettext.domains]
    custom = "config/locale"

Python 3.13+.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from htmlgettext.constants import BATCH_SIZE, DEFAULT_LOCALE, EXCLUDE_FILES, PACKAGE_VERSION
from htmlgettext.diagnostics import ConfigurationError
from htmlgettext.locale_utils import LocaleConfig

__all__ = [
    "DEFAULT_SOURCE_PATTERNS",
    "RunConfig",
    "SourcePattern",
]


@dataclass(frozen=True, slots=True)
class SourcePattern:
    """Source files handed to xgettext as a group.

    Attributes:
        glob: fnmatch pattern for file names ("*.py")
        language: xgettext --language value ("Python")
        options: Extra xgettext options (keywords, location flags)
    """

    glob: str
    language: str
    options: tuple[str, ...] = ("--add-location", "--add-comments")


DEFAULT_SOURCE_PATTERNS: tuple[SourcePattern, ...] = (
    SourcePattern("*.py", "Python"),
    SourcePattern(
        "*.js",
        "JavaScript",
        ("--add-location", "--add-comments", "--keyword=__", "--keyword=_n:1,2"),
    ),
)


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Settings for one extract/compile run.

    Attributes:
        locales: Supported locales and the untranslated default
        exclude: fnmatch patterns matched against "./relative/path"
        batch_size: Maximum files per xgettext invocation
        package_version: Value of --package-version in catalog templates
        domains: Extra text domains (name -> locale directory) for lookup
        source_patterns: Source files extracted besides HTML
    """

    locales: LocaleConfig = field(default_factory=lambda: LocaleConfig.from_tags([DEFAULT_LOCALE]))
    exclude: tuple[str, ...] = EXCLUDE_FILES
    batch_size: int = BATCH_SIZE
    package_version: str = PACKAGE_VERSION
    domains: dict[str, Path] = field(default_factory=dict)
    source_patterns: tuple[SourcePattern, ...] = DEFAULT_SOURCE_PATTERNS

    def __post_init__(self) -> None:
        """Validate configuration invariants.

        Raises:
            ConfigurationError: If batch_size is not positive or a domain name is empty
        """
        if self.batch_size < 1:
            msg = f"batch_size must be >= 1, got {self.batch_size}"
            raise ConfigurationError(msg)
        if any(not name.strip() for name in self.domains):
            msg = "Domain names must not be empty"
            raise ConfigurationError(msg)

    @classmethod
    def from_mapping(cls, data: dict[str, Any], *, base_dir: Path | None = None) -> RunConfig:
        """Build from a parsed ``[htmlgettext]`` table.

        Relative domain directories are resolved against ``base_dir``.

        Raises:
            ConfigurationError: On unknown keys or invalid values
        """
        known = {"locales", "default_locale", "exclude", "batch_size", "package_version", "domains"}
        unknown = sorted(set(data) - known)
        if unknown:
            msg = f"Unknown configuration keys: {', '.join(unknown)}"
            raise ConfigurationError(msg)

        base = base_dir or Path.cwd()
        kwargs: dict[str, Any] = {}
        default = str(data.get("default_locale", DEFAULT_LOCALE))
        tags = [str(t) for t in data.get("locales", [default])]
        kwargs["locales"] = LocaleConfig.from_tags(tags, default=default)
        if "exclude" in data:
            kwargs["exclude"] = tuple(str(p) for p in data["exclude"])
        if "batch_size" in data:
            if not isinstance(data["batch_size"], int):
                msg = f"batch_size must be an integer, got {data['batch_size']!r}"
                raise ConfigurationError(msg)
            kwargs["batch_size"] = data["batch_size"]
        if "package_version" in data:
            kwargs["package_version"] = str(data["package_version"])
        kwargs["domains"] = {
            str(name): (base / str(path)).resolve() for name, path in data.get("domains", {}).items()
        }
        return cls(**kwargs)

    @classmethod
    def from_toml(cls, path: Path) -> RunConfig:
        """Load the ``[htmlgettext]`` table of a TOML file.

        Raises:
            ConfigurationError: If the file is unreadable, not TOML, or invalid
        """
        try:
            with path.open("rb") as f:
                document = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            msg = f"Cannot read configuration {path}: {e}"
            raise ConfigurationError(msg) from e
        return cls.from_mapping(document.get("htmlgettext", {}), base_dir=path.parent)
