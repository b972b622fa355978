"""Locale targets and supported-locale configuration.

A translation target always has a language and a region. It is projected
three ways: POSIX ``lang_REGION`` (catalog directories), web
``lang-REGION`` (generated file names, JSON catalogs) and the canonical
tag Babel produces.

Python 3.13+.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from babel import Locale, UnknownLocaleError

from htmlgettext.constants import DEFAULT_LOCALE
from htmlgettext.diagnostics import InvalidLocaleError

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = [
    "LocaleConfig",
    "LocaleTarget",
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to POSIX form, dropping encoding suffixes.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("cs_CZ.UTF-8")
        'cs_CZ'
    """
    return locale_code.strip().split(".", 1)[0].replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Raises:
        InvalidLocaleError: If the code is malformed or unknown to CLDR
    """
    try:
        return Locale.parse(normalize_locale(locale_code))
    except (UnknownLocaleError, ValueError, TypeError) as e:
        msg = f"Invalid locale '{locale_code}': {e}"
        raise InvalidLocaleError(msg) from e


@dataclass(frozen=True, slots=True, order=True)
class LocaleTarget:
    """A (language, region) pair that translations are produced for.

    Attributes:
        language: Lowercase language code ("cs")
        region: Uppercase region code ("CZ")
        tag: Canonical tag, modifiers included ("cs_CZ", "sr_Latn_RS@latin")
    """

    language: str
    region: str
    tag: str = field(default="", compare=False)

    @classmethod
    def parse(cls, locale_code: str) -> LocaleTarget:
        """Validate and canonicalize a locale code.

        Raises:
            InvalidLocaleError: If the code is invalid or has no region
        """
        base, _, modifier = locale_code.strip().partition("@")
        locale = get_babel_locale(base)
        if not locale.territory:
            msg = f"Locale '{locale_code}' has no region; use a full tag such as '{locale.language}_XX'"
            raise InvalidLocaleError(msg)
        tag = str(locale) + (f"@{modifier}" if modifier else "")
        return cls(language=locale.language, region=locale.territory, tag=tag)

    @property
    def posix(self) -> str:
        return f"{self.language}_{self.region}"

    @property
    def web(self) -> str:
        return f"{self.language}-{self.region}"

    def __str__(self) -> str:
        return self.posix


@dataclass(frozen=True, slots=True)
class LocaleConfig:
    """Supported locales of a run.

    Attributes:
        supported: Locales files are produced for, in configuration order
        default: Locale source documents are written in; never translated
    """

    supported: tuple[LocaleTarget, ...]
    default: LocaleTarget = field(default_factory=lambda: LocaleTarget.parse(DEFAULT_LOCALE))

    def __post_init__(self) -> None:
        if len(set(self.supported)) != len(self.supported):
            msg = f"Duplicate supported locales: {', '.join(map(str, self.supported))}"
            raise InvalidLocaleError(msg)

    @classmethod
    def from_tags(cls, tags: Iterable[str], default: str = DEFAULT_LOCALE) -> LocaleConfig:
        """Build from locale codes, dropping repeats.

        Raises:
            InvalidLocaleError: If any code is invalid
        """
        targets = dict.fromkeys(LocaleTarget.parse(tag) for tag in tags)
        return cls(supported=tuple(targets), default=LocaleTarget.parse(default))

    @property
    def posix_codes(self) -> tuple[str, ...]:
        return tuple(t.posix for t in self.supported)

    @property
    def translation_targets(self) -> tuple[LocaleTarget, ...]:
        """Supported locales other than the default."""
        return tuple(t for t in self.supported if t != self.default)

    def select(self, locale_code: str) -> LocaleTarget:
        """Return the supported target for a full locale code.

        Raises:
            InvalidLocaleError: If the code is invalid or not supported
        """
        target = LocaleTarget.parse(locale_code)
        if target not in self.supported and target != self.default:
            msg = f"Locale '{locale_code}' is not supported"
            raise InvalidLocaleError(msg)
        return target

    def match_language(self, language: str) -> LocaleTarget:
        """Return the only supported target with the given language.

        Raises:
            InvalidLocaleError: If no target or more than one target matches
        """
        wanted = language.strip().lower()
        matches = [t for t in self.supported if t.language == wanted]
        if not matches:
            msg = f"Language '{language}' is not supported"
            raise InvalidLocaleError(msg)
        if len(matches) > 1:
            msg = f"Language '{language}' is ambiguous: {', '.join(t.posix for t in matches)}"
            raise InvalidLocaleError(msg)
        return matches[0]
