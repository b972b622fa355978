"""Shared constants for htmlgettext.

Constants are grouped by domain:
- Markup: attribute and meta names recognized in HTML documents
- Identity: content hash length
- Locales: the untranslated default locale
- Files: catalog layout and file discovery defaults
- Tools: external gettext tool invocation defaults

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Markup
    "MARKUP_NAME",
    "MODE_META_NAME",
    # Identity
    "HASH_LENGTH",
    # Locales
    "DEFAULT_LOCALE",
    "DEFAULT_DOMAIN",
    # Files
    "LOCALE_DIR",
    "POT_FILENAME",
    "LINGUAS_FILENAME",
    "JS_DIST_DIR",
    "EXCLUDE_FILES",
    "POT_HEADER",
    "JS_README",
    # Tools
    "BATCH_SIZE",
    "PACKAGE_VERSION",
    "REQUIRED_TOOLS",
]

# ============================================================================
# MARKUP
# ============================================================================

# Attribute carrying the whitespace-separated tag list, e.g. gettext=". title"
MARKUP_NAME: str = "gettext"

# <meta name="gettext" content="translate|replace|cherry-pick">
MODE_META_NAME: str = "gettext"

# ============================================================================
# IDENTITY
# ============================================================================

# Hex characters of the SHA-1 digest kept as the string identity.
# Changing this invalidates every hash already written into generated files.
HASH_LENGTH: int = 6

# ============================================================================
# LOCALES
# ============================================================================

# Source documents are authored in this locale; it is never translated.
DEFAULT_LOCALE: str = "en_US"

# Text domain for files that do not belong to any known module.
DEFAULT_DOMAIN: str = "messages"

# ============================================================================
# FILES
# ============================================================================

LOCALE_DIR: str = "locale"
POT_FILENAME: str = "messages.pot"
LINGUAS_FILENAME: str = "LINGUAS"

# Relative to the module root; holds messages.pot and <lang-REGION>.json
JS_DIST_DIR: str = "install/dist"

# fnmatch patterns applied to "./relative/path" of every discovered file
EXCLUDE_FILES: tuple[str, ...] = ("*/vendor/*", "*/tmp/*", "*/.*")

POT_HEADER: str = (
    'msgid ""\n'
    'msgstr ""\n'
    '"Content-Type: text/plain; charset=UTF-8\\n"\n'
    '"Language: en\\n"\n'
    "\n"
)

JS_README: str = (
    "DO NOT EDIT FILES IN THIS DIRECTORY.\n"
    "\n"
    "The messages.pot and *.json files are generated automatically by\n"
    "`htmlgettext extract` and `htmlgettext compile`. Translate the module's\n"
    "locale/*.po files instead.\n"
)

# ============================================================================
# TOOLS
# ============================================================================

# Files per xgettext invocation; keeps argument lists below OS limits.
BATCH_SIZE: int = 100

PACKAGE_VERSION: str = "1.0"

REQUIRED_TOOLS: tuple[str, ...] = ("xgettext", "msginit", "msgmerge", "msgfmt")
