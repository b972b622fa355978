"""Quickstart: hash a source document and translate it in memory.

Runs without the GNU gettext tools: translations come from a
StaticCatalogLookup instead of compiled catalogs.

Python 3.13+.
"""

from htmlgettext import DictionaryBuilder, DocumentTranslator, RunLog, StaticCatalogLookup
from htmlgettext.markup import parse_document, serialize_document

SOURCE = """<!DOCTYPE html>
<html>
<head><meta name="gettext" content="translate"><title gettext=".">Shop</title></head>
<body>
<h1 gettext=".">
    Welcome to
    our shop
</h1>
<img gettext="alt" alt="Logo" src="logo.png">
</body>
</html>
"""


def main() -> None:
    log = RunLog()

    # 1. Hash every tag of the source document.
    result = DictionaryBuilder("shop", log).build(parse_document(SOURCE), source="index.html")
    print("Strings for the catalog:")
    for string in result.strings:
        print(f"  {string.text!r:30} # {string.comment}")

    # 2. Translate a copy of the hashed template.
    catalog = StaticCatalogLookup(
        {
            ("shop", "cs_CZ"): {
                "Shop": "Obchod",
                "Welcome to our shop": "Vítejte v našem obchodě",
                "Logo": "Logo obchodu",
            }
        }
    )
    document = result.template
    written = DocumentTranslator(catalog, log).translate(
        document, result.dictionary, "shop", "cs_CZ", source="index.cs-CZ.html"
    )
    print(f"\nTranslated {written} value(s):\n")
    print(serialize_document(document))

    for line in log.lines():
        print(line)


if __name__ == "__main__":
    main()
