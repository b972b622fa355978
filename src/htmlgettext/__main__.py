"""Allow ``python -m htmlgettext``."""

import sys

from htmlgettext.cli import main

sys.exit(main())
