"""Allow ``python -m gpl2clr``."""

import sys

from .cli import main

raise SystemExit(main(sys.argv[1:]))
