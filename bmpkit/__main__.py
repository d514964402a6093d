"""Allow ``python -m bmpkit``."""

import sys

from bmpkit.cli import main

sys.exit(main())
