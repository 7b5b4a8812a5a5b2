"""Allow running as ``python -m skilltree``."""

import sys

from skilltree.cli import main

sys.exit(main())
