"""Allow running taxotree as ``python -m taxotree``."""

import sys

from taxotree.cli import main

sys.exit(main())
