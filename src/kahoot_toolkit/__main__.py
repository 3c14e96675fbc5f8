"""Allow running as `python -m kahoot_toolkit`."""

import sys

from kahoot_toolkit.cli import main

if __name__ == "__main__":
    sys.exit(main())
