"""Allow running as ``python -m pathscrub``."""

import sys

from pathscrub.cli import main

if __name__ == "__main__":
    sys.exit(main())
