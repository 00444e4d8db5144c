"""Entry point for ``python -m kubesnap``."""

import sys

from kubesnap.cli import main

if __name__ == "__main__":
    sys.exit(main())
