"""Entry point for ``python -m marker``."""

import sys

from marker.cli import main

if __name__ == "__main__":
    sys.exit(main())
