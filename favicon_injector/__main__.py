"""Entry point for ``python -m favicon_injector``."""

import sys

from favicon_injector.cli import main

if __name__ == "__main__":
    sys.exit(main())
