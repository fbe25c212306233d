"""Entry point for ``python -m sigo``."""

import sys

from sigo.main import main

if __name__ == "__main__":
    sys.exit(main())
