"""Allow ``python -m novae``."""

import sys

from novae.cli import main

if __name__ == "__main__":
    sys.exit(main())
