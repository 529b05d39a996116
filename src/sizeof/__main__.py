"""Allow ``python -m sizeof``."""

import sys

from sizeof.ui.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
