"""Allow ``python -m mediaopts``."""

import sys

from mediaopts.ui.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
