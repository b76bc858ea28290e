"""Allow ``python -m imgrow``."""

import sys

from imgrow.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
