"""Allow ``python -m codequiz``."""

import sys

from codequiz.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
