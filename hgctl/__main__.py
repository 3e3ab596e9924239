"""Entry point for running hgctl as a module."""

import sys

from hgctl.cli import main

if __name__ == "__main__":
    sys.exit(main())
