#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Entry point for running lexdoc as a module.

This allows the package to be executed as:
    python -m lexdoc [arguments]
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
