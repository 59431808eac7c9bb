"""
Module execution entry point.

Allows running with: python -m stumbler_cli
"""

import sys
from stumbler_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
