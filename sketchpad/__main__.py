"""Entry point for running Sketchpad as a module: python -m sketchpad"""

import sys
from .ui import main

if __name__ == "__main__":
    sys.exit(main())
