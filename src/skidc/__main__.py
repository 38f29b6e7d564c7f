"""
Entry point for module execution (``python -m skidc``).

This module delegates execution to the CLI handler in ``skidc.cli.__main__``.
"""

import sys
from skidc.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
