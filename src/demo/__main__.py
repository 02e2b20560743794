"""
The entry point for the projectile demo: ``python -m src.demo``.
"""

import sys

from src.demo.projectile import main

if __name__ == "__main__":
    sys.exit(main())
