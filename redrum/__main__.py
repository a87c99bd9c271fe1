"""
Redrum Module Entry Point
==========================

Allows running the CLI via: python -m redrum
"""

from redrum.cli import main

if __name__ == "__main__":
    main()
