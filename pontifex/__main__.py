"""
Pontifex Module Entry Point
============================

Allows running the CLI via: python -m pontifex
"""

from pontifex.cli import main

if __name__ == "__main__":
    main()
