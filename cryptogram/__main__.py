"""
Cryptogram Module Entry Point
=============================

Allows running the encode command via: python -m cryptogram
"""

from cryptogram.cli import main

if __name__ == "__main__":
    main()
