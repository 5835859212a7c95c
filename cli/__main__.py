"""
CLI Module Main Entry Point

This module allows the CLI package to be executed directly with:
    python -m cli

It imports and calls the main CLI function from the package.
"""

from . import main

if __name__ == '__main__':
    main()
