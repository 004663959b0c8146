"""
Main entry point for the Pagecraft CLI when run as a module.

This allows the CLI to be executed using:
    python -m pagecraft.cli
"""

from . import main

if __name__ == '__main__':
    main()
