"""
Entry point for running loadmaster as a module.

Usage:
    python -m loadmaster analyze --input load.json
    python -m loadmaster make-example
    python -m loadmaster serve --port 8000
"""

import sys

from loadmaster.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
