"""
Command-line interface for loadmaster.
"""

from loadmaster.cli.main import cli, main

__all__ = ["cli", "main"]
