"""Command-line interface for git-workspaces.

This package provides the CLI entry point, argument parsing and command handlers.
"""

from .main import main
from .args import parse_args

__all__ = ["main", "parse_args"]
