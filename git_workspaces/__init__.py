"""
git-workspaces - create git worktrees for groups of repositories
"""

from .__version__ import __version__
from .cli.main import main

__all__ = ["main", "__version__"]
