"""Git-related services for git-workspaces."""

from .executor import GitExecutor
from .worktrees import WorktreeService, parse_worktree_porcelain

__all__ = [
    "GitExecutor",
    "WorktreeService",
    "parse_worktree_porcelain",
]
