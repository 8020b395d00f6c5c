"""Branch and worktree formatting utilities."""

from typing import Optional

from git_workspaces.constants import BRANCH_REF_PREFIX, DETACHED_DISPLAY, SYMBOL_BARE, UNSET_DISPLAY
from git_workspaces.models.worktree import WorktreeEntry


def format_optional(value: Optional[str]) -> str:
    """Show unset configuration values as 'unset'."""
    return value if value else UNSET_DISPLAY


def format_branch_ref(ref: Optional[str]) -> str:
    """Format a branch ref for display.

    Args:
        ref: Full ref such as refs/heads/feature, or None for a detached worktree

    Returns:
        Short branch name, or 'detached'
    """
    if not ref:
        return DETACHED_DISPLAY
    if ref.startswith(BRANCH_REF_PREFIX):
        return ref[len(BRANCH_REF_PREFIX):]
    return ref


def format_worktree_entry(entry: WorktreeEntry) -> str:
    """Format one worktree line for status output."""
    if entry.bare:
        return f"{entry.path} {SYMBOL_BARE}"
    return f"{entry.path} ({format_branch_ref(entry.branch)})"
