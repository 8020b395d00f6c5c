"""Formatting utilities for git-workspaces.

- branch: branch refs, unset values and worktree lines
- status: provisioning outcomes
"""

from .branch import format_branch_ref, format_optional, format_worktree_entry
from .status import format_outcome_details, format_outcome_status

__all__ = [
    "format_branch_ref",
    "format_optional",
    "format_worktree_entry",
    "format_outcome_details",
    "format_outcome_status",
]
