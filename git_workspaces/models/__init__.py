"""Data models for git-workspaces."""

from .workspace import CliConfig, RepoConfig, WorkspaceConfig
from .worktree import GitResult, PlanOverrides, ProvisionOutcome, WorktreeEntry, WorktreePlan

__all__ = [
    "CliConfig",
    "RepoConfig",
    "WorkspaceConfig",
    "GitResult",
    "PlanOverrides",
    "ProvisionOutcome",
    "WorktreeEntry",
    "WorktreePlan",
]
