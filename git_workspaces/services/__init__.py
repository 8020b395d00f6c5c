"""Services for git-workspaces."""

from .config_store import ConfigStore
from .display_service import DisplayService
from .planner import plan_worktree
from .provisioner import WorktreeProvisioner
from .workspace_service import (
    add_repo_to_workspace,
    find_repo,
    find_workspace,
    remove_repo_from_workspace,
    remove_workspace,
    resolve_workspace_from_cwd,
    upsert_workspace,
)

__all__ = [
    "ConfigStore",
    "DisplayService",
    "WorktreeProvisioner",
    "plan_worktree",
    "add_repo_to_workspace",
    "find_repo",
    "find_workspace",
    "remove_repo_from_workspace",
    "remove_workspace",
    "resolve_workspace_from_cwd",
    "upsert_workspace",
]
