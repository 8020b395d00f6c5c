"""Worktree planning: which branch, from which base, and where."""

from git_workspaces.constants import DEFAULT_BRANCH
from git_workspaces.exceptions import ConfigError, MissingTargetRootError
from git_workspaces.models.workspace import RepoConfig, WorkspaceConfig
from git_workspaces.models.worktree import PlanOverrides, WorktreePlan
from git_workspaces.utils.paths import is_path_within, join_under


def plan_worktree(
    workspace: WorkspaceConfig,
    repo: RepoConfig,
    overrides: PlanOverrides = PlanOverrides(),
) -> WorktreePlan:
    """Compute the worktree plan for one repo of a workspace.

    Branch and base branch both resolve override, then repo default, then
    workspace default, then ``main``. The target path is
    ``<target root>/<workspace name>/<target subdir or repo name>``.

    Args:
        workspace: Workspace the repo belongs to
        repo: Repo to plan for
        overrides: Command-line values that win over configuration

    Returns:
        WorktreePlan for the repo

    Raises:
        MissingTargetRootError: If neither the overrides nor the workspace give a target root
        ConfigError: If the workspace name or target subdir climbs out of the target root
    """
    branch = overrides.branch or repo.default_branch or workspace.default_branch or DEFAULT_BRANCH
    base_branch = overrides.base or repo.default_branch or workspace.default_branch or DEFAULT_BRANCH

    target_root = overrides.target or workspace.target_root
    if not target_root:
        raise MissingTargetRootError(workspace.name)

    root = join_under(target_root)
    target_path = join_under(root, workspace.name, repo.effective_subdir)
    if target_path == root or not is_path_within(target_path, root):
        raise ConfigError(
            f"workspace '{workspace.name}' repo '{repo.name}': target path {target_path} is outside {target_root}"
        )

    return WorktreePlan(
        repo_name=repo.name,
        repo_path=repo.source,
        branch=branch,
        base_branch=base_branch,
        target_path=target_path,
        dry_run=overrides.dry_run,
    )
