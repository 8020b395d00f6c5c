"""Workspace registry operations.

Every mutation returns a new ``CliConfig`` and leaves its input untouched, so
a failed mutation never partially applies.
"""

import dataclasses
from typing import Optional

from git_workspaces.exceptions import (
    DuplicateRepoError,
    RepoNotFoundError,
    WorkspaceNotFoundError,
)
from git_workspaces.models.workspace import CliConfig, RepoConfig, WorkspaceConfig
from git_workspaces.utils.paths import is_path_within, normalize_path
from git_workspaces.logging_config import get_logger

logger = get_logger(__name__)


def _same_name(a: str, b: str) -> bool:
    return a.lower() == b.lower()


def find_workspace(config: CliConfig, name: str) -> Optional[WorkspaceConfig]:
    """Find a workspace by name, ignoring case."""
    for workspace in config.workspaces:
        if _same_name(workspace.name, name):
            return workspace
    return None


def find_repo(workspace: WorkspaceConfig, name: str) -> Optional[RepoConfig]:
    """Find a repo in a workspace by name, ignoring case."""
    for repo in workspace.repos:
        if _same_name(repo.name, name):
            return repo
    return None


def upsert_workspace(config: CliConfig, workspace: WorkspaceConfig) -> CliConfig:
    """Replace the workspace with the same name, or append it.

    A replaced workspace keeps its position in the list.
    """
    workspaces = list(config.workspaces)
    for index, existing in enumerate(workspaces):
        if _same_name(existing.name, workspace.name):
            workspaces[index] = workspace
            break
    else:
        workspaces.append(workspace)
    return dataclasses.replace(config, workspaces=workspaces)


def remove_workspace(config: CliConfig, name: str) -> CliConfig:
    """Remove a workspace by name.

    Raises:
        WorkspaceNotFoundError: If no workspace has that name
    """
    if find_workspace(config, name) is None:
        raise WorkspaceNotFoundError(name)
    return dataclasses.replace(
        config,
        workspaces=[ws for ws in config.workspaces if not _same_name(ws.name, name)],
    )


def add_repo_to_workspace(config: CliConfig, workspace_name: str, repo: RepoConfig) -> CliConfig:
    """Append a repo to a workspace.

    Raises:
        WorkspaceNotFoundError: If the workspace does not exist
        DuplicateRepoError: If the workspace already has a repo with that name
    """
    workspace = find_workspace(config, workspace_name)
    if workspace is None:
        raise WorkspaceNotFoundError(workspace_name)
    if find_repo(workspace, repo.name) is not None:
        raise DuplicateRepoError(repo.name, workspace.name)

    updated = dataclasses.replace(workspace, repos=[*workspace.repos, repo])
    logger.debug(f"Adding repo {repo.name} to workspace {workspace.name}")
    return upsert_workspace(config, updated)


def remove_repo_from_workspace(config: CliConfig, workspace_name: str, repo_name: str) -> CliConfig:
    """Remove a repo from a workspace.

    Raises:
        WorkspaceNotFoundError: If the workspace does not exist
        RepoNotFoundError: If the workspace has no repo with that name
    """
    workspace = find_workspace(config, workspace_name)
    if workspace is None:
        raise WorkspaceNotFoundError(workspace_name)
    if find_repo(workspace, repo_name) is None:
        raise RepoNotFoundError(repo_name, workspace.name)

    updated = dataclasses.replace(
        workspace,
        repos=[repo for repo in workspace.repos if not _same_name(repo.name, repo_name)],
    )
    return upsert_workspace(config, updated)


def resolve_workspace_from_cwd(config: CliConfig, cwd: str) -> Optional[WorkspaceConfig]:
    """Find the most specific workspace whose target root contains ``cwd``.

    Paths are compared lexically after normalization; a relative target root
    is taken relative to ``cwd``. When several roots contain ``cwd`` the
    longest one wins, so nested target roots resolve to the innermost
    workspace.

    Args:
        config: Loaded workspace registry
        cwd: Directory to resolve

    Returns:
        The matching workspace, or None
    """
    normalized_cwd = normalize_path(cwd)
    best: Optional[WorkspaceConfig] = None
    best_length = -1

    for workspace in config.workspaces:
        if not workspace.target_root:
            continue
        root = normalize_path(workspace.target_root, base=normalized_cwd)
        if is_path_within(normalized_cwd, root) and len(root) > best_length:
            best = workspace
            best_length = len(root)

    if best is not None:
        logger.debug(f"Resolved workspace {best.name} from {normalized_cwd}")
    return best
