"""Custom exceptions for git-workspaces"""

from typing import Optional


class GitWorkspacesError(Exception):
    """Base exception for all git-workspaces errors."""
    pass


class ConfigError(GitWorkspacesError):
    """Exception raised when the configuration document cannot be loaded or is invalid."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.message = message
        self.path = path

        error_msg = "Invalid configuration"
        if path:
            error_msg += f" in '{path}'"
        error_msg += f": {message}"

        super().__init__(error_msg)


class WorkspaceNotFoundError(GitWorkspacesError):
    """Exception raised when a workspace is not found."""

    def __init__(self, workspace: str):
        self.workspace = workspace
        super().__init__(f"Workspace \"{workspace}\" not found")


class DuplicateWorkspaceError(GitWorkspacesError):
    """Exception raised when two workspaces share a name."""

    def __init__(self, workspace: str):
        self.workspace = workspace
        super().__init__(f"Workspace \"{workspace}\" already exists")


class RepoNotFoundError(GitWorkspacesError):
    """Exception raised when a repo is not found in a workspace."""

    def __init__(self, repo: str, workspace: str):
        self.repo = repo
        self.workspace = workspace
        super().__init__(f"Repo \"{repo}\" not found in workspace \"{workspace}\"")


class DuplicateRepoError(GitWorkspacesError):
    """Exception raised when a repo name is already used within a workspace."""

    def __init__(self, repo: str, workspace: str):
        self.repo = repo
        self.workspace = workspace
        super().__init__(f"Repo \"{repo}\" already exists in workspace \"{workspace}\"")


class MissingTargetRootError(GitWorkspacesError):
    """Exception raised when a worktree is planned without a target root."""

    def __init__(self, workspace: str):
        self.workspace = workspace
        super().__init__(
            f"Workspace \"{workspace}\" has no target root; pass --target or set one on the workspace"
        )
