"""Repository and worktree queries for git-workspaces."""

from typing import List, Optional

from git_workspaces.models.worktree import WorktreeEntry
from git_workspaces.services.git.executor import GitExecutor, PathLike
from git_workspaces.logging_config import get_logger

logger = get_logger(__name__)


def parse_worktree_porcelain(output: str) -> List[WorktreeEntry]:
    """Parse ``git worktree list --porcelain`` output.

    Format:
        worktree /path/to/worktree
        HEAD commit_sha
        branch refs/heads/branch-name
        (blank line between worktrees)

    A ``worktree`` line starts a new entry; ``branch`` and ``bare`` lines
    describe the current one. Other lines (HEAD, detached, locked, prunable,
    anything newer) are ignored.
    """
    entries: List[WorktreeEntry] = []
    current: Optional[WorktreeEntry] = None

    for line in output.split("\n"):
        line = line.rstrip("\r")
        if line.startswith("worktree "):
            if current is not None and current.path:
                entries.append(current)
            current = WorktreeEntry(path=line[len("worktree "):].strip())
        elif current is None:
            continue
        elif line.startswith("branch "):
            current.branch = line[len("branch "):].strip()
        elif line.strip() == "bare":
            current.bare = True

    if current is not None and current.path:
        entries.append(current)
    return entries


class WorktreeService:
    """Read-only git queries used before and after provisioning."""

    def __init__(self, executor: Optional[GitExecutor] = None):
        self.executor = executor or GitExecutor()

    def is_git_repo(self, path: PathLike) -> bool:
        """Check whether ``path`` is inside a git work tree."""
        result = self.executor.run(["rev-parse", "--is-inside-work-tree"], cwd=path)
        return result.ok and result.stdout.strip() == "true"

    def branch_exists(self, repo_path: PathLike, branch: str) -> bool:
        result = self.executor.run(["rev-parse", "--verify", branch], cwd=repo_path)
        return result.ok

    def list_worktrees(self, repo_path: PathLike) -> List[WorktreeEntry]:
        """Get all worktrees known to the repository.

        Returns:
            List of WorktreeEntry objects, empty if git could not list them
        """
        result = self.executor.run(["worktree", "list", "--porcelain"], cwd=repo_path)
        if not result.ok:
            logger.debug(f"Could not list worktrees for {repo_path}: {result.stderr.strip()}")
            return []

        entries = parse_worktree_porcelain(result.stdout)
        logger.debug(f"Found {len(entries)} worktrees in {repo_path}")
        return entries
