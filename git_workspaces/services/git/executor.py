"""Git command execution for git-workspaces."""

import os
from typing import Sequence, Union

import git

from git_workspaces.models.worktree import GitResult
from git_workspaces.logging_config import get_logger

logger = get_logger(__name__)

PathLike = Union[str, os.PathLike]


class GitExecutor:
    """Runs git subcommands in a repository directory.

    Every invocation is turned into a ``GitResult``; git failures and spawn
    failures are reported, never raised.
    """

    def run(self, args: Sequence[str], cwd: PathLike) -> GitResult:
        """Run ``git <args>`` with ``cwd`` as the working directory.

        Args:
            args: Git arguments, without the leading ``git``
            cwd: Directory to run in (usually the repo's source clone)

        Returns:
            GitResult with ok=True only when git exited with status 0
        """
        workdir = os.fspath(cwd)
        command = ["git", *args]

        # GitPython falls back to the process cwd when the directory is missing
        if not os.path.isdir(workdir):
            message = f"Working directory does not exist: {workdir}"
            logger.debug(message)
            return GitResult.failure(message)

        logger.debug(f"Running {' '.join(command)} in {workdir}")
        try:
            status, stdout, stderr = git.Git(workdir).execute(
                command,
                with_extended_output=True,
                with_exceptions=False,
            )
        except (git.exc.GitCommandNotFound, OSError) as e:
            message = f"Could not run git in {workdir}: {e}"
            logger.debug(message)
            return GitResult.failure(message)

        stdout = stdout or ""
        stderr = stderr or ""
        if status != 0:
            logger.debug(f"{' '.join(command)} exited {status}: {stderr.strip()}")
            return GitResult(ok=False, stdout=stdout, stderr=stderr, code=status or 1)
        return GitResult(ok=True, stdout=stdout, stderr=stderr, code=0)
