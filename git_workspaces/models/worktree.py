"""Worktree data models."""

from dataclasses import dataclass
from typing import Optional

from git_workspaces.constants import OutcomeStatus


@dataclass
class WorktreeEntry:
    """A worktree as reported by ``git worktree list --porcelain``."""

    path: str
    branch: Optional[str] = None  # full ref, e.g. refs/heads/feature
    bare: bool = False

    def __str__(self) -> str:
        branch = f" ({self.branch})" if self.branch else ""
        bare = " [bare]" if self.bare else ""
        return f"{self.path}{branch}{bare}"


@dataclass(frozen=True)
class PlanOverrides:
    """Values supplied on the command line that take precedence over configuration."""

    branch: Optional[str] = None
    base: Optional[str] = None
    target: Optional[str] = None
    dry_run: bool = False


@dataclass(frozen=True)
class WorktreePlan:
    """Resolved inputs for a single ``git worktree add``."""

    repo_name: str
    repo_path: str
    branch: str
    base_branch: str
    target_path: str
    dry_run: bool = False


@dataclass
class GitResult:
    """Outcome of a git invocation."""

    ok: bool
    stdout: str = ""
    stderr: str = ""
    code: int = 0

    @classmethod
    def failure(cls, message: str, code: int = 1) -> "GitResult":
        return cls(ok=False, stdout="", stderr=message, code=code)


@dataclass
class ProvisionOutcome:
    """What happened to one repo during a workspace init."""

    repo_name: str
    status: str  # OutcomeStatus value
    result: GitResult
    plan: Optional[WorktreePlan] = None

    @property
    def ok(self) -> bool:
        return self.status in (OutcomeStatus.CREATED, OutcomeStatus.DRY_RUN)

    @property
    def message(self) -> str:
        """Best single line describing the outcome."""
        text = self.result.stderr if not self.result.ok else self.result.stdout
        text = (text or "").strip()
        return text.splitlines()[0] if text else ""
