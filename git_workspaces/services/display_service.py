"""Display and formatting service for workspace information"""
from collections import Counter
from typing import List

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from git_workspaces.constants import (
    OutcomeStatus,
    PROVISION_COLUMNS,
    REPO_COLUMNS,
    WORKSPACE_COLUMNS,
)
from git_workspaces.formatters import (
    format_optional,
    format_outcome_details,
    format_outcome_status,
    format_worktree_entry,
)
from git_workspaces.models.workspace import CliConfig, RepoConfig, WorkspaceConfig
from git_workspaces.models.worktree import ProvisionOutcome, WorktreeEntry
from git_workspaces.logging_config import get_logger

console = Console()
logger = get_logger(__name__)


class DisplayService:
    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def display_workspaces(self, config: CliConfig) -> None:
        """Display a table of configured workspaces."""
        if not config.workspaces:
            console.print("No workspaces configured yet.")
            return

        table = Table()
        for col in WORKSPACE_COLUMNS:
            table.add_column(col.label)
        for workspace in config.workspaces:
            table.add_row(
                escape(workspace.name),
                escape(format_optional(workspace.target_root)),
                escape(format_optional(workspace.default_branch)),
                str(len(workspace.repos)),
            )
        console.print(table)

    def display_repos(self, workspace: WorkspaceConfig) -> None:
        """Display a table of the repos in a workspace."""
        if not workspace.repos:
            console.print(f"Workspace \"{escape(workspace.name)}\" has no repos yet.")
            return

        table = Table(title=escape(workspace.name))
        for col in REPO_COLUMNS:
            table.add_column(col.label)
        for repo in workspace.repos:
            table.add_row(
                escape(repo.name),
                escape(repo.source),
                escape(repo.effective_subdir),
                escape(format_optional(repo.default_branch)),
            )
        console.print(table)

    def display_provision_results(self, workspace: WorkspaceConfig, outcomes: List[ProvisionOutcome]) -> None:
        """Display the per-repo results of a workspace init and a summary line."""
        if not outcomes:
            console.print(f"Workspace \"{escape(workspace.name)}\" has no repos to initialize.")
            return

        table = Table(title=f"Worktrees for {escape(workspace.name)}")
        for col in PROVISION_COLUMNS:
            table.add_column(col.label)
        for outcome in outcomes:
            plan = outcome.plan
            table.add_row(
                escape(outcome.repo_name),
                format_outcome_status(outcome.status),
                escape(plan.branch) if plan else "",
                escape(plan.target_path) if plan else "",
                escape(format_outcome_details(outcome)),
            )
        console.print(table)

        counts = Counter(outcome.status for outcome in outcomes)
        summary = ", ".join(
            f"{counts[status]} {status}"
            for status in (OutcomeStatus.CREATED, OutcomeStatus.DRY_RUN, OutcomeStatus.SKIPPED, OutcomeStatus.FAILED)
            if counts[status]
        )
        console.print(f"\nSummary: {summary}")

    def display_worktree_status(self, repo: RepoConfig, entries: List[WorktreeEntry], filtered: bool) -> None:
        """Display the worktrees of one repo.

        Args:
            repo: Repo the worktrees belong to
            entries: Worktrees to show
            filtered: Whether entries were limited to the workspace target root
        """
        if not entries:
            suffix = " under target root" if filtered else ""
            console.print(f"[yellow]{escape(repo.name)}: no worktrees found{suffix}.[/yellow]")
            return

        console.print(f"[bold]{escape(repo.name)}:[/bold]")
        for entry in entries:
            console.print(f"  {escape(format_worktree_entry(entry))}")
