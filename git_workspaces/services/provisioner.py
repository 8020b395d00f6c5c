"""Worktree provisioning for git-workspaces."""

import os
from typing import List, Optional

from git_workspaces.constants import DEFAULT_BRANCH, OutcomeStatus
from git_workspaces.models.workspace import WorkspaceConfig
from git_workspaces.models.worktree import GitResult, PlanOverrides, ProvisionOutcome, WorktreePlan
from git_workspaces.services.git.executor import GitExecutor
from git_workspaces.services.git.worktrees import WorktreeService
from git_workspaces.services.planner import plan_worktree
from git_workspaces.logging_config import get_logger

logger = get_logger(__name__)


class WorktreeProvisioner:
    """Creates worktrees from plans, one repo at a time."""

    def __init__(self, executor: Optional[GitExecutor] = None):
        """Initialize the provisioner.

        Args:
            executor: Git executor to run commands with (a real one by default)
        """
        self.executor = executor or GitExecutor()
        self.worktree_service = WorktreeService(self.executor)

    def build_add_args(self, plan: WorktreePlan, target: str, branch_exists: bool) -> List[str]:
        """Build the ``git worktree add`` arguments for a plan.

        An existing branch is attached as-is and the base branch is ignored;
        a missing one is created with ``-b`` from the base branch.
        """
        args = ["worktree", "add"]
        if not branch_exists:
            args.extend(["-b", plan.branch])
        args.append(target)
        args.append(plan.branch if branch_exists else (plan.base_branch or DEFAULT_BRANCH))
        return args

    def add_worktree(self, plan: WorktreePlan) -> GitResult:
        """Create (or, in dry-run mode, describe) the worktree for a plan.

        Args:
            plan: Resolved plan for one repo

        Returns:
            GitResult of ``git worktree add``, or a failure if the target already exists
            or the source is not a git repository
        """
        target = os.path.abspath(plan.target_path)
        repo = os.path.abspath(plan.repo_path)

        if os.path.exists(target):
            logger.warning(f"Not creating worktree for {plan.repo_name}: {target} already exists")
            return GitResult.failure(f"Target path already exists: {target}")

        if not self.worktree_service.is_git_repo(repo):
            logger.warning(f"Not creating worktree for {plan.repo_name}: {repo} is not a git repo")
            return GitResult.failure(f"Source path is not a git repo: {repo}")

        branch_exists = self.worktree_service.branch_exists(repo, plan.branch)
        args = self.build_add_args(plan, target, branch_exists)

        if plan.dry_run:
            return GitResult(ok=True, stdout=f"DRY RUN: git {' '.join(args)}")

        os.makedirs(os.path.dirname(target), exist_ok=True)
        result = self.executor.run(args, cwd=repo)
        if result.ok:
            logger.info(f"Created worktree for {plan.repo_name} at {target} (branch {plan.branch})")
        else:
            logger.error(f"git worktree add failed for {plan.repo_name} (exit {result.code}): {result.stderr.strip()}")
        return result

    def provision_workspace(
        self,
        workspace: WorkspaceConfig,
        overrides: PlanOverrides = PlanOverrides(),
    ) -> List[ProvisionOutcome]:
        """Create worktrees for every repo of a workspace, in configuration order.

        A repo that fails or is skipped does not stop the others.

        Raises:
            MissingTargetRootError: If no target root is available for the workspace
        """
        outcomes: List[ProvisionOutcome] = []

        for repo in workspace.repos:
            plan = plan_worktree(workspace, repo, overrides)

            if not self.worktree_service.is_git_repo(repo.source):
                logger.warning(f"Skipping {repo.name}: source path is not a git repo ({repo.source})")
                outcomes.append(ProvisionOutcome(
                    repo_name=repo.name,
                    status=OutcomeStatus.SKIPPED,
                    result=GitResult.failure(f"Source path is not a git repo: {repo.source}"),
                    plan=plan,
                ))
                continue

            result = self.add_worktree(plan)
            if not result.ok:
                status = OutcomeStatus.FAILED
            elif plan.dry_run:
                status = OutcomeStatus.DRY_RUN
            else:
                status = OutcomeStatus.CREATED
            outcomes.append(ProvisionOutcome(repo_name=repo.name, status=status, result=result, plan=plan))

        return outcomes
