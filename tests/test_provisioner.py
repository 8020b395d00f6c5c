"""Tests for worktree provisioning"""
import os

import git

from git_workspaces.constants import OutcomeStatus
from git_workspaces.models.workspace import RepoConfig, WorkspaceConfig
from git_workspaces.models.worktree import GitResult, PlanOverrides, WorktreePlan
from git_workspaces.services.provisioner import WorktreeProvisioner


def _plan(repo_path, target_path, branch="feature/x", base_branch="main", dry_run=False):
    return WorktreePlan(
        repo_name="api",
        repo_path=str(repo_path),
        branch=branch,
        base_branch=base_branch,
        target_path=str(target_path),
        dry_run=dry_run,
    )


class TestAddWorktreePreconditions:
    """Checks that run before git is touched."""

    def test_existing_target_fails_without_side_effects(self, temp_dir, mock_executor):
        target = temp_dir / "wt" / "api"
        target.mkdir(parents=True)
        (target / "keep.txt").write_text("keep")

        result = WorktreeProvisioner(mock_executor).add_worktree(_plan(temp_dir / "repo", target))

        assert result.ok is False
        assert result.code == 1
        assert "Target path already exists" in result.stderr
        assert str(target) in result.stderr
        mock_executor.run.assert_not_called()
        assert os.listdir(target) == ["keep.txt"]

    def test_existing_file_target_fails(self, temp_dir, mock_executor):
        target = temp_dir / "api"
        target.write_text("")

        result = WorktreeProvisioner(mock_executor).add_worktree(_plan(temp_dir / "repo", target))

        assert result.ok is False
        mock_executor.run.assert_not_called()

    def test_non_git_source_fails_before_creating_directories(self, temp_dir):
        source = temp_dir / "not-a-repo"
        source.mkdir()

        result = WorktreeProvisioner().add_worktree(_plan(source, temp_dir / "wt" / "clerk" / "api"))

        assert result.ok is False
        assert "not a git repo" in result.stderr
        assert not (temp_dir / "wt").exists()


class TestAddWorktreeDryRun:
    """Dry runs describe the command without creating anything."""

    def test_dry_run_new_branch(self, temp_dir, mock_executor):
        mock_executor.run.side_effect = [
            GitResult(ok=True, stdout="true\n"),
            GitResult.failure("fatal: Needed a single revision"),
        ]
        target = temp_dir / "wt" / "clerk" / "api"

        result = WorktreeProvisioner(mock_executor).add_worktree(
            _plan(temp_dir / "repo", target, base_branch="develop", dry_run=True)
        )

        assert result.ok is True
        assert result.stdout == f"DRY RUN: git worktree add -b feature/x {target} develop"
        assert not (temp_dir / "wt").exists()
        # Only the repo check and the branch lookup ran
        assert mock_executor.run.call_count == 2
        assert mock_executor.run.call_args[0][0][:2] == ["rev-parse", "--verify"]

    def test_dry_run_existing_branch_ignores_base(self, temp_dir, mock_executor):
        mock_executor.run.return_value = GitResult(ok=True, stdout="true\n")
        target = temp_dir / "wt" / "api"

        result = WorktreeProvisioner(mock_executor).add_worktree(
            _plan(temp_dir / "repo", target, base_branch="develop", dry_run=True)
        )

        assert result.stdout == f"DRY RUN: git worktree add {target} feature/x"
        assert not (temp_dir / "wt").exists()

    def test_dry_run_against_real_repo(self, git_repo, temp_dir):
        target = temp_dir / "wt" / "api"

        result = WorktreeProvisioner().add_worktree(_plan(git_repo.working_dir, target, dry_run=True))

        assert result.ok is True
        assert "-b feature/x" in result.stdout
        assert not target.exists()
        assert "feature/x" not in [head.name for head in git_repo.heads]


class TestAddWorktree:
    """Creating worktrees in a real repository."""

    def test_creates_new_branch_from_base(self, git_repo, temp_dir):
        target = temp_dir / "wt" / "clerk" / "api"

        result = WorktreeProvisioner().add_worktree(_plan(git_repo.working_dir, target))

        assert result.ok is True, result.stderr
        assert (target / "README.md").exists()
        assert "feature/x" in [head.name for head in git_repo.heads]
        assert git.Repo(target).active_branch.name == "feature/x"

    def test_attaches_existing_branch(self, git_repo_with_branches, temp_dir):
        target = temp_dir / "wt" / "api"

        result = WorktreeProvisioner().add_worktree(
            _plan(git_repo_with_branches.working_dir, target, branch="feature/existing", base_branch="nope")
        )

        assert result.ok is True, result.stderr
        assert git.Repo(target).active_branch.name == "feature/existing"

    def test_parent_directory_may_already_exist(self, git_repo, temp_dir):
        (temp_dir / "wt").mkdir()

        result = WorktreeProvisioner().add_worktree(_plan(git_repo.working_dir, temp_dir / "wt" / "api"))

        assert result.ok is True, result.stderr

    def test_git_failure_is_returned(self, git_repo, temp_dir):
        result = WorktreeProvisioner().add_worktree(
            _plan(git_repo.working_dir, temp_dir / "wt" / "api", base_branch="does-not-exist")
        )

        assert result.ok is False
        assert result.code != 0
        assert result.stderr

    def test_relative_target_is_resolved(self, git_repo, temp_dir, monkeypatch):
        monkeypatch.chdir(temp_dir)

        result = WorktreeProvisioner().add_worktree(_plan(git_repo.working_dir, os.path.join("wt", "api")))

        assert result.ok is True, result.stderr
        assert (temp_dir / "wt" / "api" / "README.md").exists()


class TestProvisionWorkspace:
    """Batch provisioning over a workspace's repos."""

    def test_processes_repos_in_order_and_continues_after_failures(self, git_repo, temp_dir):
        existing = temp_dir / "wt" / "clerk" / "taken"
        existing.mkdir(parents=True)
        workspace = WorkspaceConfig(
            name="clerk",
            target_root=str(temp_dir / "wt"),
            repos=[
                RepoConfig(name="missing", source=str(temp_dir / "not-a-repo")),
                RepoConfig(name="taken", source=git_repo.working_dir),
                RepoConfig(name="api", source=git_repo.working_dir, default_branch="feature/api"),
            ],
        )

        outcomes = WorktreeProvisioner().provision_workspace(workspace, PlanOverrides(base="main"))

        assert [o.repo_name for o in outcomes] == ["missing", "taken", "api"]
        assert [o.status for o in outcomes] == [
            OutcomeStatus.SKIPPED,
            OutcomeStatus.FAILED,
            OutcomeStatus.CREATED,
        ]
        assert "not a git repo" in outcomes[0].message
        assert "already exists" in outcomes[1].message
        assert (temp_dir / "wt" / "clerk" / "api" / "README.md").exists()

    def test_dry_run_outcomes(self, git_repo, temp_dir):
        workspace = WorkspaceConfig(
            name="clerk",
            repos=[RepoConfig(name="api", source=git_repo.working_dir)],
        )

        outcomes = WorktreeProvisioner().provision_workspace(
            workspace, PlanOverrides(target=str(temp_dir / "wt"), dry_run=True)
        )

        assert [o.status for o in outcomes] == [OutcomeStatus.DRY_RUN]
        assert outcomes[0].ok is True
        assert outcomes[0].message.startswith("DRY RUN: git worktree add")
        assert not (temp_dir / "wt").exists()

    def test_empty_workspace(self, mock_executor):
        outcomes = WorktreeProvisioner(mock_executor).provision_workspace(WorkspaceConfig(name="empty"))

        assert outcomes == []
        mock_executor.run.assert_not_called()
