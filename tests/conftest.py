"""Pytest fixtures for git-workspaces tests"""
import tempfile
from pathlib import Path
from unittest.mock import Mock

import git
import pytest

from git_workspaces.models.workspace import CliConfig, RepoConfig, WorkspaceConfig
from git_workspaces.models.worktree import GitResult
from git_workspaces.services.config_store import ConfigStore
from git_workspaces.services.git.executor import GitExecutor


def init_repo(repo_path: Path) -> git.Repo:
    """Initialize a repository with one commit on ``main``."""
    repo_path.mkdir(parents=True)
    repo = git.Repo.init(repo_path)

    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    readme = repo_path / "README.md"
    readme.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')
    return repo


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo = init_repo(temp_dir / "sources" / "api")
    yield repo
    repo.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Create a Git repository with an extra feature branch."""
    git_repo.git.branch('feature/existing')
    yield git_repo


@pytest.fixture
def config_store(temp_dir):
    """ConfigStore writing into a temporary directory."""
    return ConfigStore(temp_dir / "config")


@pytest.fixture
def sample_config():
    """A registry with two workspaces."""
    return CliConfig(
        version=1,
        workspaces=[
            WorkspaceConfig(
                name="clerk",
                target_root="/worktrees",
                default_branch="develop",
                repos=[
                    RepoConfig(name="dashboard", source="/src/dashboard", default_branch="main"),
                    RepoConfig(name="api", source="/src/api", target_subdir="backend"),
                ],
            ),
            WorkspaceConfig(name="scratch", repos=[]),
        ],
    )


@pytest.fixture
def mock_executor():
    """A GitExecutor double that reports success for every command."""
    executor = Mock(spec=GitExecutor)
    executor.run = Mock(return_value=GitResult(ok=True, stdout="", stderr="", code=0))
    return executor
