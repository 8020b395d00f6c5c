"""Workspace and repo configuration models.

The persisted document uses camelCase keys (``targetRoot``, ``defaultBranch``,
``targetSubdir``); attributes here are snake_case. ``from_dict`` validates a
loaded document field by field and raises ``ConfigError`` on the first problem.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from git_workspaces.constants import CONFIG_SCHEMA_VERSION
from git_workspaces.exceptions import ConfigError, DuplicateRepoError, DuplicateWorkspaceError
from git_workspaces.utils.paths import is_plain_segment


def _require_str(data: Dict[str, Any], key: str, where: str) -> str:
    if key not in data:
        raise ConfigError(f"{where}: missing required field '{key}'")
    value = data[key]
    if not isinstance(value, str):
        raise ConfigError(f"{where}: field '{key}' must be a string, got {type(value).__name__}")
    return value


def _optional_str(data: Dict[str, Any], key: str, where: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{where}: field '{key}' must be a string, got {type(value).__name__}")
    return value


def _require_mapping(data: Any, where: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ConfigError(f"{where}: expected an object, got {type(data).__name__}")
    return data


def _drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


def _require_segment(value: Optional[str], key: str, where: str) -> None:
    """Worktree paths nest these values under the target root."""
    if value is not None and not is_plain_segment(value):
        raise ConfigError(f"{where}: field '{key}' must be a relative path inside the target root, got '{value}'")


@dataclass
class RepoConfig:
    """A repository registered in a workspace."""

    name: str
    source: str  # path to the base clone used for worktrees
    url: Optional[str] = None
    default_branch: Optional[str] = None
    target_subdir: Optional[str] = None

    @property
    def effective_subdir(self) -> str:
        return self.target_subdir or self.name

    @classmethod
    def from_dict(cls, data: Any, where: str = "repo") -> "RepoConfig":
        data = _require_mapping(data, where)
        return cls(
            name=_require_str(data, "name", where),
            source=_require_str(data, "source", where),
            url=_optional_str(data, "url", where),
            default_branch=_optional_str(data, "defaultBranch", where),
            target_subdir=_optional_str(data, "targetSubdir", where),
        )

    def validate(self, where: str = "repo") -> None:
        """Raise ConfigError if the name or target subdir would leave the workspace folder."""
        _require_segment(self.target_subdir or self.name, "targetSubdir" if self.target_subdir else "name", where)

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            "name": self.name,
            "source": self.source,
            "url": self.url,
            "defaultBranch": self.default_branch,
            "targetSubdir": self.target_subdir,
        })


@dataclass
class WorkspaceConfig:
    """A named group of repositories sharing a target root."""

    name: str
    target_root: Optional[str] = None
    default_branch: Optional[str] = None
    marker: Optional[str] = None
    repos: List[RepoConfig] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, where: str = "workspace") -> "WorkspaceConfig":
        data = _require_mapping(data, where)
        name = _require_str(data, "name", where)
        where = f"workspace '{name}'"

        raw_repos = data.get("repos", [])
        if not isinstance(raw_repos, list):
            raise ConfigError(f"{where}: field 'repos' must be a list")
        repos = [
            RepoConfig.from_dict(item, where=f"{where} repo #{index}")
            for index, item in enumerate(raw_repos)
        ]

        workspace = cls(
            name=name,
            target_root=_optional_str(data, "targetRoot", where),
            default_branch=_optional_str(data, "defaultBranch", where),
            marker=_optional_str(data, "marker", where),
            repos=repos,
        )
        workspace.validate()
        return workspace

    def validate(self) -> None:
        """Check the workspace name, each repo, and repo name uniqueness (case-insensitive).

        Raises:
            ConfigError: If a name or target subdir would leave the target root
            DuplicateRepoError: If two repos share a name
        """
        where = f"workspace '{self.name}'"
        _require_segment(self.name, "name", where)
        seen = set()
        for repo in self.repos:
            repo.validate(where=f"{where} repo '{repo.name}'")
            key = repo.name.lower()
            if key in seen:
                raise DuplicateRepoError(repo.name, self.name)
            seen.add(key)

    def to_dict(self) -> Dict[str, Any]:
        data = _drop_none({
            "name": self.name,
            "targetRoot": self.target_root,
            "defaultBranch": self.default_branch,
            "marker": self.marker,
        })
        data["repos"] = [repo.to_dict() for repo in self.repos]
        return data


@dataclass
class CliConfig:
    """Root of the persisted workspace registry."""

    version: int = CONFIG_SCHEMA_VERSION
    workspaces: List[WorkspaceConfig] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "CliConfig":
        data = _require_mapping(data, "config")

        version = data.get("version", CONFIG_SCHEMA_VERSION)
        # bool is an int subclass; reject it explicitly
        if not isinstance(version, int) or isinstance(version, bool):
            raise ConfigError(f"config: field 'version' must be a number, got {type(version).__name__}")

        raw_workspaces = data.get("workspaces", [])
        if not isinstance(raw_workspaces, list):
            raise ConfigError("config: field 'workspaces' must be a list")

        config = cls(
            version=version,
            workspaces=[
                WorkspaceConfig.from_dict(item, where=f"workspace #{index}")
                for index, item in enumerate(raw_workspaces)
            ],
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Check name uniqueness across workspaces and within each workspace."""
        seen = set()
        for workspace in self.workspaces:
            key = workspace.name.lower()
            if key in seen:
                raise DuplicateWorkspaceError(workspace.name)
            seen.add(key)
            workspace.validate()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "workspaces": [workspace.to_dict() for workspace in self.workspaces],
        }
