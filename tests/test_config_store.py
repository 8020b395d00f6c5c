"""Tests for configuration loading, validation and persistence"""
import json

import pytest

from git_workspaces.config import Config, resolve_config_dir
from git_workspaces.exceptions import ConfigError, DuplicateRepoError, DuplicateWorkspaceError, WorkspaceNotFoundError
from git_workspaces.models.workspace import CliConfig, RepoConfig, WorkspaceConfig
from git_workspaces.services.config_store import ConfigStore
from git_workspaces.services.workspace_service import add_repo_to_workspace, remove_workspace


class TestLoadSave:
    """Test config load/save."""

    def test_returns_defaults_when_config_file_is_missing(self, config_store):
        config = config_store.load()

        assert config == CliConfig(version=1, workspaces=[])
        assert not config_store.config_file.exists()

    def test_persists_config_to_disk(self, config_store):
        to_save = CliConfig(
            version=1,
            workspaces=[
                WorkspaceConfig(
                    name="clerk",
                    target_root="/tmp/worktrees",
                    default_branch="main",
                    repos=[RepoConfig(name="dashboard", source="/tmp/dashboard", default_branch="main")],
                )
            ],
        )

        config_store.save(to_save)

        assert config_store.load() == to_save

    def test_saved_document_uses_camel_case_and_omits_unset(self, config_store, sample_config):
        config_store.save(sample_config)

        data = json.loads(config_store.config_file.read_text())
        clerk = data["workspaces"][0]
        assert data["version"] == 1
        assert clerk["targetRoot"] == "/worktrees"
        assert clerk["defaultBranch"] == "develop"
        assert clerk["repos"][1] == {"name": "api", "source": "/src/api", "targetSubdir": "backend"}
        assert data["workspaces"][1] == {"name": "scratch", "repos": []}
        assert not config_store.config_file.with_suffix(".tmp").exists()

    def test_loads_document_with_defaults_and_marker(self, config_store):
        config_store.config_dir.mkdir(parents=True)
        config_store.config_file.write_text(json.dumps({
            "workspaces": [{"name": "clerk", "marker": ".clerk"}],
        }))

        config = config_store.load()

        assert config.version == 1
        assert config.workspaces[0].marker == ".clerk"
        assert config.workspaces[0].repos == []


class TestLoadValidation:
    """Invalid documents are rejected with a descriptive error."""

    @pytest.mark.parametrize("document, fragment", [
        ("{not json", "invalid JSON"),
        ("[]", "expected an object"),
        ('{"version": "1"}', "'version' must be a number"),
        ('{"workspaces": {}}', "'workspaces' must be a list"),
        ('{"workspaces": [{"targetRoot": "/x"}]}', "missing required field 'name'"),
        ('{"workspaces": [{"name": "a", "repos": [{"name": "r"}]}]}', "missing required field 'source'"),
        ('{"workspaces": [{"name": "a", "defaultBranch": 3}]}', "'defaultBranch' must be a string"),
        ('{"workspaces": [{"name": "a"}, {"name": "A"}]}', "already exists"),
        ('{"workspaces": [{"name": "../up"}]}', "'name' must be a relative path"),
        (
            '{"workspaces": [{"name": "a", "repos": [{"name": "r", "source": "/s", "targetSubdir": "/srv/api"}]}]}',
            "'targetSubdir' must be a relative path",
        ),
    ])
    def test_invalid_documents(self, config_store, document, fragment):
        config_store.config_dir.mkdir(parents=True)
        config_store.config_file.write_text(document)

        with pytest.raises(ConfigError, match=fragment) as excinfo:
            config_store.load()

        assert str(config_store.config_file) in str(excinfo.value)

    def test_duplicate_workspace_names(self):
        with pytest.raises(DuplicateWorkspaceError):
            CliConfig.from_dict({"workspaces": [{"name": "Clerk"}, {"name": "clerk"}]})

    def test_duplicate_repo_names(self):
        with pytest.raises(DuplicateRepoError):
            CliConfig.from_dict({"workspaces": [{"name": "clerk", "repos": [
                {"name": "api", "source": "/a"},
                {"name": "API", "source": "/b"},
            ]}]})


class TestUpdate:
    """Test load-mutate-save."""

    def test_update_saves_mutation(self, config_store, sample_config):
        config_store.save(sample_config)

        config_store.update(lambda cfg: add_repo_to_workspace(cfg, "clerk", RepoConfig(name="web", source="/src/web")))

        names = [repo.name for repo in config_store.load().workspaces[0].repos]
        assert names == ["dashboard", "api", "web"]

    def test_failed_mutation_leaves_file_untouched(self, config_store, sample_config):
        config_store.save(sample_config)
        before = config_store.config_file.read_text()

        with pytest.raises(WorkspaceNotFoundError):
            config_store.update(lambda cfg: remove_workspace(cfg, "missing"))
        with pytest.raises(DuplicateRepoError):
            config_store.update(
                lambda cfg: add_repo_to_workspace(cfg, "clerk", RepoConfig(name="Api", source="/x"))
            )

        assert config_store.config_file.read_text() == before

    def test_invalid_result_is_not_saved(self, config_store, sample_config):
        config_store.save(sample_config)
        before = config_store.config_file.read_text()

        def add_duplicate(cfg):
            cfg.workspaces.append(WorkspaceConfig(name="CLERK"))
            return cfg

        with pytest.raises(DuplicateWorkspaceError):
            config_store.update(add_duplicate)

        assert config_store.config_file.read_text() == before


class TestRuntimeConfig:
    """Test runtime configuration resolution."""

    def test_env_override(self, temp_dir):
        assert resolve_config_dir({"GIT_WORKSPACES_CONFIG_DIR": str(temp_dir)}) == temp_dir

    def test_default_is_home(self, monkeypatch, temp_dir):
        monkeypatch.setenv("HOME", str(temp_dir))
        assert resolve_config_dir({}) == temp_dir / ".git-workspaces"

    def test_config_uses_environment(self, monkeypatch, temp_dir):
        monkeypatch.setenv("GIT_WORKSPACES_CONFIG_DIR", str(temp_dir / "cfg"))

        config = Config()

        assert config.config_dir == temp_dir / "cfg"
        assert config.config_path == temp_dir / "cfg" / "config.json"
        assert ConfigStore(config.config_dir).config_file == config.config_path

    def test_config_dir_must_not_be_a_file(self, temp_dir):
        path = temp_dir / "file"
        path.write_text("")
        with pytest.raises(ValueError):
            Config(config_dir=path)

    def test_from_dict_ignores_unknown_keys(self, temp_dir):
        config = Config.from_dict({"verbose": True, "config_dir": temp_dir, "bogus": 1})
        assert config.verbose is True
        assert config.get("bogus", "default") == "default"
