"""Persistence of the workspace registry."""
import copy
import json
from pathlib import Path
from typing import Callable, Optional, Union

from git_workspaces.config import resolve_config_dir
from git_workspaces.constants import CONFIG_FILE_NAME
from git_workspaces.exceptions import ConfigError, DuplicateRepoError, DuplicateWorkspaceError
from git_workspaces.models.workspace import CliConfig
from git_workspaces.logging_config import get_logger

logger = get_logger(__name__)


class ConfigStore:
    """Loads and saves the workspace registry as JSON.

    There is no locking; two invocations writing at once can lose an update.
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """Initialize the store.

        Args:
            config_dir: Directory holding config.json (resolved from the environment by default)
        """
        self.config_dir = Path(config_dir) if config_dir else resolve_config_dir()
        self.config_file = self.config_dir / CONFIG_FILE_NAME

    def load(self) -> CliConfig:
        """Load the registry, or return an empty one if no file exists yet.

        Raises:
            ConfigError: If the file cannot be read or does not describe a valid registry
        """
        if not self.config_file.exists():
            logger.debug(f"No config file at {self.config_file}, using defaults")
            return CliConfig()

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"invalid JSON ({e})", path=str(self.config_file)) from e
        except OSError as e:
            raise ConfigError(f"cannot read file ({e})", path=str(self.config_file)) from e

        try:
            config = CliConfig.from_dict(raw)
        except ConfigError as e:
            raise ConfigError(e.message, path=str(self.config_file)) from e
        except (DuplicateWorkspaceError, DuplicateRepoError) as e:
            raise ConfigError(str(e), path=str(self.config_file)) from e

        logger.debug(f"Loaded config with {len(config.workspaces)} workspaces")
        return config

    def save(self, config: CliConfig) -> None:
        """Write the registry to disk through a temp file and an atomic rename."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

        temp_file = self.config_file.with_suffix('.tmp')
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(config.to_dict(), f, indent=2)
                f.write("\n")
                f.flush()
            temp_file.replace(self.config_file)
            logger.debug(f"Saved config to {self.config_file}")
        finally:
            if temp_file.exists():
                temp_file.unlink()

    def update(self, mutator: Callable[[CliConfig], CliConfig]) -> CliConfig:
        """Load, mutate, validate and save the registry.

        Nothing is written if the mutator raises or the result is invalid.

        Args:
            mutator: Function returning the new registry

        Returns:
            The saved registry
        """
        current = self.load()
        updated = mutator(copy.deepcopy(current))
        updated.validate()
        self.save(updated)
        return updated
