"""Runtime configuration for git-workspaces"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Mapping

from git_workspaces.constants import CONFIG_DIR_ENV, CONFIG_DIR_NAME, CONFIG_FILE_NAME


def resolve_config_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Return the directory holding the workspace registry.

    ``$GIT_WORKSPACES_CONFIG_DIR`` wins over ``~/.git-workspaces``.
    """
    environ = os.environ if environ is None else environ
    override = environ.get(CONFIG_DIR_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / CONFIG_DIR_NAME


@dataclass
class Config:
    """Runtime options for one invocation of the CLI."""

    verbose: bool = False
    debug: bool = False
    interactive: bool = True
    config_dir: Optional[Path] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_config_dir()

    def _validate_config_dir(self):
        """Resolve config_dir and make sure it is not a regular file."""
        if self.config_dir is None or str(self.config_dir).strip() == "":
            self.config_dir = resolve_config_dir()
        self.config_dir = Path(self.config_dir)
        if self.config_dir.is_file():
            raise ValueError(f"config_dir must be a directory, got file '{self.config_dir}'")

    @property
    def config_path(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME

    def to_dict(self) -> dict:
        return {
            "verbose": self.verbose,
            "debug": self.debug,
            "interactive": self.interactive,
            "config_dir": str(self.config_dir),
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {"verbose", "debug", "interactive", "config_dir"}
        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
