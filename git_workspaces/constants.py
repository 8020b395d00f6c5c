"""Shared constants for git-workspaces."""

from dataclasses import dataclass
from typing import List


# Configuration document
CONFIG_SCHEMA_VERSION = 1
CONFIG_DIR_NAME = ".git-workspaces"
CONFIG_FILE_NAME = "config.json"
CONFIG_DIR_ENV = "GIT_WORKSPACES_CONFIG_DIR"
LOG_FILE_NAME = "git-workspaces.log"

# Fallback when neither the command line, the repo nor the workspace names a branch
DEFAULT_BRANCH = "main"

BRANCH_REF_PREFIX = "refs/heads/"


@dataclass
class ColumnDefinition:
    """Definition of a table column."""

    key: str
    label: str
    width: int = 0  # 0 means auto-width


WORKSPACE_COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("name", "Workspace", 20),
    ColumnDefinition("target_root", "Target Root", 40),
    ColumnDefinition("default_branch", "Default Branch", 15),
    ColumnDefinition("repos", "Repos", 6),
]

REPO_COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("name", "Repo", 20),
    ColumnDefinition("source", "Source", 40),
    ColumnDefinition("target_subdir", "Target Subdir", 15),
    ColumnDefinition("default_branch", "Default Branch", 15),
]

PROVISION_COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("repo", "Repo", 20),
    ColumnDefinition("result", "Result", 10),
    ColumnDefinition("branch", "Branch", 20),
    ColumnDefinition("target", "Target", 40),
    ColumnDefinition("details", "Details", 40),
]


UNSET_DISPLAY = "unset"
DETACHED_DISPLAY = "detached"
SYMBOL_BARE = "[bare]"


class OutcomeStatus:
    """Outcome of provisioning a single repo."""

    CREATED = "created"
    DRY_RUN = "dry-run"
    SKIPPED = "skipped"
    FAILED = "failed"


# CLI colors (Rich color names)
OUTCOME_COLORS = {
    OutcomeStatus.CREATED: "green",
    OutcomeStatus.DRY_RUN: "cyan",
    OutcomeStatus.SKIPPED: "yellow",
    OutcomeStatus.FAILED: "red",
}
