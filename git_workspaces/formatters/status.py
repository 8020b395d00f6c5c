"""Provisioning outcome formatting utilities."""

from git_workspaces.constants import OUTCOME_COLORS
from git_workspaces.models.worktree import ProvisionOutcome


def format_outcome_status(status: str) -> str:
    """Format an outcome status with its Rich colour."""
    color = OUTCOME_COLORS.get(status)
    return f"[{color}]{status}[/{color}]" if color else status


def format_outcome_details(outcome: ProvisionOutcome) -> str:
    """First line of git's output, or 'unknown error' for silent failures."""
    message = outcome.message
    if not message and not outcome.ok:
        return "unknown error"
    return message
