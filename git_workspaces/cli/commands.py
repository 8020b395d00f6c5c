"""Command handlers for the git-workspaces CLI.

Each handler takes the invocation context and the parsed arguments and
returns a process exit code.
"""

import argparse
import dataclasses
import os
from dataclasses import dataclass, field
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from git_workspaces.config import Config
from git_workspaces.exceptions import GitWorkspacesError
from git_workspaces.models.workspace import CliConfig, RepoConfig, WorkspaceConfig
from git_workspaces.models.worktree import PlanOverrides
from git_workspaces.services.config_store import ConfigStore
from git_workspaces.services.display_service import DisplayService
from git_workspaces.services.provisioner import WorktreeProvisioner
from git_workspaces.services.workspace_service import (
    add_repo_to_workspace,
    find_repo,
    find_workspace,
    remove_repo_from_workspace,
    remove_workspace,
    resolve_workspace_from_cwd,
    upsert_workspace,
)
from git_workspaces.utils.paths import is_path_within, normalize_path
from git_workspaces.logging_config import get_logger

console = Console()
logger = get_logger(__name__)


@dataclass
class CommandContext:
    """Everything a command needs for one invocation."""

    config: Config
    store: ConfigStore
    cwd: str = field(default_factory=os.getcwd)
    display: DisplayService = field(default_factory=DisplayService)
    provisioner: WorktreeProvisioner = field(default_factory=WorktreeProvisioner)

    @classmethod
    def from_config(cls, config: Config) -> "CommandContext":
        return cls(
            config=config,
            store=ConfigStore(config.config_dir),
            display=DisplayService(verbose=config.verbose),
        )


def _ask(
    ctx: CommandContext,
    message: str,
    default: Optional[str] = None,
    required: bool = False,
) -> Optional[str]:
    """Prompt for a value, or fall back to the default when prompting is disabled.

    Raises:
        GitWorkspacesError: If a required value is missing in non-interactive mode
    """
    if not ctx.config.interactive:
        if required and not default:
            raise GitWorkspacesError(f"{message} is required (pass it as an option)")
        return default

    while True:
        answer = Prompt.ask(message, default=default, console=console)
        answer = answer.strip() if answer else answer
        if answer or not required:
            return answer or None
        console.print("[red]A value is required.[/red]")


def _expand(path: str, ctx: CommandContext) -> str:
    return normalize_path(os.path.expanduser(path), base=ctx.cwd)


def _pick_workspace(ctx: CommandContext, config: CliConfig, name: Optional[str]) -> Optional[WorkspaceConfig]:
    """Find a named workspace, or let the user choose one."""
    if name:
        workspace = find_workspace(config, name)
        if workspace is None:
            console.print(f"[red]Workspace \"{escape(name)}\" not found.[/red]")
        return workspace

    if not config.workspaces:
        console.print("[red]No workspaces configured.[/red]")
        return None
    if len(config.workspaces) == 1:
        return config.workspaces[0]
    if not ctx.config.interactive:
        raise GitWorkspacesError("Several workspaces are configured; pass one with --workspace")

    for ws in config.workspaces:
        console.print(f"  {escape(ws.name)} ({len(ws.repos)} repos)")
    choice = Prompt.ask(
        "Choose a workspace",
        choices=[ws.name for ws in config.workspaces],
        console=console,
    )
    return find_workspace(config, choice)


def _resolve_workspace(ctx: CommandContext, config: CliConfig, name: Optional[str]) -> Optional[WorkspaceConfig]:
    """Find a workspace by name, or by the directory the command runs in."""
    if name:
        workspace = find_workspace(config, name)
        if workspace is None:
            console.print(f"[red]Workspace \"{escape(name)}\" not found.[/red]")
        return workspace

    workspace = resolve_workspace_from_cwd(config, ctx.cwd)
    if workspace is None:
        console.print("[red]No workspace resolved from cwd. Please pass a name.[/red]")
    return workspace


# workspace commands

def workspace_list(ctx: CommandContext, args: argparse.Namespace) -> int:
    ctx.display.display_workspaces(ctx.store.load())
    return 0


def workspace_create(ctx: CommandContext, args: argparse.Namespace) -> int:
    """Create a workspace, or update the target root and default branch of an existing one."""
    name = args.name or _ask(ctx, "Workspace name", required=True)
    config = ctx.store.load()
    current = find_workspace(config, name) or WorkspaceConfig(name=name)

    target_root = args.target or _ask(ctx, "Target root for worktrees", default=current.target_root)
    default_branch = args.default_branch or _ask(
        ctx, "Default branch (enter to skip)", default=current.default_branch
    )

    updated = dataclasses.replace(
        current,
        target_root=_expand(target_root, ctx) if target_root else current.target_root,
        default_branch=default_branch or current.default_branch,
    )
    ctx.store.update(lambda cfg: upsert_workspace(cfg, updated))
    console.print(f"[green]Workspace \"{escape(updated.name)}\" saved.[/green]")
    return 0


def workspace_remove(ctx: CommandContext, args: argparse.Namespace) -> int:
    config = ctx.store.load()
    if find_workspace(config, args.name) is None:
        console.print(f"[red]Workspace \"{escape(args.name)}\" does not exist.[/red]")
        return 1

    if not args.yes:
        if not ctx.config.interactive:
            raise GitWorkspacesError("Refusing to remove a workspace without confirmation; pass --yes")
        if not Confirm.ask(f"Delete workspace \"{escape(args.name)}\"?", default=False, console=console):
            console.print("Cancelled")
            return 0

    ctx.store.update(lambda cfg: remove_workspace(cfg, args.name))
    console.print(f"[green]Workspace \"{escape(args.name)}\" removed.[/green]")
    return 0


def workspace_pick(ctx: CommandContext, args: argparse.Namespace) -> int:
    config = ctx.store.load()
    workspace = _pick_workspace(ctx, config, None)
    if workspace is None:
        return 1
    console.print(escape(workspace.name), highlight=False)
    return 0


# repo commands

def repo_list(ctx: CommandContext, args: argparse.Namespace) -> int:
    workspace = _pick_workspace(ctx, ctx.store.load(), args.workspace)
    if workspace is None:
        return 1
    ctx.display.display_repos(workspace)
    return 0


def repo_add(ctx: CommandContext, args: argparse.Namespace) -> int:
    """Register a repo clone in a workspace."""
    workspace = _pick_workspace(ctx, ctx.store.load(), args.workspace)
    if workspace is None:
        return 1

    name = args.name or _ask(ctx, "Repo name", required=True)
    source = args.source or _ask(ctx, "Path to the repo clone (used for git worktree add)", required=True)
    target_subdir = args.target_subdir or _ask(ctx, "Target folder name (enter to default to repo name)")
    default_branch = args.default_branch or _ask(ctx, "Default branch (enter to skip)")

    repo = RepoConfig(
        name=name,
        source=_expand(source, ctx),
        url=args.url,
        default_branch=default_branch or None,
        target_subdir=target_subdir or None,
    )
    if not ctx.provisioner.worktree_service.is_git_repo(repo.source):
        console.print(f"[yellow]Warning: {escape(repo.source)} is not a git repository yet.[/yellow]")

    ctx.store.update(lambda cfg: add_repo_to_workspace(cfg, workspace.name, repo))
    console.print(f"[green]Added repo \"{escape(repo.name)}\" to workspace \"{escape(workspace.name)}\".[/green]")
    return 0


def repo_remove(ctx: CommandContext, args: argparse.Namespace) -> int:
    workspace = _pick_workspace(ctx, ctx.store.load(), args.workspace)
    if workspace is None:
        return 1

    if find_repo(workspace, args.name) is None:
        console.print(f"[red]Repo \"{escape(args.name)}\" not found in workspace \"{escape(workspace.name)}\".[/red]")
        return 1

    ctx.store.update(lambda cfg: remove_repo_from_workspace(cfg, workspace.name, args.name))
    console.print(f"[green]Removed repo \"{escape(args.name)}\" from workspace \"{escape(workspace.name)}\".[/green]")
    return 0


# worktree commands

def init_workspace(ctx: CommandContext, args: argparse.Namespace) -> int:
    """Create worktrees for every repo of a workspace.

    Returns 1 when any repo was skipped or failed.
    """
    config = ctx.store.load()
    workspace = _resolve_workspace(ctx, config, args.workspace)
    if workspace is None:
        return 1

    target_root = args.target or workspace.target_root or _ask(
        ctx,
        "Target root directory (where worktrees will be created)",
        default=ctx.cwd if ctx.config.interactive else None,
        required=True,
    )
    overrides = PlanOverrides(
        branch=args.branch,
        base=args.base,
        target=_expand(target_root, ctx),
        dry_run=args.dry_run,
    )

    logger.info(f"Initializing workspace {workspace.name} under {overrides.target}")
    outcomes = ctx.provisioner.provision_workspace(workspace, overrides)
    ctx.display.display_provision_results(workspace, outcomes)
    return 0 if all(outcome.ok for outcome in outcomes) else 1


def workspace_status(ctx: CommandContext, args: argparse.Namespace) -> int:
    """Show the worktrees of each repo in a workspace."""
    config = ctx.store.load()
    workspace = _resolve_workspace(ctx, config, args.workspace)
    if workspace is None:
        return 1

    target_root = _expand(workspace.target_root, ctx) if workspace.target_root else None
    filtered = bool(target_root) and not args.all

    for repo in workspace.repos:
        entries = ctx.provisioner.worktree_service.list_worktrees(repo.source)
        if filtered:
            entries = [e for e in entries if is_path_within(normalize_path(e.path), target_root)]
        ctx.display.display_worktree_status(repo, entries, filtered)
    return 0
