"""Command-line argument parsing for git-workspaces."""

import argparse
from typing import Optional, Sequence

from git_workspaces.__version__ import __version__
from git_workspaces.cli import commands


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="git-workspaces",
        description="Manage multi-repo git worktrees via named workspaces",
        epilog="The registry lives in ~/.git-workspaces/config.json "
        "(override the directory with GIT_WORKSPACES_CONFIG_DIR).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"git-workspaces {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument(
        "--no-interactive",
        action="store_true",
        help="Never prompt; fail when a required value is missing (for scripts/automation)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>", required=True)

    # workspace
    workspace = subparsers.add_parser("workspace", help="Manage workspaces")
    workspace_sub = workspace.add_subparsers(dest="workspace_command", metavar="<action>", required=True)

    ws_list = workspace_sub.add_parser("list", help="List configured workspaces")
    ws_list.set_defaults(handler=commands.workspace_list)

    ws_create = workspace_sub.add_parser("create", help="Create or update a workspace")
    ws_create.add_argument("name", nargs="?", help="Workspace name")
    ws_create.add_argument("-t", "--target", help="Default target directory for worktrees")
    ws_create.add_argument("-b", "--default-branch", help="Default branch for the workspace")
    ws_create.set_defaults(handler=commands.workspace_create)

    ws_remove = workspace_sub.add_parser("remove", help="Remove a workspace")
    ws_remove.add_argument("name", help="Workspace name")
    ws_remove.add_argument("-y", "--yes", action="store_true", help="Skip confirmation")
    ws_remove.set_defaults(handler=commands.workspace_remove)

    ws_pick = workspace_sub.add_parser(
        "pick", help="Select a workspace and print its name (useful for scripts)"
    )
    ws_pick.set_defaults(handler=commands.workspace_pick)

    # repo
    repo = subparsers.add_parser("repo", help="Manage repos in a workspace")
    repo_sub = repo.add_subparsers(dest="repo_command", metavar="<action>", required=True)

    repo_list = repo_sub.add_parser("list", help="List repos for a workspace")
    repo_list.add_argument("-w", "--workspace", help="Workspace name")
    repo_list.set_defaults(handler=commands.repo_list)

    repo_add = repo_sub.add_parser("add", help="Add a repo to a workspace")
    repo_add.add_argument("-w", "--workspace", help="Workspace name")
    repo_add.add_argument("-n", "--name", help="Repo name (display + target folder)")
    repo_add.add_argument("-s", "--source", help="Path to the main repo clone (git worktree base)")
    repo_add.add_argument("-u", "--url", help="Remote URL (informational)")
    repo_add.add_argument("-b", "--default-branch", help="Default branch")
    repo_add.add_argument(
        "-t", "--target-subdir", help="Relative folder name under the workspace target"
    )
    repo_add.set_defaults(handler=commands.repo_add)

    repo_remove = repo_sub.add_parser("remove", help="Remove a repo from a workspace")
    repo_remove.add_argument("name", help="Repo name")
    repo_remove.add_argument("-w", "--workspace", help="Workspace name")
    repo_remove.set_defaults(handler=commands.repo_remove)

    # init
    init = subparsers.add_parser("init", help="Create git worktrees for all repos in a workspace")
    init.add_argument("workspace", nargs="?", help="Workspace name (resolved from cwd if omitted)")
    init.add_argument("-t", "--target", help="Override target root directory")
    init.add_argument("-b", "--branch", help="Branch name for the new worktrees")
    init.add_argument("--base", help="Base branch to create from when branch does not exist")
    init.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview mode - show the git commands without executing them",
    )
    init.set_defaults(handler=commands.init_workspace)

    # status
    status = subparsers.add_parser("status", help="Show worktree status for a workspace")
    status.add_argument("workspace", nargs="?", help="Workspace name (resolved from cwd if omitted)")
    status.add_argument(
        "-a", "--all", action="store_true", help="Show all worktrees (not just ones under target root)"
    )
    status.set_defaults(handler=commands.workspace_status)

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)
