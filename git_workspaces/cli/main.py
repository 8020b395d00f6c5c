"""Entry point for the git-workspaces CLI"""

import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from git_workspaces.cli.args import parse_args
from git_workspaces.cli.commands import CommandContext
from git_workspaces.config import Config
from git_workspaces.logging_config import setup_logging

console = Console()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the application."""
    debug = False
    try:
        parsed_args = parse_args(argv)
        debug = parsed_args.debug

        config = Config(
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
            interactive=not parsed_args.no_interactive and sys.stdin.isatty(),
        )
        setup_logging(verbose=config.verbose, debug=config.debug, log_dir=config.config_dir)

        if config.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        ctx = CommandContext.from_config(config)
        return parsed_args.handler(ctx, parsed_args)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False)
        if debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
