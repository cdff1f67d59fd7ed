"""Entry point for the wtadd command."""

import os
import sys
from typing import List, Optional

from rich.console import Console

from wtadd.cli.args import parse_args
from wtadd.config import Config
from wtadd.core import WorktreeCreator
from wtadd.exceptions import UsageError, WtaddError
from wtadd.services.display_service import DisplayService
from wtadd.utils.logging import setup_logging

console = Console(stderr=True)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    display = DisplayService()

    if parsed_args.branch == "help":
        display.usage()
        return 0
    if not parsed_args.branch:
        display.usage(to_stderr=True)
        return 2

    try:
        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        config = Config(
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
            remote_name=parsed_args.remote,
            copy_node_modules=not parsed_args.no_node_modules,
            pull=not parsed_args.no_pull,
            allow_direnv=not parsed_args.no_direnv,
        )

        if parsed_args.debug:
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        creator = WorktreeCreator(os.getcwd(), config, display=display)
        creator.create(parsed_args.branch)
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except UsageError:
        display.usage(to_stderr=True)
        return 2
    except (WtaddError, ValueError) as e:
        display.error(f"Error: {e}")
        if parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
