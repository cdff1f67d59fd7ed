"""Command-line argument parsing for wtadd."""

import argparse
from typing import List, Optional

from wtadd.__version__ import __version__
from wtadd.constants import DEFAULT_REMOTE


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="wtadd",
        description="Create a git worktree for a branch and copy over untracked setup files "
        "(.env, .envrc, .tool-versions, .mise.toml, application-local.yml, node_modules)",
        epilog="Run from inside a worktree to create a sibling worktree, or from a bare "
        "repository root to create a child directory.",
    )
    parser.add_argument(
        "branch", nargs="?", default=None, help="Branch to check out or create ('help' shows this)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Echo every command as it runs"
    )
    parser.add_argument("--version", action="version", version=f"wtadd {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument(
        "--remote",
        default=DEFAULT_REMOTE,
        help=f"Remote to look for existing branches on (default: {DEFAULT_REMOTE})",
    )
    parser.add_argument(
        "--no-pull", action="store_true", help="Don't pull in the new worktree"
    )
    parser.add_argument(
        "--no-node-modules", action="store_true", help="Don't copy node_modules"
    )
    parser.add_argument(
        "--no-direnv", action="store_true", help="Don't run direnv allow for a copied .envrc"
    )

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    return create_parser().parse_args(argv)
