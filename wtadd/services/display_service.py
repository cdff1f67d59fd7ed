"""Display service for console messages"""
from rich.console import Console
from rich.markup import escape

from wtadd.constants import MessageStyle, USAGE_TEXT
from wtadd.utils.logging import get_logger

console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)


class DisplayService:
    """Prints colored status messages for a worktree run."""

    def error(self, message: str) -> None:
        """Print a fatal error."""
        err_console.print(f"[{MessageStyle.ERROR}]{escape(message)}[/{MessageStyle.ERROR}]")

    def warning(self, message: str) -> None:
        """Print a non-fatal warning and keep going."""
        logger.warning(message)
        err_console.print(f"[{MessageStyle.WARNING}]{escape(message)}[/{MessageStyle.WARNING}]")

    def success(self, message: str) -> None:
        console.print(f"[{MessageStyle.SUCCESS}]{escape(message)}[/{MessageStyle.SUCCESS}]")

    def usage(self, to_stderr: bool = False) -> None:
        """Print the usage text."""
        target = err_console if to_stderr else console
        target.print(USAGE_TEXT, markup=False, highlight=False)
