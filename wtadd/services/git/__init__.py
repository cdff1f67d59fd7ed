"""Git-related services for wtadd."""

from .operations import GitOperations
from .worktrees import WorktreeService

__all__ = [
    "GitOperations",
    "WorktreeService",
]
