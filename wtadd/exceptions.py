"""Custom exceptions for wtadd"""

from typing import Optional


class WtaddError(Exception):
    """Base exception for all wtadd errors."""
    pass


class UsageError(WtaddError):
    """Exception raised when the command line is missing required input."""
    pass


class GitOperationError(WtaddError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, branch: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.branch = branch
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if branch:
            error_msg += f" for branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class WorktreeCreationError(GitOperationError):
    """Exception raised when `git worktree add` fails."""

    def __init__(self, branch: str, message: Optional[str] = None):
        super().__init__("worktree_add", branch, message or "failed to create git worktree")
