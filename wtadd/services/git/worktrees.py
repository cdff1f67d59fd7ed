"""Worktree operations service for wtadd."""

import git

from wtadd.exceptions import WorktreeCreationError
from wtadd.models.worktree import BranchOrigin, WorktreeLocation
from wtadd.services.git.operations import GitOperations, describe_git_error
from wtadd.utils.logging import get_logger

logger = get_logger(__name__)


class WorktreeService:
    """Service for creating git worktrees."""

    def __init__(self, git_ops: GitOperations):
        """Initialize the worktree service.

        Args:
            git_ops: Git operations bound to the invocation directory
        """
        self.git_ops = git_ops

    def add_worktree(
        self, branch_name: str, location: WorktreeLocation, origin: BranchOrigin
    ) -> None:
        """Create a worktree at location for branch_name.

        Existing branches (local or remote) are checked out; anything else
        becomes a new branch created with -b.

        Raises:
            WorktreeCreationError: If git worktree add fails
        """
        if origin is BranchOrigin.NEW:
            args = ["worktree", "add", "-b", branch_name, location.path]
        else:
            args = ["worktree", "add", location.path, branch_name]

        try:
            self.git_ops.run(*args)
        except git.exc.GitCommandError as e:
            error_msg = describe_git_error(e)
            logger.error(f"Failed to create worktree at {location.path}: {error_msg}")
            raise WorktreeCreationError(branch_name, error_msg)

        logger.info(f"Created worktree at {location.path} for {origin.value} branch {branch_name}")
