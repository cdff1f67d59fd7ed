"""Git operations service"""

from typing import List, Union, TYPE_CHECKING

import git

from wtadd.models.worktree import BranchOrigin
from wtadd.exceptions import GitOperationError
from wtadd.utils.logging import get_logger

if TYPE_CHECKING:
    from wtadd.config import Config

logger = get_logger(__name__)


def describe_git_error(e: git.exc.GitCommandError) -> str:
    """Build a readable message from a GitCommandError."""
    stderr = (e.stderr if hasattr(e, "stderr") and e.stderr else "").strip()
    status = e.status if hasattr(e, "status") else "unknown"
    if stderr:
        return f"exit {status}: {stderr}"
    return f"exit code {status}"


class GitOperations:
    """Service for the git queries needed to place a new worktree."""

    def __init__(self, repo_path: str, config: Union["Config", dict]):
        """Initialize the service.

        Args:
            repo_path: Directory git commands run in (the invocation directory)
            config: Configuration dictionary or Config object
        """
        self.repo_path = repo_path
        self.remote_name = config.get("remote_name", "origin")

    def _get_git(self, path: str = None) -> git.Git:
        """Get a git command wrapper running in the given directory.

        A plain git.Git is used rather than git.Repo so commands run exactly
        where the user invoked us, including bare repository roots and
        subdirectories of a worktree.
        """
        return git.Git(path or self.repo_path)

    def run(self, *args: str, path: str = None) -> str:
        """Run a git command and return its stripped stdout.

        Raises:
            git.exc.GitCommandError: If git exits non-zero
        """
        logger.info("$ git " + " ".join(args))
        return self._get_git(path).execute(["git", *args]).strip()

    def is_inside_work_tree(self) -> bool:
        """Check whether the invocation directory is inside a working tree.

        Returns False for a bare repository root.
        """
        try:
            output = self.run("rev-parse", "--is-inside-work-tree")
        except git.exc.GitCommandError as e:
            raise GitOperationError("rev_parse", message=describe_git_error(e))
        return output == "true"

    def get_current_branch(self) -> str:
        """Get the branch HEAD points at."""
        try:
            return self.run("rev-parse", "--abbrev-ref", "HEAD")
        except git.exc.GitCommandError as e:
            raise GitOperationError("current_branch", message=describe_git_error(e))

    def _list_refs(self, strip: int, prefix: str) -> List[str]:
        """List short ref names under a ref prefix."""
        try:
            output = self.run("for-each-ref", f"--format=%(refname:lstrip={strip})", prefix)
        except git.exc.GitCommandError as e:
            raise GitOperationError("for_each_ref", message=describe_git_error(e))
        return [line.strip() for line in output.splitlines() if line.strip()]

    def get_local_branches(self) -> List[str]:
        """Get names of all local branches."""
        return self._list_refs(2, "refs/heads")

    def get_remote_branches(self) -> List[str]:
        """Get names of all remote-tracking branches of the configured remote."""
        return self._list_refs(3, f"refs/remotes/{self.remote_name}")

    def classify_branch(self, branch_name: str) -> BranchOrigin:
        """Decide whether a branch exists locally, on the remote, or not at all.

        Local branches are checked first, so a branch present in both places is LOCAL.
        """
        if branch_name in self.get_local_branches():
            origin = BranchOrigin.LOCAL
        elif branch_name in self.get_remote_branches():
            origin = BranchOrigin.REMOTE
        else:
            origin = BranchOrigin.NEW
        logger.debug(f"Branch {branch_name} classified as {origin.value}")
        return origin

    def pull(self, worktree_path: str) -> bool:
        """Pull the latest changes into a worktree.

        Returns:
            True on success, False if git pull failed (e.g. no upstream)
        """
        try:
            self.run("-C", worktree_path, "pull")
            return True
        except git.exc.GitCommandError as e:
            logger.debug(f"git pull in {worktree_path} failed: {describe_git_error(e)}")
            return False
