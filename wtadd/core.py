"""Core functionality for wtadd"""

from pathlib import Path
from typing import Optional, Union

from wtadd.config import Config
from wtadd.constants import ENVRC_FILE, NODE_MODULES_DIR
from wtadd.exceptions import UsageError
from wtadd.models.worktree import CopyManifest, WorktreeLocation, WorktreeResult
from wtadd.services.copy_service import CopyService
from wtadd.services.direnv_service import DirenvService
from wtadd.services.display_service import DisplayService
from wtadd.services.git import GitOperations, WorktreeService
from wtadd.services.manifest_service import ManifestService
from wtadd.utils.logging import get_logger

logger = get_logger(__name__)


class WorktreeCreator:
    """Creates a worktree for a branch and carries over untracked setup files."""

    def __init__(
        self,
        repo_path: str,
        config: Union[Config, dict, None] = None,
        display: Optional[DisplayService] = None,
    ):
        """Initialize WorktreeCreator.

        Args:
            repo_path: Directory the command was invoked from; a worktree or a
                bare repository root
            config: Configuration dict or Config object
            display: Console output; a fresh DisplayService if omitted
        """
        self.repo_path = repo_path
        if config is None:
            self.config = Config()
        elif isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config

        self.display = display or DisplayService()
        self.git_service = GitOperations(repo_path, self.config)
        self.worktree_service = WorktreeService(self.git_service)
        self.manifest_service = ManifestService(self.config)
        self.copy_service = CopyService(self.display)
        self.direnv_service = DirenvService(self.display)

    def create(self, branch_name: str) -> WorktreeResult:
        """Create a worktree for branch_name.

        Raises:
            UsageError: If branch_name is empty
            GitOperationError: If the repository can't be inspected or the
                worktree can't be created. A partially created worktree
                directory is left as is.
        """
        if not branch_name or not branch_name.strip():
            raise UsageError("a branch name is required")

        inside_work_tree = self.git_service.is_inside_work_tree()
        location = WorktreeLocation.for_branch(branch_name, inside_work_tree)
        origin = self.git_service.classify_branch(branch_name)

        self.worktree_service.add_worktree(branch_name, location, origin)

        result = WorktreeResult(
            branch_name=branch_name,
            location=location,
            origin=origin,
            worktree_path=location.resolve(self.repo_path),
        )

        if self.config.copy_node_modules:
            result.node_modules_copied = self._copy_node_modules(result.worktree_path)

        source_root = self._copy_source_root(inside_work_tree)
        manifest = self.manifest_service.build(source_root)
        self._copy_manifest(manifest, result)

        if self.config.pull:
            result.pulled = self.git_service.pull(location.path)
            if not result.pulled:
                self.display.warning("Unable to run git pull, there may not be an upstream")

        # Only trust .envrc once it is actually in place
        if self.config.allow_direnv and (result.worktree_path / ENVRC_FILE).is_file():
            result.direnv_allowed = self.direnv_service.allow(str(result.worktree_path))

        self.display.success(f"created worktree {location.path}")
        return result

    def _copy_node_modules(self, worktree_path: Path) -> bool:
        """Copy the root node_modules, and only that one, into the new worktree."""
        node_modules = Path(self.repo_path) / NODE_MODULES_DIR
        if not node_modules.is_dir():
            return False
        return self.copy_service.copy_tree(str(node_modules), str(worktree_path / NODE_MODULES_DIR))

    def _copy_source_root(self, inside_work_tree: bool) -> Path:
        """Where untracked files are copied from.

        Inside a worktree that is the current directory; in a bare repository
        root it is the checked out branch's directory.
        """
        if inside_work_tree:
            return Path(self.repo_path)
        return Path(self.repo_path) / self.git_service.get_current_branch()

    def _copy_manifest(self, manifest: CopyManifest, result: WorktreeResult) -> None:
        """Copy every manifest file, keeping its relative directory."""
        for relative_path in manifest:
            source = manifest.source_root / relative_path
            target = result.worktree_path / relative_path
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                self.display.warning(f"Unable to create directory {target.parent}: {e}")
                result.failed_files.append(relative_path)
                continue

            if self.copy_service.copy_tree(str(source), str(target)):
                result.copied_files.append(relative_path)
            else:
                result.failed_files.append(relative_path)
