"""Worktree data models."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List


class BranchOrigin(Enum):
    """Where a requested branch already exists, if anywhere."""
    LOCAL = "local"
    REMOTE = "remote"
    NEW = "new"


def branch_to_dir_name(branch_name: str) -> str:
    """Turn a branch name into a directory name.

    "alu/something-other" becomes "alu_something-other", "quick-fix" stays unchanged.
    """
    return branch_name.replace("/", "_")


@dataclass
class WorktreeLocation:
    """Where a new worktree goes, relative to the invocation directory."""

    parent_dir: str  # ".." inside a worktree, "." in a bare repository root
    dir_name: str

    @classmethod
    def for_branch(cls, branch_name: str, inside_work_tree: bool) -> "WorktreeLocation":
        """Sibling of the current worktree, or child of the bare repository root."""
        parent_dir = ".." if inside_work_tree else "."
        return cls(parent_dir=parent_dir, dir_name=branch_to_dir_name(branch_name))

    @property
    def path(self) -> str:
        """Path as passed to git and shown to the user."""
        return f"{self.parent_dir}/{self.dir_name}"

    def resolve(self, base_dir: str) -> Path:
        """Absolute path of the worktree for an invocation from base_dir."""
        return (Path(base_dir) / self.parent_dir / self.dir_name).resolve()

    def __str__(self) -> str:
        return self.path


@dataclass
class CopyManifest:
    """Untracked files to carry over into a new worktree."""

    source_root: Path
    files: List[Path] = field(default_factory=list)  # Relative to source_root

    def __iter__(self):
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)

    def __contains__(self, item) -> bool:
        return Path(item) in self.files


@dataclass
class WorktreeResult:
    """Outcome of a worktree creation."""

    branch_name: str
    location: WorktreeLocation
    origin: BranchOrigin
    worktree_path: Path
    copied_files: List[Path] = field(default_factory=list)
    failed_files: List[Path] = field(default_factory=list)
    node_modules_copied: bool = False
    pulled: bool = False
    direnv_allowed: bool = False

    def __str__(self) -> str:
        """String representation of the result."""
        return f"{self.branch_name} ({self.origin.value}) @ {self.location.path}"
