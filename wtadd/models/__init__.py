"""Data models for wtadd."""

from .worktree import (
    BranchOrigin,
    CopyManifest,
    WorktreeLocation,
    WorktreeResult,
    branch_to_dir_name,
)

__all__ = [
    "BranchOrigin",
    "CopyManifest",
    "WorktreeLocation",
    "WorktreeResult",
    "branch_to_dir_name",
]
