"""Finds the untracked files that get copied into a new worktree"""

import os
from pathlib import Path
from typing import List, Union, TYPE_CHECKING

from wtadd.models.worktree import CopyManifest
from wtadd.utils.logging import get_logger

if TYPE_CHECKING:
    from wtadd.config import Config

logger = get_logger(__name__)


class ManifestService:
    """Walks a source tree and collects files matching the copy patterns.

    Replaces the two find(1) dialects (BSD ``-E`` and GNU
    ``-regextype posix-extended``) with one os.walk that yields the same set.
    """

    def __init__(self, config: Union["Config", dict]):
        dotfiles = config.get("dotfile_extensions", [])
        exact = config.get("exact_filenames", [])
        # Matching is case-insensitive and covers the whole file name
        self.dotfile_names = {f".{ext}".casefold() for ext in dotfiles}
        self.exact_names = {name.casefold() for name in exact}
        self.excluded_fragments: List[str] = list(config.get("excluded_path_fragments", []))

    def is_excluded(self, relative_path: str) -> bool:
        """Check whether a path relative to the source root is excluded."""
        return any(fragment in relative_path for fragment in self.excluded_fragments)

    def matches(self, file_name: str) -> bool:
        """Check whether a file name is one of the files to copy."""
        name = file_name.casefold()
        return name in self.dotfile_names or name in self.exact_names

    def build(self, source_root: Union[str, Path]) -> CopyManifest:
        """Collect matching files under source_root.

        Paths containing an excluded fragment are skipped even when the file
        name matches, so node_modules/pkg/.env is never picked up.
        """
        root = Path(source_root)
        manifest = CopyManifest(source_root=root)
        if not root.is_dir():
            logger.debug(f"Copy source {root} does not exist, nothing to copy")
            return manifest

        for dirpath, dirnames, filenames in os.walk(root):
            rel_dir = os.path.relpath(dirpath, root)
            rel_dir = "" if rel_dir == os.curdir else rel_dir

            # Everything below an excluded directory is excluded too
            dirnames[:] = sorted(
                d for d in dirnames if not self.is_excluded(os.path.join(rel_dir, d))
            )

            for filename in sorted(filenames):
                rel_path = os.path.join(rel_dir, filename)
                if self.is_excluded(rel_path) or not self.matches(filename):
                    continue
                manifest.files.append(Path(rel_path))

        logger.debug(f"Found {len(manifest)} files to copy under {root}")
        for path in manifest:
            logger.debug(f"  {path}")
        return manifest
