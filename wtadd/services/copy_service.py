"""Copy-on-write file copying service"""

import os
import shutil
import subprocess
from typing import List, Optional, TYPE_CHECKING

from wtadd.constants import CP_BINARY
from wtadd.utils.logging import get_logger

if TYPE_CHECKING:
    from wtadd.services.display_service import DisplayService

logger = get_logger(__name__)


class CopyService:
    """Copies files and directory trees, using copy-on-write where possible.

    Copy-on-write matters most for node_modules, which can be huge. Filesystem
    support can't be reliably detected up front, so each mechanism is simply
    tried in turn:

    1. ``cp -Rc`` (clonefile on macOS/BSD)
    2. ``cp -R --reflink`` (btrfs/XFS on Linux)
    3. a plain recursive copy
    """

    def __init__(self, display: Optional["DisplayService"] = None):
        self.display = display

    def _cp_commands(self, source: str, dest: str) -> List[List[str]]:
        return [
            [CP_BINARY, "-Rc", source, dest],
            [CP_BINARY, "-R", "--reflink", source, dest],
        ]

    def _run_cp(self, command: List[str]) -> bool:
        logger.info("$ " + " ".join(command))
        try:
            result = subprocess.run(
                command, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL, check=False
            )
        except OSError as e:
            logger.debug(f"Could not run {command[0]}: {e}")
            return False
        return result.returncode == 0

    def _plain_copy(self, source: str, dest: str) -> bool:
        logger.info(f"Copying {source} to {dest}")
        try:
            if os.path.isdir(source) and not os.path.islink(source):
                shutil.copytree(source, dest, symlinks=True, dirs_exist_ok=True)
            else:
                shutil.copy2(source, dest, follow_symlinks=False)
        except OSError as e:
            logger.debug(f"Plain copy of {source} failed: {e}")
            return False
        return True

    def _discard_partial(self, dest: str) -> None:
        """Remove whatever a failed attempt left at dest."""
        try:
            if os.path.isdir(dest) and not os.path.islink(dest):
                shutil.rmtree(dest)
            elif os.path.lexists(dest):
                os.unlink(dest)
        except OSError as e:
            logger.debug(f"Could not remove partial copy at {dest}: {e}")

    def copy_tree(self, source: str, dest: str) -> bool:
        """Copy a file or directory tree from source to dest.

        Never raises; if every mechanism fails a warning is shown.

        Returns:
            True if any copy mechanism succeeded
        """
        source, dest = str(source), str(dest)
        # cp into an existing directory nests the copy, so only a dest we
        # created ourselves gets cleaned up between attempts
        dest_existed = os.path.lexists(dest)
        for command in self._cp_commands(source, dest):
            if self._run_cp(command):
                logger.debug(f"Copied {source} to {dest} with {' '.join(command[1:-2])}")
                return True
            if not dest_existed:
                self._discard_partial(dest)

        if self._plain_copy(source, dest):
            return True

        message = f"Unable to copy file {source} to {dest} - folder may not exist"
        if self.display:
            self.display.warning(message)
        else:
            logger.warning(message)
        return False
