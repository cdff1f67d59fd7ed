"""direnv integration for wtadd"""

import subprocess
from typing import Optional, TYPE_CHECKING

from wtadd.constants import DIRENV_BINARY
from wtadd.utils.logging import get_logger

if TYPE_CHECKING:
    from wtadd.services.display_service import DisplayService

logger = get_logger(__name__)


class DirenvService:
    """Marks a worktree's .envrc as trusted so direnv loads it."""

    def __init__(self, display: Optional["DisplayService"] = None):
        self.display = display

    def _warn(self, message: str) -> None:
        if self.display:
            self.display.warning(message)
        else:
            logger.warning(message)

    def allow(self, path: str) -> bool:
        """Run `direnv allow` on path.

        Returns:
            True if direnv accepted the directory
        """
        command = [DIRENV_BINARY, "allow", str(path)]
        logger.info("$ " + " ".join(command))
        try:
            result = subprocess.run(command, capture_output=True, text=True, check=False)
        except OSError as e:
            self._warn(f"Unable to run direnv allow on {path}: {e}")
            return False

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            self._warn(f"direnv allow failed for {path}" + (f": {stderr}" if stderr else ""))
            return False
        return True
