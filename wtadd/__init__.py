"""
wtadd - Create a ready-to-use git worktree for a branch
"""

from .__version__ import __version__
from .core import WorktreeCreator
from .cli.main import main

__all__ = ["WorktreeCreator", "main", "__version__"]
