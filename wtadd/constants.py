"""Shared constants for wtadd."""

from typing import List

# Dotfiles copied into a new worktree: "." followed by one of these, whole name
DOTFILE_EXTENSIONS: List[str] = ["envrc", "env", "env.local", "tool-versions", "mise.toml"]

# Non-dotfiles copied by exact name, at any depth
EXACT_FILENAMES: List[str] = ["application-local.yml"]

# Any path containing one of these fragments is never copied
EXCLUDED_PATH_FRAGMENTS: List[str] = ["node_modules", "dist", "build"]

DEFAULT_REMOTE = "origin"
NODE_MODULES_DIR = "node_modules"
ENVRC_FILE = ".envrc"

# Use /bin/cp directly so shell aliases never get in the way
CP_BINARY = "/bin/cp"
DIRENV_BINARY = "direnv"


# CLI colors (Rich color names)
class MessageStyle:
    """Style names for console messages."""

    ERROR = "red"
    WARNING = "yellow"
    SUCCESS = "green"


USAGE_TEXT = """\
wtadd [-v] <branch name>

create a git worktree with <branch name>. Will create a worktree if one isn't
found that matches the given name.

Will copy over any .env, .envrc, .tool-versions, .mise.toml or
application-local.yml files to the new worktree as well as node_modules
"""
