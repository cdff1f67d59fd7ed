"""Configuration handling for wtadd"""

from dataclasses import dataclass, field
from typing import List

from wtadd.constants import (
    DEFAULT_REMOTE,
    DOTFILE_EXTENSIONS,
    EXACT_FILENAMES,
    EXCLUDED_PATH_FRAGMENTS,
)


@dataclass
class Config:
    """Configuration for wtadd with validation."""

    # Output
    verbose: bool = False  # Echo every external command
    debug: bool = False

    # Branch lookup
    remote_name: str = DEFAULT_REMOTE

    # Files carried over into the new worktree
    dotfile_extensions: List[str] = field(default_factory=lambda: list(DOTFILE_EXTENSIONS))
    exact_filenames: List[str] = field(default_factory=lambda: list(EXACT_FILENAMES))
    excluded_path_fragments: List[str] = field(
        default_factory=lambda: list(EXCLUDED_PATH_FRAGMENTS)
    )
    copy_node_modules: bool = True

    # Post-creation steps
    pull: bool = True
    allow_direnv: bool = True

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_remote_name()
        self._validate_patterns("dotfile_extensions")
        self._validate_patterns("exact_filenames")
        self._validate_patterns("excluded_path_fragments")

    def _validate_remote_name(self):
        """Validate remote_name is not empty."""
        if not self.remote_name or not self.remote_name.strip():
            raise ValueError("remote_name cannot be empty")
        self.remote_name = self.remote_name.strip()

    def _validate_patterns(self, name: str):
        """Validate a pattern list holds only non-empty strings."""
        value = getattr(self, name)
        if not isinstance(value, list):
            raise ValueError(f"{name} must be a list")
        for item in value:
            if not isinstance(item, str) or not item.strip():
                raise ValueError(f"{name} entries must be non-empty strings, got {item!r}")
            if "/" in item and name != "excluded_path_fragments":
                raise ValueError(f"{name} entries must be bare file names, got '{item}'")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "verbose": self.verbose,
            "debug": self.debug,
            "remote_name": self.remote_name,
            "dotfile_extensions": self.dotfile_extensions,
            "exact_filenames": self.exact_filenames,
            "excluded_path_fragments": self.excluded_path_fragments,
            "copy_node_modules": self.copy_node_modules,
            "pull": self.pull,
            "allow_direnv": self.allow_direnv,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        # Extract only known fields
        known_fields = {
            "verbose",
            "debug",
            "remote_name",
            "dotfile_extensions",
            "exact_filenames",
            "excluded_path_fragments",
            "copy_node_modules",
            "pull",
            "allow_direnv",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
