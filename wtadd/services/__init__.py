"""Services used by WorktreeCreator."""
