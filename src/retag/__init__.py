"""Interactive assistant for moving git tags and syncing root version tags."""
