"""Feature modules of the player registry."""
