"""Domain layer - results and failure classification for filesystem operations."""
