"""Tag role resolution, membership changes and listings."""
