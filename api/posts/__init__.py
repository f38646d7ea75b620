"""Posts: create and delete."""
