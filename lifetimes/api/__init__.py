"""Read-only HTTP surface over a loaded dataset."""
