"""External tool wrappers."""
