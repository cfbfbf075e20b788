"""Core scan pipeline modules."""
