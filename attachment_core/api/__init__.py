"""API layer - response models exposed to rendering code."""
