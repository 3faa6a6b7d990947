"""User progress through generated plans."""
