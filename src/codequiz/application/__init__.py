"""Application services orchestrating quiz features."""
