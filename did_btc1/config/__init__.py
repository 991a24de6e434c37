"""Configuration, settings and logging."""
