"""Management commands for the core app."""
