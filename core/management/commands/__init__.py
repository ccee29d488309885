"""Custom management commands."""
