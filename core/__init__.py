"""Core application: messages, users and shared infrastructure."""
