"""Django project package for the admin service."""
