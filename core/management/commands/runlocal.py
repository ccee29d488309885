"""Development server command that skips migration checks.

The database schema is owned by the database scripts, so the service can
start without a database connection and report a degraded readiness.
"""

from django.core.management.commands.runserver import Command as RunServer


class Command(RunServer):
    """runserver without the unapplied-migrations check."""

    help = "Start development server without migration checks"

    def check_migrations(self, *_args, **_kwargs):
        """Skip migration checks - this service doesn't own the schema."""
        self.stdout.write(
            self.style.WARNING(
                "Skipping migration checks (schema is owned by database scripts)"
            )
        )
