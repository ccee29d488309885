"""Production server startup script for the admin service.

Starts the Django application with Gunicorn in container environments.
Bind address, worker and thread counts can be overridden with environment
variables.
"""

import os
import sys

from gunicorn.app.wsgiapp import run


def build_gunicorn_args() -> list[str]:
    """Build the Gunicorn command line from the environment.

    Environment Variables:
    - SERVER_BIND: Bind address (default: 0.0.0.0:8000)
    - SERVER_WORKERS: Worker processes (default: 4)
    - SERVER_THREADS: Threads per worker (default: 2)
    - SERVER_TIMEOUT: Worker timeout in seconds (default: 60)
    """
    return [
        "gunicorn",
        "admin_service.wsgi:application",
        "--bind",
        os.getenv("SERVER_BIND", "0.0.0.0:8000"),
        "--workers",
        os.getenv("SERVER_WORKERS", "4"),
        "--threads",
        os.getenv("SERVER_THREADS", "2"),
        "--timeout",
        os.getenv("SERVER_TIMEOUT", "60"),
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]


def main():
    """Start the admin service using Gunicorn."""
    sys.argv = build_gunicorn_args()
    run()


if __name__ == "__main__":
    main()
