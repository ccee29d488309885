"""ASGI config for the admin service.

It exposes the ASGI callable as a module-level variable named ``application``.
"""

import os

from django.core.asgi import get_asgi_application

from core.logging import setup_logging

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "admin_service.settings")

setup_logging()

application = get_asgi_application()
