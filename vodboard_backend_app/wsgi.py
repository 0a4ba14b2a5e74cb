"""
WSGI config for the VOD dashboard backend.

Exposes the WSGI callable as a module-level variable named ``application``.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "vodboard_backend_app.settings")

application = get_wsgi_application()
