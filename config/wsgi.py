"""
WSGI config for the ALAN Booking project.

It exposes the WSGI callable as a module-level variable named ``application``.
Websocket notifications need the ASGI entry point (config.asgi) instead.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.development')

application = get_wsgi_application()
