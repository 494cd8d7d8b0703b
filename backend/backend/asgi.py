"""
ASGI config for the chat backend.

It exposes the ASGI callable as a module-level variable named ``application``.
Updates reach the browser by polling, so plain HTTP is all that is routed.
"""

import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backend.settings")

from django.core.asgi import get_asgi_application

application = get_asgi_application()
