"""
ASGI config for the scripter project.

The views are async, so the service runs under an ASGI server
(e.g. ``uvicorn scripter.asgi:application``).
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "scripter.settings")

application = get_asgi_application()
