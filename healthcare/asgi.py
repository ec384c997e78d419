"""
ASGI config for the healthcare backend.

Only HTTP is served; requests run one at a time against the shared
in-memory store, so a single worker process is expected.
"""
import os

from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "healthcare.settings")

application = get_asgi_application()
