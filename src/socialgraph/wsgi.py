"""WSGI entry point for the social graph project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "socialgraph.settings")

application = get_wsgi_application()
