"""
pytest configuration helpers for the social graph project.

This module ensures Django is configured even when Pytest runs without
pytest-django picking up the settings module.
"""

import logging
import os
import sys
from pathlib import Path

import django
from django.conf import settings
from django.core.exceptions import AppRegistryNotReady, ImproperlyConfigured

LOGGER = logging.getLogger(__name__)
PROJECT_ROOT = Path(__file__).resolve().parent

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

KNOWN_SETTING_MODULES = (
    'socialgraph.settings',
)


def setup_django():
    """Setup Django configuration with fallback options for the project."""
    configured = os.environ.get('DJANGO_SETTINGS_MODULE')
    settings_modules = []
    if configured:
        settings_modules.append(configured)
    settings_modules.extend(KNOWN_SETTING_MODULES)

    for settings_module in settings_modules:
        try:
            os.environ['DJANGO_SETTINGS_MODULE'] = settings_module
            django.setup()
            LOGGER.info("Django configured with %s", settings_module)
            return True
        except ImportError as exc:
            LOGGER.debug("Unable to import %s: %s", settings_module, exc, exc_info=exc)
        except (ImproperlyConfigured, AppRegistryNotReady, RuntimeError) as exc:
            LOGGER.warning("Failed to setup Django with %s: %s", settings_module, exc, exc_info=exc)

    return False


if not settings.configured:
    if not setup_django():
        LOGGER.error("Could not configure Django for the social graph project. Tests may fail.")
