"""App configuration for the network app."""

from django.apps import AppConfig


class NetworkConfig(AppConfig):
    """Register the follow-graph Django application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "network"
