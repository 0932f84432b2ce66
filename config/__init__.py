"""Configuration package for the Argo subscription server."""

from .settings import (
    Settings,
    load_settings,
    DEFAULT_UUID,
    DEFAULT_PLACEHOLDER_DOMAIN,
)

__all__ = [
    'Settings',
    'load_settings',
    'DEFAULT_UUID',
    'DEFAULT_PLACEHOLDER_DOMAIN',
]
