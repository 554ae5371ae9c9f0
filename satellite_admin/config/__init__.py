"""Configuration for the satellite admin client."""

from .settings import AdminSettings, ConfigurationError, get_settings

__all__ = ['AdminSettings', 'ConfigurationError', 'get_settings']
