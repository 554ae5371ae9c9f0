"""
satellite-admin - self-describing registry of satellite admin API operations.
"""

from .admin import Admin
from .config import AdminSettings, ConfigurationError, get_settings
from .registry import (
    AdminRegistry,
    API,
    CategoryNotFound,
    Choice,
    Operation,
    OperationNotFound,
    OperationRegistryError,
    TextInput,
)
from .transport import AdminTransport, APIError, encode_query

__version__ = "0.1.0"

__all__ = [
    'Admin',
    'AdminRegistry',
    'AdminSettings',
    'AdminTransport',
    'API',
    'APIError',
    'CategoryNotFound',
    'Choice',
    'ConfigurationError',
    'Operation',
    'OperationNotFound',
    'OperationRegistryError',
    'TextInput',
    'encode_query',
    'get_settings',
]
