"""
HTTP transport for the satellite admin API.
"""

from .client import (
    AdminTransport,
    Sender,
    encode_query,
    is_json_response,
    JSON,
    SERVER_RESPONSE_ERROR,
)
from .errors import APIError

__all__ = [
    'AdminTransport',
    'Sender',
    'encode_query',
    'is_json_response',
    'JSON',
    'SERVER_RESPONSE_ERROR',
    'APIError',
]
