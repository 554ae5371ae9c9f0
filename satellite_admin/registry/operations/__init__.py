"""
Admin operation registrations.

Builds the APIKeys, bucket, project and user operations over one transport.
"""

from typing import Dict, List

from ...transport import AdminTransport
from ..operation_registry import Operation
from . import apikey_operations, bucket_operations, project_operations, user_operations
from .apikey_operations import build_apikey_operations
from .bucket_operations import build_bucket_operations
from .project_operations import build_project_operations
from .user_operations import build_user_operations


def build_all_operations(transport: AdminTransport) -> Dict[str, List[Operation]]:
    """Build every admin operation, keyed by category in display order."""
    return {
        apikey_operations.CATEGORY: build_apikey_operations(transport),
        bucket_operations.CATEGORY: build_bucket_operations(transport),
        project_operations.CATEGORY: build_project_operations(transport),
        user_operations.CATEGORY: build_user_operations(transport),
    }


__all__ = [
    'build_all_operations',
    'build_apikey_operations',
    'build_bucket_operations',
    'build_project_operations',
    'build_user_operations',
]
