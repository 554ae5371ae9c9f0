"""
Bucket operation registrations.

Geofencing can only be changed on empty buckets; the server enforces it.
"""

from typing import Any, Dict, List, Optional

from ...transport import AdminTransport, APIError, encode_query
from ..operation_registry import Operation
from ..parameters import choice, text
from .helpers import blank_to_none

CATEGORY = "bucket"

REGIONS = [
    ("European Union", "EU"),
    ("European Economic Area", "EEA"),
    ("United States", "US"),
    ("Germany", "DE"),
]


def build_bucket_operations(transport: AdminTransport) -> List[Operation]:
    """Build the bucket operations."""

    async def get(project_id: str, bucket_name: str) -> Optional[Dict[str, Any]]:
        return await transport.request("GET", f"projects/{project_id}/buckets/{bucket_name}")

    async def delete_geofencing(project_id: str, bucket_name: str) -> None:
        await transport.request(
            "DELETE", f"projects/{project_id}/buckets/{bucket_name}/geofence"
        )
        return None

    async def set_geofencing(
        project_id: str,
        bucket_name: str,
        region: Optional[str] = None
    ) -> Optional[Dict[str, Any]]:
        query = encode_query({"region": blank_to_none(region)})
        if query == "":
            raise APIError("region cannot be empty")

        return await transport.request(
            "POST", f"projects/{project_id}/buckets/{bucket_name}/geofence", query
        )

    bucket_params = (
        ("Project ID", text("text", required=True)),
        ("Bucket name", text("text", required=True)),
    )

    return [
        Operation(
            name="get",
            description="Get the information of the specified bucket",
            parameters=bucket_params,
            func=get,
        ),
        Operation(
            name="delete geofencing",
            description=(
                "Delete the geofencing configuration of the specified bucket. "
                "The bucket MUST be empty"
            ),
            parameters=bucket_params,
            func=delete_geofencing,
        ),
        Operation(
            name="set geofencing",
            description=(
                "Set the geofencing configuration of the specified bucket. "
                "The bucket MUST be empty"
            ),
            parameters=bucket_params + (
                ("Region", choice(REGIONS, multiple=False, required=True)),
            ),
            func=set_geofencing,
        ),
    ]
