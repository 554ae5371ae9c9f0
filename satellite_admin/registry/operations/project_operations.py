"""
Project operation registrations.

Covers projects themselves, their API keys, usage and limits.
"""

from typing import Any, Dict, List, Optional, Union

from ...transport import AdminTransport, APIError, encode_query
from ..operation_registry import Operation
from ..parameters import text
from .helpers import blank_to_none, without_none

CATEGORY = "project"

Number = Union[int, float]


def build_project_operations(transport: AdminTransport) -> List[Operation]:
    """Build the project operations."""

    async def create(owner_id: str, project_name: str) -> Optional[Dict[str, Any]]:
        return await transport.request(
            "POST", "projects", json_body={"ownerId": owner_id, "projectName": project_name}
        )

    async def delete(project_id: str) -> None:
        await transport.request("DELETE", f"projects/{project_id}")
        return None

    async def get(project_id: str) -> Optional[Dict[str, Any]]:
        return await transport.request("GET", f"projects/{project_id}")

    async def update(
        project_id: str,
        project_name: str,
        description: Optional[str] = None
    ) -> None:
        await transport.request(
            "PUT",
            f"projects/{project_id}",
            json_body=without_none({"projectName": project_name, "description": description}),
        )
        return None

    async def create_api_key(project_id: str, name: str) -> Optional[Dict[str, Any]]:
        return await transport.request(
            "POST", f"projects/{project_id}/apikeys", json_body={"name": name}
        )

    async def delete_api_key(project_id: str, api_key_name: str) -> None:
        await transport.request("DELETE", f"projects/{project_id}/apikeys/{api_key_name}")
        return None

    async def get_api_keys(project_id: str) -> Optional[Dict[str, Any]]:
        return await transport.request("GET", f"projects/{project_id}/apiKeys")

    async def get_usage(project_id: str) -> Optional[Dict[str, Any]]:
        return await transport.request("GET", f"projects/{project_id}/usage")

    async def get_limits(project_id: str) -> Optional[Dict[str, Any]]:
        return await transport.request("GET", f"projects/{project_id}/limit")

    async def update_limits(
        project_id: str,
        usage: Optional[Number] = None,
        bandwidth: Optional[Number] = None,
        rate: Optional[Number] = None,
        buckets: Optional[Number] = None,
        segments: Optional[Number] = None
    ) -> None:
        query = encode_query({
            "usage": blank_to_none(usage),
            "bandwidth": blank_to_none(bandwidth),
            "rate": blank_to_none(rate),
            "buckets": blank_to_none(buckets),
            "segments": blank_to_none(segments),
        })
        if query == "":
            raise APIError("nothing to update, at least one limit must be set")

        await transport.request("PUT", f"projects/{project_id}/limit", query)
        return None

    project_id = ("Project ID", text("text", required=True))

    return [
        Operation(
            name="create",
            description="Add a new project to a specific user",
            parameters=(
                ("Owner ID (user ID)", text("text", required=True)),
                ("Project Name", text("text", required=True)),
            ),
            func=create,
        ),
        Operation(
            name="delete",
            description="Delete a specific project",
            parameters=(project_id,),
            func=delete,
        ),
        Operation(
            name="get",
            description="Get the information of a specific project",
            parameters=(project_id,),
            func=get,
        ),
        Operation(
            name="update",
            description="Update the information of a specific project",
            parameters=(
                project_id,
                ("Project Name", text("text", required=True)),
                ("Description", text("text", required=False)),
            ),
            func=update,
        ),
        Operation(
            name="create API key",
            description="Create a new API key for a specific project",
            parameters=(
                project_id,
                ("API key name", text("text", required=True)),
            ),
            func=create_api_key,
        ),
        Operation(
            name="delete API key",
            description="Delete a API key of a specific project",
            parameters=(
                project_id,
                ("API Key name", text("text", required=True)),
            ),
            func=delete_api_key,
        ),
        Operation(
            name="get API keys",
            description="Get the API keys of a specific project",
            parameters=(project_id,),
            func=get_api_keys,
        ),
        Operation(
            name="get project usage",
            description="Get the current usage of a specific project",
            parameters=(project_id,),
            func=get_usage,
        ),
        Operation(
            name="get project limits",
            description="Get the current limits of a specific project",
            parameters=(project_id,),
            func=get_limits,
        ),
        Operation(
            name="update project limits",
            description="Update the limits of a specific project",
            parameters=(
                project_id,
                ("Storage (in bytes)", text("number", required=False)),
                ("Bandwidth (in bytes)", text("number", required=False)),
                ("Rate (requests per second)", text("number", required=False)),
                ("Buckets (maximum number)", text("number", required=False)),
                ("Segments (maximum number)", text("number", required=False)),
            ),
            func=update_limits,
        ),
    ]
