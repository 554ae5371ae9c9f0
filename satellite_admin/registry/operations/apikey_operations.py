"""
API key operation registrations.
"""

from typing import List

from ...transport import AdminTransport
from ..operation_registry import Operation
from ..parameters import text

CATEGORY = "APIKeys"


def build_apikey_operations(transport: AdminTransport) -> List[Operation]:
    """Build the operations acting on API keys directly."""

    async def delete_key(api_key: str) -> None:
        await transport.request("DELETE", f"apikeys/{api_key}")
        return None

    return [
        Operation(
            name="delete key",
            description="Delete an API key",
            parameters=(("API key", text("text", required=True)),),
            func=delete_key,
        ),
    ]
