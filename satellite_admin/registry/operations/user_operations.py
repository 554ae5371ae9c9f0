"""
User operation registrations.

Users are addressed by their email.
"""

from typing import Any, Dict, List, Optional

from ...transport import AdminTransport
from ..operation_registry import Operation
from ..parameters import text
from .helpers import without_none

CATEGORY = "user"


def build_user_operations(transport: AdminTransport) -> List[Operation]:
    """Build the user account operations."""

    async def create(
        email: str,
        full_name: Optional[str],
        password: str
    ) -> Optional[Dict[str, Any]]:
        return await transport.request(
            "POST",
            "users",
            json_body=without_none({
                "email": email,
                "fullName": full_name,
                "password": password,
            }),
        )

    async def delete(email: str) -> None:
        await transport.request("DELETE", f"users/{email}")
        return None

    async def get(email: str) -> Optional[Dict[str, Any]]:
        return await transport.request("GET", f"users/{email}")

    async def update(
        current_email: str,
        email: Optional[str] = None,
        full_name: Optional[str] = None,
        short_name: Optional[str] = None,
        partner_id: Optional[str] = None,
        password_hash: Optional[str] = None
    ) -> None:
        await transport.request(
            "PUT",
            f"users/{current_email}",
            json_body=without_none({
                "email": email,
                "fullName": full_name,
                "shortName": short_name,
                "partnerID": partner_id,
                "passwordHash": password_hash,
            }),
        )
        return None

    email = ("email", text("email", required=True))

    return [
        Operation(
            name="create",
            description="Create a new user account",
            parameters=(
                email,
                ("full name", text("text", required=False)),
                ("password", text("password", required=True)),
            ),
            func=create,
        ),
        Operation(
            name="delete",
            description="Delete a user's account",
            parameters=(email,),
            func=delete,
        ),
        Operation(
            name="get",
            description="Get the information of a user's account",
            parameters=(email,),
            func=get,
        ),
        Operation(
            name="update",
            description=(
                "Update the information of a user's account.\n"
                "Blank fields will not be updated."
            ),
            parameters=(
                ("current user's email", text("email", required=True)),
                ("new email", text("email", required=False)),
                ("full name", text("text", required=False)),
                ("short name", text("text", required=False)),
                ("partner ID", text("text", required=False)),
                ("password hash", text("text", required=False)),
            ),
            func=update,
        ),
    ]
