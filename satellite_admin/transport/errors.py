"""Error value raised by admin operations."""

from typing import Any, Dict, Optional, Union

ResponseBody = Union[Dict[str, Any], str]


class APIError(Exception):
    """
    Failed or malformed admin API invocation.

    Raised either locally, before any request is sent (guard failures), or
    after the server answered with a non-success status. Network failures are
    not wrapped: they surface as ``httpx.TransportError``.

    Attributes:
        message: Human-readable message
        response_status_code: HTTP status of the server response, if any
        response_body: Parsed JSON error body or raw text, if available
    """

    def __init__(
        self,
        message: str,
        response_status_code: Optional[int] = None,
        response_body: Optional[ResponseBody] = None
    ):
        super().__init__(message)
        self.message = message
        self.response_status_code = response_status_code
        self.response_body = response_body

    @property
    def is_server_error(self) -> bool:
        """True when the error comes from a server response."""
        return self.response_status_code is not None

    def __repr__(self) -> str:
        return (
            f"APIError(message={self.message!r}, "
            f"response_status_code={self.response_status_code!r}, "
            f"response_body={self.response_body!r})"
        )
