"""Display envelopes for operation outcomes."""

from typing import Any, Dict

from ..transport import APIError


def is_success(result: Dict[str, Any]) -> bool:
    """Check if an envelope reports success."""
    return bool(result.get("ok"))


def success_response(data: Any) -> Dict[str, Any]:
    """Create a successful response envelope.

    Args:
        data: Operation result (None for operations without a response body)

    Returns:
        Standardized success response
    """
    return {
        "ok": True,
        "data": data
    }


def error_response(error: APIError) -> Dict[str, Any]:
    """Create an error response envelope from an APIError.

    Only the fields the error carries are included, so a guard failure
    shows just its message.

    Args:
        error: Failed operation's error

    Returns:
        Standardized error response
    """
    details = {"message": error.message}

    if error.response_status_code is not None:
        details["responseStatusCode"] = error.response_status_code

    if error.response_body is not None:
        details["responseBody"] = error.response_body

    return {
        "ok": False,
        "error": details
    }
