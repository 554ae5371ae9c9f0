"""Tests for display envelopes."""

from satellite_admin.transport import APIError
from satellite_admin.utils.response import error_response, is_success, success_response


def test_success_response():
    result = success_response({"id": "p1"})
    assert result == {"ok": True, "data": {"id": "p1"}}
    assert is_success(result)


def test_success_response_without_body():
    assert success_response(None) == {"ok": True, "data": None}


def test_error_response_guard_failure():
    result = error_response(APIError("region cannot be empty"))

    assert not is_success(result)
    assert result["error"] == {"message": "region cannot be empty"}


def test_error_response_server_error():
    error = APIError("server response error", 404, {"error": "not found"})

    assert error_response(error)["error"] == {
        "message": "server response error",
        "responseStatusCode": 404,
        "responseBody": {"error": "not found"},
    }


def test_error_response_without_body():
    result = error_response(APIError("server response error", 500))
    assert result["error"] == {"message": "server response error", "responseStatusCode": 500}
