"""
Admin API transport.

Shared HTTP primitives used by every registered operation: URL assembly,
query encoding and a single-shot JSON request.
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional, Protocol, Union
from urllib.parse import quote

import httpx

from .errors import APIError

logger = logging.getLogger(__name__)

# Type aliases
JSON = Any
QueryValue = Union[bool, int, float, str, None]

JSON_CONTENT_TYPE = "application/json"
SERVER_RESPONSE_ERROR = "server response error"

# Characters left unescaped by JavaScript's encodeURIComponent
_QUERY_SAFE = "!~*'()"


class Sender(Protocol):
    """Anything able to send an ``httpx.Request`` (e.g. ``httpx.AsyncClient``)."""

    async def send(self, request: httpx.Request) -> httpx.Response:
        ...


def _format_query_value(value: QueryValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def encode_query(values: Mapping[str, QueryValue]) -> str:
    """
    Encode a bag of values as a URL query string.

    Keys keep the mapping's iteration order; keys whose value is None are
    skipped entirely.

    Args:
        values: Query parameter names to values

    Returns:
        ``name=value`` pairs joined by ``&``, or "" when nothing is set
    """
    parts = []
    for name, value in values.items():
        if value is None:
            continue
        parts.append(f"{name}={quote(_format_query_value(value), safe=_QUERY_SAFE)}")

    return "&".join(parts)


def is_json_response(response: httpx.Response) -> bool:
    """Check whether the response declares a JSON body."""
    content_type = response.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == JSON_CONTENT_TYPE


class AdminTransport:
    """
    HTTP transport for the satellite admin API.

    Every request carries the configured token verbatim in the
    ``Authorization`` header. Requests are sent exactly once: no retries, no
    redirect following and no timeout enforcement at this layer.
    """

    def __init__(
        self,
        base_url: str,
        auth_token: str,
        sender: Optional[Sender] = None
    ):
        """
        Initialize transport.

        Args:
            base_url: Admin API base URL; one trailing slash is dropped
            auth_token: Value of the Authorization header
            sender: Object used to send requests (default: own httpx.AsyncClient)
        """
        self._base_url = base_url[:-1] if base_url.endswith("/") else base_url
        self._auth_token = auth_token
        self._owns_sender = sender is None
        self._sender = sender if sender is not None else httpx.AsyncClient(timeout=None)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def sender(self) -> Sender:
        return self._sender

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_sender:
            await self._sender.aclose()

    def build_url(self, path: str, query: Optional[str] = None) -> str:
        """
        Build the absolute URL of an admin API resource.

        Args:
            path: Resource path, with or without a leading slash
            query: Encoded query string, without "?"

        Returns:
            Absolute URL
        """
        if path.startswith("/"):
            path = path[1:]

        url = f"{self._base_url}/{path}"
        if query:
            url = f"{url}?{query}"

        return url

    async def request(
        self,
        method: str,
        path: str,
        query: Optional[str] = None,
        json_body: Optional[Dict[str, Any]] = None
    ) -> Optional[JSON]:
        """
        Perform one admin API round trip.

        Args:
            method: One of GET, DELETE, POST, PUT
            path: Resource path
            query: Encoded query string (see encode_query)
            json_body: Object sent as JSON request body

        Returns:
            Parsed JSON body when the response declares one, otherwise None

        Raises:
            APIError: If the server responds with a non-success status
            httpx.TransportError: If the server cannot be reached
        """
        url = self.build_url(path, query)
        headers = {"Authorization": self._auth_token}

        content = None
        if json_body is not None:
            headers["Content-Type"] = JSON_CONTENT_TYPE
            content = json.dumps(json_body)

        request = httpx.Request(method, url, headers=headers, content=content)
        logger.debug(f"{method} {url}")

        response = await self._sender.send(request)

        if not response.is_success:
            body = None
            if is_json_response(response):
                try:
                    body = response.json()
                except ValueError:
                    body = None

            logger.debug(f"{method} {url} failed with status {response.status_code}")
            raise APIError(SERVER_RESPONSE_ERROR, response.status_code, body)

        if not is_json_response(response):
            return None

        try:
            return response.json()
        except ValueError:
            raise APIError("invalid JSON response", response.status_code, response.text)
