"""
Satellite admin API client.

Exposes the admin operations through the registry so a renderer can build
its forms from them.
"""

import logging
from typing import Mapping, Optional, Tuple

from .config.settings import AdminSettings, get_settings
from .registry import AdminRegistry, Operation
from .transport import AdminTransport, Sender

logger = logging.getLogger(__name__)


class Admin:
    """Admin API client exposing its operations by category."""

    def __init__(
        self,
        base_url: str,
        auth_token: str,
        sender: Optional[Sender] = None
    ):
        """
        Initialize the client.

        Args:
            base_url: Admin API base URL
            auth_token: Value of the Authorization header
            sender: Object used to send requests (default: own httpx.AsyncClient)
        """
        self.transport = AdminTransport(base_url, auth_token, sender)
        self.registry = AdminRegistry(self.transport)

        logger.info(f"Admin client ready for {self.transport.base_url}")

    @classmethod
    def from_settings(
        cls,
        settings: Optional[AdminSettings] = None,
        sender: Optional[Sender] = None
    ) -> "Admin":
        """Build a client from settings (default: environment)."""
        if settings is None:
            settings = get_settings()
        return cls(settings.base_url, settings.auth_token, sender)

    @property
    def operations(self) -> Mapping[str, Tuple[Operation, ...]]:
        return self.registry.operations

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        await self.transport.close()
