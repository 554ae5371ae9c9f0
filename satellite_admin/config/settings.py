"""
Configuration for the satellite admin client.

Settings are read from environment variables so that the token never has to
be written in code.

Usage:
    from satellite_admin.config.settings import get_settings

    settings = get_settings()
    admin = Admin(settings.base_url, settings.auth_token)

Environment Variables:
    SATELLITE_ADMIN_URL   - Base URL of the admin API (e.g. http://localhost:10005/api)
    SATELLITE_ADMIN_TOKEN - Value sent in the Authorization header
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_BASE_URL = "SATELLITE_ADMIN_URL"
ENV_AUTH_TOKEN = "SATELLITE_ADMIN_TOKEN"


class ConfigurationError(Exception):
    """Required configuration is missing."""
    pass


@dataclass(frozen=True)
class AdminSettings:
    """Connection settings of the admin API."""
    base_url: str
    auth_token: str

    def __repr__(self) -> str:
        return f"AdminSettings(base_url={self.base_url!r}, auth_token='***')"


def get_settings(environ: Optional[Mapping[str, str]] = None) -> AdminSettings:
    """
    Load admin API settings from the environment.

    Args:
        environ: Mapping to read from (default: os.environ)

    Returns:
        AdminSettings

    Raises:
        ConfigurationError: If a variable is unset or empty
    """
    if environ is None:
        environ = os.environ

    values = {}
    for name in (ENV_BASE_URL, ENV_AUTH_TOKEN):
        value = environ.get(name, "")
        if not value.strip():
            raise ConfigurationError(f"Environment variable {name} must be set")
        values[name] = value

    # The token is sent verbatim
    return AdminSettings(
        base_url=values[ENV_BASE_URL].strip(),
        auth_token=values[ENV_AUTH_TOKEN],
    )
