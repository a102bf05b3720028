"""
Configuration management for fluentrest.

Loads defaults from environment variables or a .env file.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Any, Callable

from dotenv import load_dotenv

from fluentrest.headers import basic_auth_header
from fluentrest.media import APPLICATION_XML


ENV_LOCATIONS = [
    Path.home() / ".fluentrest" / ".env",
    Path.home() / ".config" / "fluentrest" / ".env",
    Path.cwd() / ".env",
]


def load_env_file() -> Path | None:
    """Load the first .env file found in the common locations."""
    for env_path in ENV_LOCATIONS:
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    return None


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


FailureHandler = Callable[[Any], Any]
ContentTypeFailureHandler = Callable[[str, Any], Any]


@dataclass
class RestConfig:
    """Defaults read by every request."""

    # Base URL for relative paths
    base_url: str | None = None

    # Headers sent with every request
    default_headers: dict[str, str] = field(default_factory=dict)

    # Accept header value
    default_accept: str = APPLICATION_XML

    # Prefix generated XML bodies with <?xml ...?>
    xml_declaration: bool = True

    # Called with the response for non-2xx statuses and failed require_status
    failure_handler: FailureHandler | None = None

    # Called with (expected type, response) when a content type check fails
    content_type_failure_handler: ContentTypeFailureHandler | None = None

    # Passed straight to httpx.Client
    timeout: float = 30.0
    verify_ssl: bool = True
    follow_redirects: bool = True

    @classmethod
    def from_env(cls) -> "RestConfig":
        """Load configuration from environment variables."""
        headers = {}
        user = os.getenv("FLUENTREST_USER", "")
        if user:
            headers.update(basic_auth_header(user, os.getenv("FLUENTREST_PASSWORD", "")))

        return cls(
            base_url=os.getenv("FLUENTREST_BASE_URL") or None,
            default_headers=headers,
            default_accept=os.getenv("FLUENTREST_ACCEPT", APPLICATION_XML),
            xml_declaration=_env_bool("FLUENTREST_XML_DECLARATION", True),
            timeout=float(os.getenv("FLUENTREST_TIMEOUT", "30.0")),
            verify_ssl=_env_bool("FLUENTREST_VERIFY_SSL", True),
        )


# Global config instance
_config: RestConfig | None = None


def get_config() -> RestConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        load_env_file()
        _config = RestConfig.from_env()
    return _config


def set_config(config: RestConfig | None) -> None:
    """Set the global configuration instance. None reloads from the environment."""
    global _config
    _config = config
