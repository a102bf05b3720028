"""
Shared HTTP client for fluentrest resources.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
from typing import Any, Callable, Mapping, TextIO

import httpx

from fluentrest.config import RestConfig, get_config
from fluentrest.errors import InvalidURLError, TransportError
from fluentrest.logging_config import attach_wire_stream, create_wire_logger, get_logger
from fluentrest.markup import build_xml
from fluentrest.resource import Resource
from fluentrest.response import RestResponse


logger = get_logger(__name__)

EVENTS = ("request", "response")


class RestClient:
    """Owns the configuration and the httpx.Client shared by its resources.

    Usage:
        with RestClient(RestConfig(base_url="http://host/api")) as rest:
            response = rest.resource("/users").get()

    Without an explicit config the process-wide one from get_config() is
    read on every request. Timeout and redirect settings are applied per
    request; a change of verify_ssl replaces the underlying httpx.Client
    unless one was passed in.
    """

    def __init__(
        self,
        config: RestConfig | None = None,
        transport: httpx.BaseTransport | None = None,
        http_client: httpx.Client | None = None,
    ):
        self._config = config
        self._transport = transport
        self._client = http_client
        self._owns_client = http_client is None
        self._client_verify: bool | None = None
        self._hooks: dict[str, list[Callable]] = {event: [] for event in EVENTS}
        self._debugging = False
        self.wire_logger = create_wire_logger()

    def __enter__(self) -> "RestClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @property
    def config(self) -> RestConfig:
        return self._config if self._config is not None else get_config()

    @config.setter
    def config(self, config: RestConfig | None) -> None:
        self._config = config

    def _get_client(self) -> httpx.Client:
        """Get or create the shared HTTP client."""
        verify = self.config.verify_ssl
        if self._owns_client and self._client is not None and self._client_verify != verify:
            logger.debug(f"verify_ssl changed to {verify}, replacing HTTP client")
            self.close()

        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                timeout=httpx.Timeout(self.config.timeout),
                verify=verify,
                follow_redirects=self.config.follow_redirects,
                transport=self._transport,
                event_hooks=self._hooks,
            )
            self._client_verify = verify
            self._owns_client = True
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()

    def add_hook(self, event: str, hook: Callable) -> None:
        """Attach an httpx event hook ("request" or "response")."""
        if event not in EVENTS:
            raise ValueError(f"Unknown event {event!r}, expected one of {EVENTS}")
        self._hooks[event].append(hook)
        if self._client is not None:
            self._client.event_hooks = self._hooks

    def _log_request(self, request: httpx.Request) -> None:
        """Dump an outgoing request to the wire logger."""
        self.wire_logger.debug(f"> {request.method} {request.url}")
        for name, value in request.headers.items():
            self.wire_logger.debug(f"> {name}: {value}")
        if request.content:
            self.wire_logger.debug(request.content.decode("utf-8", errors="replace"))

    def _log_response(self, response: httpx.Response) -> None:
        """Dump an incoming response to the wire logger."""
        response.read()
        self.wire_logger.debug(f"< {response.status_code} {response.reason_phrase}")
        for name, value in response.headers.items():
            self.wire_logger.debug(f"< {name}: {value}")
        if response.content:
            self.wire_logger.debug(response.text)

    def debug(self, stream: TextIO | None = None) -> logging.Handler:
        """Print every request and response of this client to the given stream."""
        handler = attach_wire_stream(self.wire_logger, stream)
        if not self._debugging:
            self._debugging = True
            self.add_hook("request", self._log_request)
            self.add_hook("response", self._log_response)
        return handler

    def resource(self, path: str) -> Resource:
        """Create a resource for an absolute URL or a path under base_url."""
        return Resource(path, client=self)

    def xml_content(self, builder: Callable) -> str:
        """Materialize a builder callback into an XML string."""
        return build_xml(builder, xml_declaration=self.config.xml_declaration)

    def execute(
        self,
        method: str,
        url: httpx.URL,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
        content: str | bytes | None = None,
    ) -> RestResponse:
        """Send a request and run the failure handler for non-2xx responses."""
        config = self.config
        client = self._get_client()
        logger.debug(f"{method} {url}")

        try:
            response = client.request(
                method,
                url,
                headers=headers,
                params=params or None,
                content=content,
                timeout=httpx.Timeout(config.timeout),
                follow_redirects=config.follow_redirects,
            )
        except httpx.InvalidURL as e:
            raise InvalidURLError(str(url), str(e)) from e
        except httpx.TransportError as e:
            logger.debug(f"{method} {url} failed: {e}")
            raise TransportError(method, str(url), e) from e

        logger.debug(f"{method} {url} -> {response.status_code}")

        result = RestResponse(response, config)
        if config.failure_handler and not result.is_success:
            config.failure_handler(result)
        return result

    def get(self, url: str, headers=None, params=None) -> RestResponse:
        """GET an absolute URL or a path relative to base_url."""
        return self.resource(url).get(headers, params)

    def post(self, url: str, content="", headers=None, params=None) -> RestResponse:
        """POST text or builder content to an absolute URL or a relative path."""
        return self.resource(url).post(content, headers, params)

    def put(self, url: str, content="", headers=None, params=None) -> RestResponse:
        """PUT text or builder content to an absolute URL or a relative path."""
        return self.resource(url).put(content, headers, params)

    def delete(self, url: str, headers=None, params=None) -> RestResponse:
        """DELETE an absolute URL or a path relative to base_url."""
        return self.resource(url).delete(headers, params)


# Client backing the module-level functions
_default_client: RestClient | None = None


def get_default_client() -> RestClient:
    """Get the process-wide client, creating it on first use."""
    global _default_client
    if _default_client is None:
        _default_client = RestClient()
    return _default_client


def set_default_client(client: RestClient | None) -> None:
    """Replace the process-wide client. None closes it and starts over."""
    global _default_client
    if client is None and _default_client is not None:
        _default_client.close()
    _default_client = client
