"""
Module-level request functions backed by the default client.

    import fluentrest
    from fluentrest import GET, POST

    fluentrest.configure(
        base_url="http://host/path",
        default_headers=fluentrest.basic_auth_header(user, password),
        failure_handler=lambda response: die(f"Request failed: {response}"),
    )

    response = GET("/subpath")
    response = POST("/subpath", "content")

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
from typing import Any, TextIO

from fluentrest.client import get_default_client
from fluentrest.config import RestConfig, get_config
from fluentrest.resource import Content, Resource
from fluentrest.response import RestResponse


def configure(**settings: Any) -> RestConfig:
    """Update fields of the process-wide configuration and return it."""
    config = get_config()
    for name, value in settings.items():
        if not hasattr(config, name):
            raise AttributeError(f"Unknown setting: {name}")
        setattr(config, name, value)
    return config


def create(path: str) -> Resource:
    """Create a resource on the default client."""
    return Resource(path, client=get_default_client())


def debug(stream: TextIO | None = None) -> logging.Handler:
    """Print debug output for all requests/responses to the given stream."""
    return get_default_client().debug(stream)


def get(url: str, headers=None, params=None) -> RestResponse:
    """
    GET request to the given relative or absolute URL.

    Args:
        url: relative to the base_url, or an absolute URL
        headers: request header map
        params: request params map
    """
    return create(url).get(headers, params)


def post(url: str, content: Content = "", headers=None, params=None) -> RestResponse:
    """
    POST request to the given relative or absolute URL.

    Args:
        url: relative to the base_url, or an absolute URL
        content: any text content, or a builder callback for XML content
        headers: request header map
        params: request params map
    """
    return create(url).post(content, headers, params)


def put(url: str, content: Content = "", headers=None, params=None) -> RestResponse:
    """
    PUT request to the given relative or absolute URL.

    Args:
        url: relative to the base_url, or an absolute URL
        content: any text content, or a builder callback for XML content
        headers: request header map
        params: request params map
    """
    return create(url).put(content, headers, params)


def delete(url: str, headers=None, params=None) -> RestResponse:
    """
    DELETE request to the given relative or absolute URL.

    Args:
        url: relative to the base_url, or an absolute URL
        headers: request header map
        params: request params map
    """
    return create(url).delete(headers, params)


GET = get
POST = post
PUT = put
DELETE = delete
