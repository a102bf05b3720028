"""
fluentrest - Fluent REST helpers over httpx

Static and resource-based helpers for GET/POST/PUT/DELETE requests,
declarative XML request bodies, and response content type and status
checks with pluggable failure handlers.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "0.1.0"
__author__ = "DNS Science.io"
__copyright__ = "Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company"

from fluentrest.api import (
    DELETE,
    GET,
    POST,
    PUT,
    configure,
    create,
    debug,
    delete,
    get,
    post,
    put,
)
from fluentrest.client import RestClient, get_default_client, set_default_client
from fluentrest.config import RestConfig, get_config, set_config
from fluentrest.errors import (
    InvalidMediaTypeError,
    InvalidURLError,
    MalformedXmlError,
    RestError,
    TransportError,
    UnexpectedContentTypeError,
    UnexpectedStatusError,
)
from fluentrest.headers import basic_auth_header, bearer_auth_header
from fluentrest.markup import MarkupBuilder, build_xml
from fluentrest.media import MediaType
from fluentrest.resource import Resource
from fluentrest.response import RestResponse

__all__ = [
    "GET",
    "POST",
    "PUT",
    "DELETE",
    "get",
    "post",
    "put",
    "delete",
    "configure",
    "create",
    "debug",
    "RestClient",
    "get_default_client",
    "set_default_client",
    "RestConfig",
    "get_config",
    "set_config",
    "RestError",
    "InvalidMediaTypeError",
    "InvalidURLError",
    "TransportError",
    "UnexpectedStatusError",
    "UnexpectedContentTypeError",
    "MalformedXmlError",
    "basic_auth_header",
    "bearer_auth_header",
    "MarkupBuilder",
    "build_xml",
    "MediaType",
    "Resource",
    "RestResponse",
]
