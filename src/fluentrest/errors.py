"""
Exceptions raised by fluentrest.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from typing import Any


class RestError(Exception):
    """Base exception for fluentrest errors."""
    pass


class InvalidURLError(RestError):
    """URL could not be turned into an absolute request target."""

    def __init__(self, url: str, reason: str | None = None):
        self.url = url
        self.reason = reason
        message = f"Invalid URL: {url!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class TransportError(RestError):
    """Network, DNS, TLS or timeout failure reported by httpx."""

    def __init__(self, method: str, url: str, error: Exception):
        self.method = method
        self.url = url
        super().__init__(f"{method} {url} failed: {error}")


class UnexpectedStatusError(RestError):
    """Response status did not match the expected value."""

    def __init__(self, expected: int, actual: int, response: Any = None):
        self.expected = expected
        self.actual = actual
        self.response = response
        super().__init__(f"Expected {expected}, but response was {actual}: {response}")


class UnexpectedContentTypeError(RestError):
    """Response content type did not match the expected media type."""

    def __init__(self, expected: str, actual: str | None, response: Any = None):
        self.expected = expected
        self.actual = actual
        self.response = response
        super().__init__(f"Expected {expected}, but response was {actual}: {response}")


class MalformedXmlError(RestError):
    """Response body is not well-formed XML."""

    def __init__(self, response: Any, error: Exception):
        self.response = response
        super().__init__(f"Response body is not well-formed XML: {error}: {response}")


class InvalidMediaTypeError(RestError, ValueError):
    """String is not a ``type/subtype`` media type."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid media type: {value!r}")
