"""
Response wrapper with content type and status assertions.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import xml.etree.ElementTree as ET
from typing import Any

import httpx

from fluentrest.config import RestConfig, get_config
from fluentrest.errors import (
    InvalidMediaTypeError,
    MalformedXmlError,
    UnexpectedContentTypeError,
    UnexpectedStatusError,
)
from fluentrest.media import MediaType


class RestResponse:
    """Read-only view over an httpx.Response.

    The require_* methods return the response itself so checks can be
    chained::

        doc = rest.get().require_status(200).require_content_type("application/xml").xml
    """

    def __init__(self, response: httpx.Response, config: RestConfig | None = None):
        self.raw = response
        self.config = config or get_config()

    def __repr__(self) -> str:
        return f"<RestResponse [{self.status} {self.reason}] {self.method} {self.url}>"

    __str__ = __repr__

    @property
    def status(self) -> int:
        return self.raw.status_code

    @property
    def status_code(self) -> int:
        return self.raw.status_code

    @property
    def reason(self) -> str:
        return self.raw.reason_phrase

    @property
    def method(self) -> str:
        return self.raw.request.method if self._has_request else ""

    @property
    def url(self) -> str:
        return str(self.raw.request.url) if self._has_request else ""

    @property
    def _has_request(self) -> bool:
        try:
            self.raw.request
        except RuntimeError:
            return False
        return True

    @property
    def headers(self) -> httpx.Headers:
        return self.raw.headers

    @property
    def content(self) -> bytes:
        return self.raw.content

    @property
    def content_type(self) -> MediaType | None:
        """Parsed Content-Type header, or None when absent or unparseable."""
        value = self.raw.headers.get("content-type")
        if not value:
            return None
        try:
            return MediaType.parse(value)
        except InvalidMediaTypeError:
            return None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        """Body decoded with the declared charset (httpx falls back to UTF-8)."""
        return self.raw.text

    @property
    def xml(self) -> ET.Element:
        """Body parsed into an ElementTree element.

        httpx buffers the body, so it is read from the wire once and every
        access parses the buffered bytes again.
        """
        try:
            return ET.fromstring(self.raw.content)
        except ET.ParseError as e:
            raise MalformedXmlError(self, e) from e

    def json(self) -> Any:
        return self.raw.json()

    def has_content_type(self, media_type: "str | MediaType") -> bool:
        """Exact type/subtype match; parameters are ignored.

        Raises InvalidMediaTypeError when ``media_type`` is malformed, whether
        or not the response declares a content type.
        """
        expected = MediaType.parse(media_type)
        actual = self.content_type
        return actual is not None and actual == expected

    def has_compatible_type(self, media_type: "str | MediaType") -> bool:
        """Match honouring type/* and */* wildcards.

        Raises InvalidMediaTypeError when ``media_type`` is malformed.
        """
        expected = MediaType.parse(media_type)
        actual = self.content_type
        return actual is not None and actual.is_compatible(expected)

    def require_content_type(self, media_type: "str | MediaType") -> "RestResponse":
        if not self.has_content_type(media_type):
            self._content_type_failed(media_type)
        return self

    def require_compatible_type(self, media_type: "str | MediaType") -> "RestResponse":
        if not self.has_compatible_type(media_type):
            self._content_type_failed(media_type)
        return self

    def require_status(self, status: int) -> "RestResponse":
        if self.status != status:
            if self.config.failure_handler:
                self.config.failure_handler(self)
            else:
                raise UnexpectedStatusError(status, self.status, self)
        return self

    def _content_type_failed(self, media_type: "str | MediaType") -> None:
        handler = self.config.content_type_failure_handler
        if handler:
            handler(str(media_type), self)
        else:
            actual = self.content_type
            raise UnexpectedContentTypeError(
                str(media_type), str(actual) if actual else None, self
            )
