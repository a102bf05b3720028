"""
Resources: URL handles that issue GET/POST/PUT/DELETE requests.

    rest = Resource("http://host/path")
    response = rest.post("content", {"X-Header": "value"}, {"query": "value"})
    response = rest.get({"X-Header": "value"}, {"query": "value"})

    # derive a resource for a sub path
    users = rest + "/users"
    response = (rest / "users").get().require_content_type("application/xml")

    # GET / PUT a sub path directly
    doc = rest["/users/1"].xml
    rest.put_at("/users/1", lambda xml: xml.user(name="bob"))

    # POST builder content
    response = rest << (lambda xml: xml.user(name="alice"))

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import re
from typing import TYPE_CHECKING, Any, Callable, Mapping, Union

import httpx

from fluentrest.errors import InvalidURLError
from fluentrest.headers import merge_headers
from fluentrest.media import MediaType
from fluentrest.response import RestResponse

if TYPE_CHECKING:
    from fluentrest.client import RestClient


SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*://")

Content = Union[str, bytes, Callable[..., Any], None]


def is_absolute_url(path: str) -> bool:
    """True when the path starts with a URL scheme (``scheme://``)."""
    return bool(SCHEME_PATTERN.match(path))


def parse_url(value: str) -> httpx.URL:
    """Parse an absolute URL, raising InvalidURLError for anything else."""
    try:
        url = httpx.URL(value)
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidURLError(str(value), str(e)) from e

    if not url.scheme or not url.host:
        raise InvalidURLError(value, "not an absolute URL")
    return url


def join_path(url: httpx.URL, path: str) -> httpx.URL:
    """Append a path to a URL with exactly one slash between them."""
    if not path:
        return url
    joined = url.path.rstrip("/") + "/" + path.lstrip("/")
    try:
        return url.copy_with(path=joined)
    except httpx.InvalidURL as e:
        raise InvalidURLError(f"{url}{path}", str(e)) from e


class Resource:
    """Handle to a request target.

    A string path is resolved against the configured base_url unless it is an
    absolute URL. Sub path derivation returns a new Resource that keeps the
    headers and accept value of its parent.
    """

    def __init__(
        self,
        path: str | httpx.URL,
        client: "RestClient | None" = None,
        headers: Mapping[str, str] | None = None,
        accept: str | MediaType | None = None,
    ):
        if client is None:
            from fluentrest.client import get_default_client
            client = get_default_client()

        self.client = client
        self.headers = dict(headers or {})
        self.accept = accept

        if isinstance(path, httpx.URL):
            self.url = path
        else:
            base_url = client.config.base_url
            if base_url and not is_absolute_url(path):
                self.url = join_path(parse_url(base_url), path)
            else:
                self.url = parse_url(path)

    def __str__(self) -> str:
        return str(self.url)

    def __repr__(self) -> str:
        return f"Resource({str(self.url)!r})"

    def _derive(self, url: httpx.URL, **overrides) -> "Resource":
        kwargs = {"client": self.client, "headers": self.headers, "accept": self.accept}
        kwargs.update(overrides)
        return Resource(url, **kwargs)

    def sub_path(self, path: str) -> "Resource":
        """New resource with the path appended to this one's URL."""
        return self._derive(join_path(self.url, path))

    __add__ = sub_path
    __truediv__ = sub_path

    def with_headers(self, headers: Mapping[str, str]) -> "Resource":
        """New resource sending these headers in addition to the current ones."""
        return self._derive(self.url, headers={**self.headers, **headers})

    def with_accept(self, accept: str | MediaType) -> "Resource":
        """New resource with a different Accept value."""
        return self._derive(self.url, accept=accept)

    def get_at(self, path: str) -> RestResponse:
        """GET a sub path."""
        return self.sub_path(path).get()

    __getitem__ = get_at

    def put_at(self, path: str, content: Content) -> RestResponse:
        """PUT content to a sub path."""
        return self.sub_path(path).put(content)

    def __setitem__(self, path: str, content: Content) -> None:
        self.put_at(path, content)

    def post_builder(self, builder: Callable[..., Any]) -> RestResponse:
        """POST XML produced by a builder callback."""
        return self.post(builder)

    __lshift__ = post_builder

    def get(self, headers=None, params=None) -> RestResponse:
        """
        GET request for this URL.

        Args:
            headers: request header map
            params: query parameter map; list values repeat the key
        """
        return self._request("GET", None, headers, params)

    def post(self, content: Content = "", headers=None, params=None) -> RestResponse:
        """
        POST request to this URL.

        Args:
            content: text content, or a builder callback for XML content
            headers: request header map
            params: query parameter map; list values repeat the key
        """
        return self._request("POST", content, headers, params)

    def put(self, content: Content = "", headers=None, params=None) -> RestResponse:
        """
        PUT request to this URL.

        Args:
            content: text content, or a builder callback for XML content
            headers: request header map
            params: query parameter map; list values repeat the key
        """
        return self._request("PUT", content, headers, params)

    def delete(self, headers=None, params=None) -> RestResponse:
        """
        DELETE request for this URL.

        Args:
            headers: request header map
            params: query parameter map; list values repeat the key
        """
        return self._request("DELETE", None, headers, params)

    def build_headers(self, headers: Mapping[str, str] | None = None) -> httpx.Headers:
        """Default headers, then resource headers, then call headers, then Accept."""
        config = self.client.config
        merged = merge_headers(config.default_headers, self.headers, headers)
        merged["Accept"] = str(self.accept if self.accept is not None else config.default_accept)
        return merged

    def _request(self, method: str, content: Content, headers, params) -> RestResponse:
        final_headers = self.build_headers(headers)

        if callable(content):
            content = self.client.xml_content(content)
            if "content-type" not in final_headers:
                final_headers["Content-Type"] = "application/xml; charset=UTF-8"

        return self.client.execute(
            method,
            self.url,
            headers=final_headers,
            params=params,
            content=content,
        )
