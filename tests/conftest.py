"""Shared fixtures for fluentrest tests."""

import logging

import httpx
import pytest

from fluentrest import RestClient, RestConfig, set_config, set_default_client


class Recorder:
    """Captures requests sent through an httpx.MockTransport."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status = 200
        self.headers = {"Content-Type": "application/xml"}
        self.body = b"<ok/>"

    def respond(self, status=200, body=b"", content_type=None, **headers):
        self.status = status
        self.body = body.encode("utf-8") if isinstance(body, str) else body
        self.headers = dict(headers)
        if content_type:
            self.headers["Content-Type"] = content_type

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status, headers=self.headers, content=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture(autouse=True)
def isolated_defaults():
    """Every test starts from a blank process-wide config and default client."""
    set_config(RestConfig())
    set_default_client(None)
    yield
    set_default_client(None)
    set_config(None)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def config():
    return RestConfig(base_url="http://api.example.com/v1")


@pytest.fixture
def client(config, recorder):
    rest = RestClient(config, transport=httpx.MockTransport(recorder))
    yield rest
    rest.close()


@pytest.fixture
def default_client(recorder):
    """Default client routed through the recorder, reading the global config."""
    rest = RestClient(transport=httpx.MockTransport(recorder))
    set_default_client(rest)
    return rest


@pytest.fixture
def package_logger():
    """Restore the fluentrest logger after a test reconfigures it."""
    logger = logging.getLogger("fluentrest")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
