"""Tests for the fluentrest CLI."""

import httpx
import pytest
from click.testing import CliRunner

from fluentrest import RestClient
from fluentrest import cli as cli_module
from fluentrest.cli import cli, parse_params


@pytest.fixture
def runner(monkeypatch, recorder):
    """CliRunner whose clients send through the recorder."""
    def make_client(config):
        return RestClient(config, transport=httpx.MockTransport(recorder))

    monkeypatch.setattr(cli_module, "RestClient", make_client)
    return CliRunner()


class TestParseParams:
    """Query parameter parsing."""

    def test_repeated_names_collect_lists(self):
        assert parse_params(["a=1", "b=2", "a=3", "a=4", "bad"]) == {"a": ["1", "3", "4"], "b": "2"}


class TestCommands:
    """Command invocation."""

    def test_get_prints_status_and_xml(self, runner, recorder):
        recorder.respond(200, '<users><user name="alice"/></users>', content_type="application/xml")

        result = runner.invoke(cli, ["get", "http://api.example.com/users", "-p", "q=term"])

        assert result.exit_code == 0
        assert "200 OK" in result.output
        assert "alice" in result.output
        assert recorder.last.url.params["q"] == "term"

    def test_base_url_and_headers(self, runner, recorder):
        result = runner.invoke(cli, [
            "request", "/users/1",
            "--base-url", "http://api.example.com/v1",
            "-X", "delete",
            "-H", "X-Trace: abc",
            "-u", "user:pass",
        ])

        assert result.exit_code == 0
        assert recorder.last.method == "DELETE"
        assert str(recorder.last.url) == "http://api.example.com/v1/users/1"
        assert recorder.last.headers["X-Trace"] == "abc"
        assert recorder.last.headers["Authorization"].startswith("Basic ")

    def test_post_body(self, runner, recorder):
        result = runner.invoke(cli, ["post", "http://api.example.com/users", "-d", "<user/>"])

        assert result.exit_code == 0
        assert recorder.last.method == "POST"
        assert recorder.last.content == b"<user/>"

    def test_json_body_pretty_printed(self, runner, recorder):
        recorder.respond(200, '{"id": 7}', content_type="application/json")

        result = runner.invoke(cli, ["get", "http://api.example.com/users/7", "--accept", "application/json"])

        assert result.exit_code == 0
        assert '"id": 7' in result.output
        assert recorder.last.headers["Accept"] == "application/json"

    def test_expect_status_failure_exits(self, runner, recorder):
        recorder.respond(404, "missing", content_type="text/plain")

        result = runner.invoke(cli, ["request", "http://api.example.com/x", "--expect-status", "200"])

        assert result.exit_code == 1
        assert "Expected 200" in result.output

    def test_expect_type(self, runner, recorder):
        recorder.respond(200, "<ok/>", content_type="text/xml")

        exact = runner.invoke(cli, ["request", "http://api.example.com/x", "--expect-type", "text/*"])
        compatible = runner.invoke(cli, ["request", "http://api.example.com/x",
                                         "--expect-type", "text/*", "--compatible"])

        assert exact.exit_code == 1
        assert compatible.exit_code == 0

    def test_invalid_url_exits(self, runner):
        result = runner.invoke(cli, ["get", "relative/path"])

        assert result.exit_code == 1
        assert "Invalid URL" in result.output

    def test_unsupported_method(self, runner):
        result = runner.invoke(cli, ["request", "http://api.example.com/x", "-X", "PATCH"])

        assert result.exit_code == 1
        assert "Unsupported method" in result.output


class TestLoggingOptions:
    """Group options that configure logging."""

    def test_log_file_records_requests(self, runner, recorder, tmp_path, package_logger):
        log_file = tmp_path / "logs" / "fluentrest.log"

        result = runner.invoke(cli, ["--log-file", str(log_file), "get", "http://api.example.com/users"])

        assert result.exit_code == 0
        text = log_file.read_text()
        assert "GET http://api.example.com/users -> 200" in text
        assert "| DEBUG" in text
        assert "-> 200" not in result.output

    def test_debug_dumps_exchange(self, runner, recorder, package_logger):
        recorder.respond(200, "<ok/>", content_type="application/xml")

        result = runner.invoke(cli, ["--debug", "get", "http://api.example.com/users"])

        assert result.exit_code == 0
        assert "> GET http://api.example.com/users" in result.output
        assert "< 200 OK" in result.output
