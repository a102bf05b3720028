"""Tests for configuration loading."""

import base64
import os

from fluentrest import RestConfig, get_config, set_config
import fluentrest.config as config_module


class TestRestConfig:
    """Defaults and environment loading."""

    def test_defaults(self):
        config = RestConfig()

        assert config.base_url is None
        assert config.default_headers == {}
        assert config.default_accept == "application/xml"
        assert config.xml_declaration is True
        assert config.failure_handler is None
        assert config.content_type_failure_handler is None

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("FLUENTREST_BASE_URL", "http://env.example.com")
        monkeypatch.setenv("FLUENTREST_ACCEPT", "application/json")
        monkeypatch.setenv("FLUENTREST_XML_DECLARATION", "false")
        monkeypatch.setenv("FLUENTREST_TIMEOUT", "5")
        monkeypatch.setenv("FLUENTREST_USER", "user")
        monkeypatch.setenv("FLUENTREST_PASSWORD", "pass")

        config = RestConfig.from_env()

        assert config.base_url == "http://env.example.com"
        assert config.default_accept == "application/json"
        assert config.xml_declaration is False
        assert config.timeout == 5.0
        token = base64.b64encode(b"user:pass").decode("ascii")
        assert config.default_headers == {"Authorization": f"Basic {token}"}

    def test_from_env_empty(self, monkeypatch):
        for name in ("FLUENTREST_BASE_URL", "FLUENTREST_ACCEPT", "FLUENTREST_USER",
                     "FLUENTREST_XML_DECLARATION", "FLUENTREST_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)

        config = RestConfig.from_env()

        assert config.base_url is None
        assert config.default_headers == {}
        assert config.xml_declaration is True


class TestGlobalConfig:
    """Process-wide configuration instance."""

    def test_set_and_get(self):
        config = RestConfig(base_url="http://set.example.com")
        set_config(config)
        assert get_config() is config

    def test_reset_reloads_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setattr(config_module, "ENV_LOCATIONS", [tmp_path / ".env"])
        (tmp_path / ".env").write_text("FLUENTREST_BASE_URL=http://dotenv.example.com\n")
        monkeypatch.delenv("FLUENTREST_BASE_URL", raising=False)

        set_config(None)
        try:
            assert get_config().base_url == "http://dotenv.example.com"
        finally:
            os.environ.pop("FLUENTREST_BASE_URL", None)
