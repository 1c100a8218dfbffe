"""
Unit tests for Settings.
"""

import pytest
from pydantic import ValidationError

from hollaex_mcp.config import (
  DEFAULT_API_EXPIRES_AFTER,
  DEFAULT_API_URL,
  DEFAULT_HTTP_PORT,
  DEFAULT_WS_URL,
  Settings,
)
from hollaex_mcp.helpers import MissingCredentials


def test_defaults_from_empty_environment():
  settings = Settings.from_env({})

  assert settings.api_url == DEFAULT_API_URL
  assert settings.ws_url == DEFAULT_WS_URL
  assert settings.api_expires_after == DEFAULT_API_EXPIRES_AFTER
  assert settings.transport == "stdio"
  assert settings.http_port == DEFAULT_HTTP_PORT
  assert not settings.has_credentials


def test_reads_hollaex_variables():
  settings = Settings.from_env(
    {
      "HOLLAEX_API_URL": "https://api.sandbox.hollaex.com",
      "HOLLAEX_WS_URL": "wss://api.sandbox.hollaex.com/stream",
      "HOLLAEX_API_KEY": "key",
      "HOLLAEX_API_SECRET": "secret",
      "HOLLAEX_API_EXPIRES_AFTER": "30",
    }
  )

  assert settings.api_url == "https://api.sandbox.hollaex.com"
  assert settings.ws_url == "wss://api.sandbox.hollaex.com/stream"
  assert settings.api_expires_after == 30
  assert settings.require_credentials() == ("key", "secret")


def test_secret_not_in_repr():
  settings = Settings(api_key="key", api_secret="hunter2")

  assert "hunter2" not in repr(settings)


@pytest.mark.parametrize(
  "env",
  [
    {},
    {"HOLLAEX_API_KEY": "key"},
    {"HOLLAEX_API_SECRET": "secret"},
    {"HOLLAEX_API_KEY": "  ", "HOLLAEX_API_SECRET": "secret"},
  ],
)
def test_missing_credentials(env):
  settings = Settings.from_env(env)

  assert settings.api_key is None or settings.api_secret is None
  with pytest.raises(MissingCredentials, match="HOLLAEX_API_SECRET"):
    settings.require_credentials()


def test_http_flag_selects_http():
  assert Settings.from_env({}, http_flag=True).transport == "http"


@pytest.mark.parametrize(
  "value,http_flag,expected",
  [
    ("http", False, "http"),
    ("stdio", True, "stdio"),
    ("carrier-pigeon", True, "stdio"),
  ],
)
def test_mcp_transport_wins_over_flag(value, http_flag, expected):
  settings = Settings.from_env({"MCP_TRANSPORT": value}, http_flag=http_flag)

  assert settings.transport == expected


def test_port_prefers_mcp_http_port():
  settings = Settings.from_env({"MCP_HTTP_PORT": "8080", "PORT": "9090"})

  assert settings.http_port == 8080


def test_port_falls_back_to_port():
  assert Settings.from_env({"PORT": "9090"}).http_port == 9090


def test_invalid_port_rejected():
  with pytest.raises(ValidationError):
    Settings.from_env({"MCP_HTTP_PORT": "not-a-port"})


def test_settings_are_frozen():
  settings = Settings()

  with pytest.raises(ValidationError):
    settings.api_key = "late"
