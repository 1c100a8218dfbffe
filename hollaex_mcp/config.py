"""
Process-wide settings, read once from the environment at startup.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .helpers import MissingCredentials

DEFAULT_API_URL = "https://api.hollaex.com"
DEFAULT_WS_URL = "wss://api.hollaex.com/stream"
DEFAULT_API_EXPIRES_AFTER = 60
DEFAULT_HTTP_PORT = 3000


class Settings(BaseModel):
  """Immutable configuration shared by every invocation."""

  model_config = ConfigDict(frozen=True)

  api_url: str = Field(default=DEFAULT_API_URL, description="HollaEx REST base URL")
  ws_url: str = Field(default=DEFAULT_WS_URL, description="HollaEx streaming endpoint")
  api_key: str | None = None
  api_secret: str | None = Field(default=None, repr=False)
  api_expires_after: int = Field(default=DEFAULT_API_EXPIRES_AFTER, gt=0)
  transport: Literal["stdio", "http"] = "stdio"
  http_port: int = Field(default=DEFAULT_HTTP_PORT, ge=0, le=65535)

  @field_validator("api_key", "api_secret", mode="before")
  @classmethod
  def _blank_is_unset(cls, v: str | None) -> str | None:
    if isinstance(v, str) and not v.strip():
      return None
    return v

  @property
  def has_credentials(self) -> bool:
    return bool(self.api_key and self.api_secret)

  def require_credentials(self) -> tuple[str, str]:
    """Return (key, secret) or raise MissingCredentials."""
    if not self.api_key or not self.api_secret:
      raise MissingCredentials("Missing HOLLAEX_API_KEY or HOLLAEX_API_SECRET environment variables.")
    return self.api_key, self.api_secret

  @classmethod
  def from_env(
    cls,
    environ: Mapping[str, str] | None = None,
    http_flag: bool = False,
  ) -> Settings:
    """Build settings from environment variables.

    ``MCP_TRANSPORT`` wins over the ``--http`` flag (``http_flag``); the port is
    taken from ``MCP_HTTP_PORT`` then ``PORT``.
    """
    env = os.environ if environ is None else environ

    mode = env.get("MCP_TRANSPORT") or ("http" if http_flag else "stdio")
    port = env.get("MCP_HTTP_PORT") or env.get("PORT") or DEFAULT_HTTP_PORT

    return cls(
      api_url=env.get("HOLLAEX_API_URL") or DEFAULT_API_URL,
      ws_url=env.get("HOLLAEX_WS_URL") or DEFAULT_WS_URL,
      api_key=env.get("HOLLAEX_API_KEY"),
      api_secret=env.get("HOLLAEX_API_SECRET"),
      api_expires_after=env.get("HOLLAEX_API_EXPIRES_AFTER") or DEFAULT_API_EXPIRES_AFTER,
      transport="http" if mode == "http" else "stdio",
      http_port=port,
    )
