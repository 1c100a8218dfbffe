"""
HollaEx trading tools over the Model Context Protocol.

Usage:
    from hollaex_mcp import Settings, ToolRegistry

    registry = ToolRegistry(Settings.from_env())
    result = await registry.invoke("getTicker", {"symbol": "btc-usdt"})
"""

from .config import Settings
from .helpers import (
  InternalError,
  InvalidInput,
  MissingCredentials,
  ToolError,
  ToolNotFound,
  ToolResult,
  UpstreamError,
)
from .registry import ToolRegistry

__version__ = "1.0.0"

__all__ = [
  "InternalError",
  "InvalidInput",
  "MissingCredentials",
  "Settings",
  "ToolError",
  "ToolNotFound",
  "ToolRegistry",
  "ToolResult",
  "UpstreamError",
]
