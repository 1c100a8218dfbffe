"""
Shared result type and error handling helpers.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

log = logging.getLogger("hollaex_mcp.helpers")

# Parameters worth echoing into the diagnostic log when a call fails.
LOGGED_PARAMS = ("symbol", "side", "size", "type", "price", "orderId")


# ---------------------------------------------------------------------------
# Error taxonomy
# ---------------------------------------------------------------------------


class ErrorCategory(str, Enum):
  ACCOUNT = "ACCOUNT"
  MARKET = "MARKET"
  TRADING = "TRADING"


class ToolError(Exception):
  """Base class for failures surfaced to the caller as a JSON-RPC error."""

  code = -32603

  def __init__(self, message: str, data: dict[str, Any] | None = None) -> None:
    self.message = message
    self.data = data or {}
    super().__init__(message)

  @property
  def kind(self) -> str:
    return type(self).__name__


class InvalidInput(ToolError):
  """Schema or cross-field validation failed. The delegate was never called."""

  code = -32602


class ToolNotFound(ToolError):
  code = -32601


class MissingCredentials(ToolError):
  code = -32001


class UpstreamError(ToolError):
  """The delegated exchange call failed or returned an unexpected payload."""

  code = -32002


class InternalError(ToolError):
  code = -32603


# ---------------------------------------------------------------------------
# Tool result
# ---------------------------------------------------------------------------


@dataclass
class ToolResult:
  content: str
  structured: Any = None
  error: ToolError | None = None

  @property
  def is_error(self) -> bool:
    return self.error is not None

  @classmethod
  def failure(cls, error: ToolError) -> ToolResult:
    return cls(content=error.message, error=error)


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------


def error_reference(function_name: str, category: str | ErrorCategory | None = None) -> str:
  prefix = category.value if isinstance(category, ErrorCategory) else (category or "GEN")
  hash_val = sum(ord(c) for c in function_name) % 1000
  return f"{prefix}-ERR-{hash_val:03d}"


def summarize_params(params: Mapping[str, Any] | None) -> str:
  if not params:
    return "-"
  parts = [f"{key}={params[key]}" for key in LOGGED_PARAMS if params.get(key) is not None]
  return " ".join(parts) or "-"


def log_and_format_error(
  tool_name: str,
  error: ToolError,
  params: Mapping[str, Any] | None = None,
  category: str | ErrorCategory | None = None,
) -> ToolResult:
  """Log a failed invocation and wrap it in a failure result."""
  ref = error_reference(tool_name, category)
  error.data.setdefault("type", error.kind)
  error.data.setdefault("ref", ref)

  if isinstance(error, InternalError):
    log.error(
      "[MCP] Error in %s - Code: %s - %s (%s)",
      tool_name,
      ref,
      error.message,
      summarize_params(params),
      exc_info=error.__cause__,
    )
  else:
    log.error(
      "[MCP] %s in %s - Code: %s - %s (%s)",
      error.kind,
      tool_name,
      ref,
      error.message,
      summarize_params(params),
    )

  return ToolResult.failure(error)
