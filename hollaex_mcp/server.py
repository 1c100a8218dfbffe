"""
MCP server.

Uses the official `mcp` Python SDK. ``tools/list`` serves the registry
catalog; ``tools/call`` runs ``ToolRegistry.invoke`` and answers with either a
``CallToolResult`` or a JSON-RPC error carrying the ``ToolError`` code.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from .registry import ToolRegistry

log = logging.getLogger("hollaex_mcp.server")

SERVER_NAME = "hollaex-trading-mcp"
SERVER_VERSION = "1.0.0"


def structured_content(payload: Any) -> dict[str, Any] | None:
  """MCP structured content must be an object; wrap anything else."""
  if payload is None:
    return None
  if isinstance(payload, Mapping):
    return dict(payload)
  return {"result": payload}


def create_mcp_server(registry: ToolRegistry) -> Server:
  """Create and configure the MCP server with all tool handlers."""
  server: Server = Server(SERVER_NAME, version=SERVER_VERSION)

  @server.list_tools()
  async def list_tools() -> list[types.Tool]:
    return registry.mcp_tools()

  async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
    result = await registry.invoke(req.params.name, req.params.arguments or {})
    if result.error is not None:
      raise McpError(
        types.ErrorData(
          code=result.error.code,
          message=result.error.message,
          data=result.error.data or None,
        )
      )
    return types.ServerResult(
      types.CallToolResult(
        content=[types.TextContent(type="text", text=result.content)],
        structuredContent=structured_content(result.structured),
        isError=False,
      )
    )

  # Raw handler: tool failures go out as JSON-RPC errors, not isError results.
  server.request_handlers[types.CallToolRequest] = call_tool

  return server


async def run_stdio(registry: ToolRegistry) -> None:
  """Serve the registry over stdin/stdout until the peer disconnects."""
  server = create_mcp_server(registry)
  async with stdio_server() as (read_stream, write_stream):
    log.info("HollaEx MCP server running on stdio.")
    await server.run(read_stream, write_stream, server.create_initialization_options())
