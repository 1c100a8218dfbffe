"""
HTTP transport.

FastAPI app serving MCP over streamable HTTP (stateless, JSON responses) on
``/mcp`` and ``/api/mcp``, plus liveness probes that never touch the registry.
Each POST gets its own transport session, torn down once the response is sent.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.types import Message, Receive, Scope, Send

from .registry import ToolRegistry
from .server import SERVER_NAME, SERVER_VERSION, create_mcp_server

log = logging.getLogger("hollaex_mcp.http")

MCP_PATHS = ("/mcp", "/api/mcp")
HEALTH_PATHS = ("/health", "/api/mcp/health")

INTERNAL_ERROR_BODY: dict[str, Any] = {
  "jsonrpc": "2.0",
  "error": {"code": -32603, "message": "Internal server error"},
  "id": None,
}


class McpEndpoint:
  """ASGI endpoint handing POSTs to the MCP session manager."""

  def __init__(self, session_manager: StreamableHTTPSessionManager) -> None:
    self._session_manager = session_manager

  async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
    started = False

    async def tracking_send(message: Message) -> None:
      nonlocal started
      if message["type"] == "http.response.start":
        started = True
      await send(message)

    try:
      await self._session_manager.handle_request(scope, receive, tracking_send)
    except Exception:
      log.exception("Error handling MCP request")
      if not started:
        response = JSONResponse(INTERNAL_ERROR_BODY, status_code=500)
        await response(scope, receive, send)


async def health() -> dict[str, Any]:
  return {"ok": True}


async def mcp_get_probe() -> dict[str, Any]:
  return {"ok": True, "message": "POST MCP requests here"}


async def mcp_options_probe() -> dict[str, Any]:
  return {"ok": True}


def create_http_app(registry: ToolRegistry) -> FastAPI:
  """Build the FastAPI app for the HTTP transport."""
  session_manager = StreamableHTTPSessionManager(
    app=create_mcp_server(registry),
    event_store=None,
    json_response=True,
    stateless=True,
  )

  @asynccontextmanager
  async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    async with session_manager.run():
      log.info("MCP HTTP transport ready with %d tools", len(registry))
      yield
    log.info("MCP HTTP transport shutting down")

  app = FastAPI(title=SERVER_NAME, version=SERVER_VERSION, lifespan=lifespan)

  endpoint = McpEndpoint(session_manager)
  for path in MCP_PATHS:
    app.add_route(path, endpoint, methods=["POST"], include_in_schema=False)
    app.add_api_route(path, mcp_get_probe, methods=["GET"], include_in_schema=False)
    app.add_api_route(path, mcp_options_probe, methods=["OPTIONS"], include_in_schema=False)

  for path in HEALTH_PATHS:
    app.add_api_route(path, health, methods=["GET"])

  return app


async def run_http(registry: ToolRegistry, port: int, host: str = "0.0.0.0") -> None:
  """Serve the HTTP transport until shutdown. Raises if the port cannot be bound."""
  app = create_http_app(registry)
  config = uvicorn.Config(app, host=host, port=port, log_config=None)
  server = uvicorn.Server(config)
  log.info("HollaEx MCP HTTP server listening on :%d/mcp", port)
  await server.serve()
  if not server.started:
    raise OSError(f"Failed to start HTTP MCP server on :{port}")
