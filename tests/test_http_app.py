"""
Tests for the HTTP transport: probes and MCP over streamable HTTP.
"""

import asyncio
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager

from hollaex_mcp.http_app import HEALTH_PATHS, INTERNAL_ERROR_BODY, MCP_PATHS, create_http_app
from hollaex_mcp.registry import ToolRegistry

MCP_HEADERS = {
  "Accept": "application/json, text/event-stream",
  "Content-Type": "application/json",
}


@pytest.fixture
def http_client(settings_without_credentials):
  app = create_http_app(ToolRegistry(settings_without_credentials))
  with TestClient(app) as client:
    yield client


@pytest.mark.parametrize("path", HEALTH_PATHS)
def test_health(http_client, path):
  response = http_client.get(path)

  assert response.status_code == 200
  assert response.json() == {"ok": True}


@pytest.mark.parametrize("path", MCP_PATHS)
def test_get_probe(http_client, path):
  response = http_client.get(path)

  assert response.status_code == 200
  body = response.json()
  assert body["ok"] is True
  assert body["message"]


@pytest.mark.parametrize("path", MCP_PATHS)
def test_options_probe(http_client, path):
  response = http_client.options(path)

  assert response.status_code == 200
  assert response.json() == {"ok": True}


@pytest.mark.parametrize("path", MCP_PATHS)
def test_tools_list_over_http(http_client, path):
  response = http_client.post(
    path,
    json={"jsonrpc": "2.0", "id": 1, "method": "tools/list", "params": {}},
    headers=MCP_HEADERS,
  )

  assert response.status_code == 200
  body = response.json()
  assert body["id"] == 1
  names = {tool["name"] for tool in body["result"]["tools"]}
  assert "placeOrder" in names
  assert len(names) == 19


def test_tools_call_reports_missing_credentials(http_client):
  response = http_client.post(
    "/mcp",
    json={
      "jsonrpc": "2.0",
      "id": 2,
      "method": "tools/call",
      "params": {"name": "getUserBalance", "arguments": {}},
    },
    headers=MCP_HEADERS,
  )

  body = response.json()
  assert body["id"] == 2
  assert body["error"]["code"] == -32001
  assert "HOLLAEX_API_KEY" in body["error"]["message"]


def test_consecutive_requests_are_independent(http_client):
  for request_id in (10, 11):
    response = http_client.post(
      "/api/mcp",
      json={"jsonrpc": "2.0", "id": request_id, "method": "tools/list"},
      headers=MCP_HEADERS,
    )
    assert response.json()["id"] == request_id


def test_malformed_body_never_reaches_registry(settings, fake_factory):
  app = create_http_app(ToolRegistry(settings, client_factory=fake_factory))

  with TestClient(app) as client:
    response = client.post("/mcp", content=b"{not json", headers=MCP_HEADERS)

  assert response.status_code == 400
  assert response.json()["error"]["code"] == -32700
  assert fake_factory.calls == 0


def test_transport_failure_returns_internal_error(settings_without_credentials, monkeypatch):
  monkeypatch.setattr(
    StreamableHTTPSessionManager,
    "handle_request",
    AsyncMock(side_effect=RuntimeError("transport exploded")),
  )
  app = create_http_app(ToolRegistry(settings_without_credentials))

  with TestClient(app) as client:
    response = client.post(
      "/mcp",
      json={"jsonrpc": "2.0", "id": 3, "method": "tools/list"},
      headers=MCP_HEADERS,
    )

  assert response.status_code == 500
  assert response.json() == INTERNAL_ERROR_BODY


@pytest.mark.asyncio
async def test_health_answers_while_a_call_fails(settings_without_credentials):
  app = create_http_app(ToolRegistry(settings_without_credentials))
  call = {
    "jsonrpc": "2.0",
    "id": 4,
    "method": "tools/call",
    "params": {"name": "getKit", "arguments": {}},
  }

  async with app.router.lifespan_context(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
      failing, health, api_health = await asyncio.gather(
        client.post("/mcp", json=call, headers=MCP_HEADERS),
        client.get("/health"),
        client.get("/api/mcp/health"),
      )

  assert failing.json()["error"]["code"] == -32001
  for response in (health, api_health):
    assert response.status_code == 200
    assert response.json() == {"ok": True}
