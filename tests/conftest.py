"""Shared fixtures: settings and a spy delegate standing in for HollaexClient."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest

from hollaex_mcp.config import Settings
from hollaex_mcp.registry import ToolRegistry

DELEGATE_METHODS = (
  "get_balance",
  "get_user",
  "get_user_trades",
  "create_order",
  "cancel_order",
  "cancel_all_orders",
  "get_order",
  "get_orders",
  "get_quick_trade_quote",
  "execute_order",
  "get_kit",
  "get_constants",
  "get_ticker",
  "get_tickers",
  "get_orderbook",
  "get_orderbooks",
  "get_trades",
  "get_mini_charts",
)


class FakeClient:
  """Records delegate calls; every method returns ``{}`` unless configured."""

  def __init__(self) -> None:
    self.closed = False
    for name in DELEGATE_METHODS:
      setattr(self, name, AsyncMock(return_value={}))

  async def __aenter__(self) -> FakeClient:
    return self

  async def __aexit__(self, *exc_info: Any) -> None:
    self.closed = True

  def awaited_methods(self) -> list[str]:
    return [name for name in DELEGATE_METHODS if getattr(self, name).await_count]


class FakeClientFactory:
  """Drop-in for ``make_client`` that counts constructions."""

  def __init__(self) -> None:
    self.client = FakeClient()
    self.calls = 0

  def __call__(self, settings: Settings) -> FakeClient:
    settings.require_credentials()
    self.calls += 1
    return self.client


@pytest.fixture
def settings() -> Settings:
  return Settings(api_key="test-key", api_secret="test-secret")


@pytest.fixture
def settings_without_credentials() -> Settings:
  return Settings()


@pytest.fixture
def fake_factory() -> FakeClientFactory:
  return FakeClientFactory()


@pytest.fixture
def fake_client(fake_factory: FakeClientFactory) -> FakeClient:
  return fake_factory.client


@pytest.fixture
def registry(settings: Settings, fake_factory: FakeClientFactory) -> ToolRegistry:
  return ToolRegistry(settings, client_factory=fake_factory)


@pytest.fixture
def order_payload() -> dict[str, Any]:
  return {
    "id": "123",
    "symbol": "btc-usdt",
    "side": "buy",
    "size": 1,
    "type": "limit",
    "price": 10000,
    "status": "new",
    "filled": 0,
    "created_at": "2024-01-01T00:00:00.000Z",
    "updated_at": "2024-01-01T00:00:00.000Z",
  }
