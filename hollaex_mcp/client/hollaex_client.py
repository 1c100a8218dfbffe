"""
HollaEx exchange client.

Thin async wrapper over ``ccxt.async_support.hollaex``: ccxt signs and sends
the requests, this class maps each tool onto a HollaEx v2 REST endpoint and
turns ccxt failures into ``UpstreamError``. One instance serves one tool
invocation; use it as an async context manager so the HTTP session is closed.
"""

from __future__ import annotations

import logging
from typing import Any

import ccxt.async_support as ccxt

from ..config import Settings
from ..helpers import UpstreamError

log = logging.getLogger("hollaex_mcp.client")

# Tool-side filter names -> HollaEx query parameter names.
FILTER_NAMES = {
  "orderBy": "order_by",
  "startDate": "start_date",
  "endDate": "end_date",
}


def _compact(params: dict[str, Any]) -> dict[str, Any]:
  """Drop unset values so they are not sent as empty query parameters."""
  return {k: v for k, v in params.items() if v is not None}


def to_query(filters: dict[str, Any]) -> dict[str, Any]:
  """Rename camelCase filters to the exchange's snake_case and drop unset ones."""
  return _compact({FILTER_NAMES.get(k, k): v for k, v in filters.items()})


class HollaexClient:
  """Per-invocation HollaEx client built from process settings."""

  def __init__(self, settings: Settings) -> None:
    api_key, api_secret = settings.require_credentials()
    self._exchange = ccxt.hollaex(
      {
        "apiKey": api_key,
        "secret": api_secret,
        "urls": {
          "api": {
            "rest": settings.api_url.rstrip("/"),
            "ws": settings.ws_url,
          },
        },
        "options": {"api-expires": settings.api_expires_after},
      }
    )

  async def __aenter__(self) -> HollaexClient:
    return self

  async def __aexit__(self, *exc_info: Any) -> None:
    await self.close()

  async def close(self) -> None:
    await self._exchange.close()

  async def _request(
    self,
    path: str,
    api: str = "public",
    method: str = "GET",
    params: dict[str, Any] | None = None,
  ) -> Any:
    try:
      return await self._exchange.request(path, api, method, _compact(params or {}))
    except ccxt.BaseError as e:
      log.debug("HollaEx %s %s failed: %s", method, path, e)
      raise UpstreamError(str(e) or type(e).__name__, data={"upstream": type(e).__name__}) from e

  # ------------------------------------------------------------------
  # Account
  # ------------------------------------------------------------------

  async def get_balance(self) -> Any:
    return await self._request("user/balance", "private")

  async def get_user(self) -> Any:
    return await self._request("user", "private")

  async def get_user_trades(self, **filters: Any) -> Any:
    return await self._request("user/trades", "private", params=to_query(filters))

  # ------------------------------------------------------------------
  # Orders
  # ------------------------------------------------------------------

  async def create_order(
    self,
    symbol: str,
    side: str,
    size: float,
    type: str,
    price: float | None = None,
    opts: dict[str, Any] | None = None,
  ) -> Any:
    body: dict[str, Any] = {
      "symbol": symbol,
      "side": side,
      "size": size,
      "type": type,
      "price": price,
    }
    if opts:
      body.update(opts)
    return await self._request("order", "private", "POST", body)

  async def cancel_order(self, order_id: str) -> Any:
    return await self._request("order", "private", "DELETE", {"order_id": order_id})

  async def cancel_all_orders(self, symbol: str) -> Any:
    return await self._request("order/all", "private", "DELETE", {"symbol": symbol})

  async def get_order(self, order_id: str) -> Any:
    return await self._request("order", "private", params={"order_id": order_id})

  async def get_orders(self, **filters: Any) -> Any:
    return await self._request("orders", "private", params=to_query(filters))

  async def get_quick_trade_quote(
    self,
    spending_currency: str,
    receiving_currency: str,
    spending_amount: str | float | None = None,
    receiving_amount: str | float | None = None,
  ) -> Any:
    return await self._request(
      "quick-trade",
      "private",
      params={
        "spending_currency": spending_currency,
        "receiving_currency": receiving_currency,
        "spending_amount": spending_amount,
        "receiving_amount": receiving_amount,
      },
    )

  async def execute_order(self, token: str) -> Any:
    return await self._request("order/execute", "private", "POST", {"token": token})

  # ------------------------------------------------------------------
  # Market data
  # ------------------------------------------------------------------

  async def get_kit(self) -> Any:
    return await self._request("kit")

  async def get_constants(self) -> Any:
    return await self._request("constants")

  async def get_ticker(self, symbol: str) -> Any:
    return await self._request("ticker", params={"symbol": symbol})

  async def get_tickers(self) -> Any:
    return await self._request("tickers")

  async def get_orderbook(self, symbol: str) -> Any:
    return await self._request("orderbook", params={"symbol": symbol})

  async def get_orderbooks(self) -> Any:
    return await self._request("orderbooks")

  async def get_trades(self, symbol: str | None = None) -> Any:
    return await self._request("trades", params={"symbol": symbol})

  async def get_mini_charts(
    self,
    assets: list[str],
    from_: str | None = None,
    to: str | None = None,
    quote: str | None = None,
  ) -> Any:
    return await self._request(
      "minicharts",
      params={"assets": ",".join(assets), "from": from_, "to": to, "quote": quote},
    )


def make_client(settings: Settings) -> HollaexClient:
  """Build a fresh client. Raises MissingCredentials before any network activity."""
  return HollaexClient(settings)
