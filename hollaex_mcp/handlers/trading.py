"""
Trading handlers (orders, quick trade).
"""

from __future__ import annotations

import logging
from typing import Any

from ..helpers import ToolResult
from ..tool_types import HandlerContext
from ..tools.trading import (
  CancelAllOrdersInput,
  ExecuteOrderInput,
  GetOrdersInput,
  OrderIdInput,
  PlaceOrderInput,
  QuickTradeQuoteInput,
)
from ..validation import require_field

log = logging.getLogger("hollaex_mcp.handlers.trading")


async def place_order(ctx: HandlerContext, params: PlaceOrderInput) -> ToolResult:
  """Place a market or limit order. Market orders are sent without a price."""
  log.info(
    "placeOrder called: %s %s %s %s %s",
    params.symbol,
    params.side,
    params.size,
    params.type,
    params.price if params.price is not None else "",
  )
  if params.type == "limit":
    require_field(params.price is not None, "price", "price is required for limit orders")

  opts: dict[str, Any] = {}
  if params.stop is not None:
    opts["stop"] = params.stop
  if params.meta is not None:
    opts["meta"] = params.meta.model_dump(exclude_none=True)

  async with ctx.client() as client:
    order = await client.create_order(
      params.symbol,
      params.side,
      params.size,
      params.type,
      params.price if params.type == "limit" else None,
      opts or None,
    )

  order_id = order.get("id") if isinstance(order, dict) else None
  log.info("placeOrder success id=%s", order_id)
  summary = f"Placed order {order_id}" if order_id is not None else "Placed order."
  return ToolResult(content=summary, structured=order)


async def cancel_order(ctx: HandlerContext, params: OrderIdInput) -> ToolResult:
  log.info("cancelOrder called: %s", params.orderId)
  async with ctx.client() as client:
    result = await client.cancel_order(params.orderId)
  log.info("cancelOrder success id=%s", params.orderId)
  return ToolResult(content=f"Canceled order {params.orderId}", structured=result)


async def cancel_all_orders(ctx: HandlerContext, params: CancelAllOrdersInput) -> ToolResult:
  log.info("cancelAllOrders called: %s", params.symbol)
  async with ctx.client() as client:
    result = await client.cancel_all_orders(params.symbol)
  log.info("cancelAllOrders success symbol=%s", params.symbol)
  return ToolResult(content=f"Canceled all orders for {params.symbol}.", structured=result)


async def get_order(ctx: HandlerContext, params: OrderIdInput) -> ToolResult:
  async with ctx.client() as client:
    order = await client.get_order(params.orderId)
  return ToolResult(content=f"Fetched order {params.orderId}.", structured=order)


async def get_orders(ctx: HandlerContext, params: GetOrdersInput) -> ToolResult:
  async with ctx.client() as client:
    orders = await client.get_orders(**params.model_dump(exclude_none=True))
  return ToolResult(content="Fetched orders.", structured=orders)


async def get_quick_trade_quote(ctx: HandlerContext, params: QuickTradeQuoteInput) -> ToolResult:
  async with ctx.client() as client:
    quote = await client.get_quick_trade_quote(
      params.spending_currency,
      params.receiving_currency,
      spending_amount=params.spending_amount,
      receiving_amount=params.receiving_amount,
    )
  return ToolResult(content="Fetched quick trade quote.", structured=quote)


async def execute_order(ctx: HandlerContext, params: ExecuteOrderInput) -> ToolResult:
  log.info("executeOrder called")
  async with ctx.client() as client:
    result = await client.execute_order(params.token)
  log.info("executeOrder success")
  return ToolResult(content="Executed order.", structured=result)
