"""
Tool name -> handler table.
"""

from __future__ import annotations

from ..tool_types import Handler
from .account import get_user, get_user_balance, get_user_trades
from .market import (
  get_constants,
  get_kit,
  get_mini_charts,
  get_orderbook,
  get_orderbooks,
  get_ticker,
  get_tickers,
  get_trades,
)
from .trading import (
  cancel_all_orders,
  cancel_order,
  execute_order,
  get_order,
  get_orders,
  get_quick_trade_quote,
  place_order,
)

HANDLERS: dict[str, Handler] = {
  # Account
  "getUserBalance": get_user_balance,
  "getBalance": get_user_balance,
  "getUser": get_user,
  "getUserTrades": get_user_trades,
  # Trading
  "placeOrder": place_order,
  "cancelOrder": cancel_order,
  "cancelAllOrders": cancel_all_orders,
  "getOrder": get_order,
  "getOrders": get_orders,
  "getQuickTradeQuote": get_quick_trade_quote,
  "executeOrder": execute_order,
  # Market
  "getKit": get_kit,
  "getConstants": get_constants,
  "getTicker": get_ticker,
  "getTickers": get_tickers,
  "getOrderbook": get_orderbook,
  "getOrderbooks": get_orderbooks,
  "getTrades": get_trades,
  "getMiniCharts": get_mini_charts,
}
