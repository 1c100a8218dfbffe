"""
Market data tools.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictStr

from ..helpers import ErrorCategory
from ..tool_types import NoArguments, ToolDefinition


class SymbolInput(BaseModel):
  symbol: StrictStr = Field(description="Trading pair symbol, e.g. xht-usdt or btc-usdt")


class TradesInput(BaseModel):
  symbol: StrictStr | None = Field(default=None, description="Optional trading pair symbol, e.g. xht-usdt")


class MiniChartsInput(BaseModel):
  assets: list[StrictStr] = Field(
    min_length=1,
    description='List of asset symbols to fetch, e.g. ["xht", "btc"]',
  )
  # sent on the wire as "from"
  from_: StrictStr | None = Field(default=None, alias="from", description="ISO8601 start date")
  to: StrictStr | None = Field(default=None, description="ISO8601 end date")
  quote: StrictStr | None = Field(default=None, description="Optional quote asset to price against")


market_tools: list[ToolDefinition] = [
  ToolDefinition(
    name="getKit",
    title="Get Kit",
    description="Get exchange information (name, languages, description).",
    category=ErrorCategory.MARKET,
    input_model=NoArguments,
  ),
  ToolDefinition(
    name="getConstants",
    title="Get Constants",
    description="Retrieve tick size, min/max price, min/max size of each symbol pair and coin.",
    category=ErrorCategory.MARKET,
    input_model=NoArguments,
  ),
  ToolDefinition(
    name="getTicker",
    title="Get Ticker",
    description="Retrieve 24h ticker data for a specific symbol.",
    category=ErrorCategory.MARKET,
    input_model=SymbolInput,
  ),
  ToolDefinition(
    name="getTickers",
    title="Get Tickers",
    description="Retrieve 24h ticker data for all symbols.",
    category=ErrorCategory.MARKET,
    input_model=NoArguments,
  ),
  ToolDefinition(
    name="getOrderbook",
    title="Get Orderbook",
    description="Retrieve orderbook for a symbol.",
    category=ErrorCategory.MARKET,
    input_model=SymbolInput,
  ),
  ToolDefinition(
    name="getOrderbooks",
    title="Get Orderbooks",
    description="Retrieve orderbooks for all symbols.",
    category=ErrorCategory.MARKET,
    input_model=NoArguments,
  ),
  ToolDefinition(
    name="getTrades",
    title="Get Trades",
    description="Retrieve recent trades; optionally filter by symbol.",
    category=ErrorCategory.MARKET,
    input_model=TradesInput,
  ),
  ToolDefinition(
    name="getMiniCharts",
    title="Get Mini Charts",
    description="Get trade history HOLCV for provided assets.",
    category=ErrorCategory.MARKET,
    input_model=MiniChartsInput,
  ),
]
