"""
Market data handlers.
"""

from __future__ import annotations

from ..helpers import ToolResult
from ..tool_types import HandlerContext, NoArguments
from ..tools.market import MiniChartsInput, SymbolInput, TradesInput


async def get_kit(ctx: HandlerContext, params: NoArguments) -> ToolResult:
  async with ctx.client() as client:
    kit = await client.get_kit()
  return ToolResult(content="Fetched kit information.", structured=kit)


async def get_constants(ctx: HandlerContext, params: NoArguments) -> ToolResult:
  async with ctx.client() as client:
    constants = await client.get_constants()
  return ToolResult(content="Fetched constants.", structured=constants)


async def get_ticker(ctx: HandlerContext, params: SymbolInput) -> ToolResult:
  async with ctx.client() as client:
    ticker = await client.get_ticker(params.symbol)
  return ToolResult(content=f"Fetched ticker for {params.symbol}.", structured=ticker)


async def get_tickers(ctx: HandlerContext, params: NoArguments) -> ToolResult:
  async with ctx.client() as client:
    tickers = await client.get_tickers()
  return ToolResult(content="Fetched tickers for all symbols.", structured=tickers)


async def get_orderbook(ctx: HandlerContext, params: SymbolInput) -> ToolResult:
  async with ctx.client() as client:
    orderbook = await client.get_orderbook(params.symbol)
  return ToolResult(content=f"Fetched orderbook for {params.symbol}.", structured=orderbook)


async def get_orderbooks(ctx: HandlerContext, params: NoArguments) -> ToolResult:
  async with ctx.client() as client:
    orderbooks = await client.get_orderbooks()
  return ToolResult(content="Fetched orderbooks.", structured=orderbooks)


async def get_trades(ctx: HandlerContext, params: TradesInput) -> ToolResult:
  async with ctx.client() as client:
    trades = await client.get_trades(params.symbol)
  suffix = f" for {params.symbol}" if params.symbol else ""
  return ToolResult(content=f"Fetched recent trades{suffix}.", structured=trades)


async def get_mini_charts(ctx: HandlerContext, params: MiniChartsInput) -> ToolResult:
  async with ctx.client() as client:
    charts = await client.get_mini_charts(
      params.assets,
      from_=params.from_,
      to=params.to,
      quote=params.quote,
    )
  return ToolResult(content="Fetched mini charts.", structured=charts)
