"""
Account handlers.
"""

from __future__ import annotations

from ..helpers import ToolResult
from ..tool_types import HandlerContext, NoArguments
from ..tools.account import UserTradesInput


async def get_user_balance(ctx: HandlerContext, params: NoArguments) -> ToolResult:
  async with ctx.client() as client:
    balances = await client.get_balance()
  return ToolResult(content="Fetched user balances.", structured=balances)


async def get_user(ctx: HandlerContext, params: NoArguments) -> ToolResult:
  async with ctx.client() as client:
    user = await client.get_user()
  return ToolResult(content="Fetched user profile.", structured=user)


async def get_user_trades(ctx: HandlerContext, params: UserTradesInput) -> ToolResult:
  """Fetch trade history; unset filters are not sent."""
  async with ctx.client() as client:
    trades = await client.get_user_trades(**params.model_dump(exclude_none=True))
  return ToolResult(content="Fetched user trades.", structured=trades)
