"""
Account tools (balance, profile, trade history).
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

from ..helpers import ErrorCategory
from ..tool_types import NoArguments, ToolDefinition


class UserTradesInput(BaseModel):
  symbol: StrictStr | None = Field(default=None, description="Optional trading pair symbol, e.g. xht-usdt")
  limit: StrictInt | None = Field(default=None, gt=0, le=50, description="Trades per page (max 50)")
  page: StrictInt | None = Field(default=None, gt=0, description="Page number (default 1)")
  orderBy: StrictStr | None = Field(default=None, description="Field to order by")
  order: Literal["asc", "desc"] | None = Field(default=None, description="Sort direction")
  startDate: StrictStr | None = Field(default=None, description="ISO8601 start date filter")
  endDate: StrictStr | None = Field(default=None, description="ISO8601 end date filter")
  format: Literal["all", "csv"] | None = Field(default=None, description="Response format")


class BalanceOutput(BaseModel):
  """``user_id`` plus one numeric field per balance entry (e.g. ``btc_available``)."""

  model_config = ConfigDict(extra="allow")

  __pydantic_extra__: dict[str, StrictFloat]

  user_id: StrictInt | None = None


def _balance_tool(name: str) -> ToolDefinition:
  return ToolDefinition(
    name=name,
    title="Get User Balance",
    description="Return the authenticated user balances from HollaEx.",
    category=ErrorCategory.ACCOUNT,
    input_model=NoArguments,
    output_model=BalanceOutput,
  )


account_tools: list[ToolDefinition] = [
  _balance_tool("getUserBalance"),
  _balance_tool("getBalance"),
  ToolDefinition(
    name="getUser",
    title="Get User",
    description="Retrieve the authenticated user's profile information.",
    category=ErrorCategory.ACCOUNT,
    input_model=NoArguments,
  ),
  ToolDefinition(
    name="getUserTrades",
    title="Get User Trades",
    description="Retrieve the user's trade history.",
    category=ErrorCategory.ACCOUNT,
    input_model=UserTradesInput,
  ),
]
