"""
Trading tools (orders, quick trade).
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr

from ..helpers import ErrorCategory
from ..tool_types import ToolDefinition

# ---------------------------------------------------------------------------
# Input schemas
# ---------------------------------------------------------------------------


class OrderMeta(BaseModel):
  model_config = ConfigDict(extra="allow")

  post_only: StrictBool | None = None
  note: StrictStr | None = None


class PlaceOrderInput(BaseModel):
  symbol: StrictStr = Field(description="Trading pair symbol, e.g. btc-usdt or eth-usdt")
  side: Literal["buy", "sell"] = Field(description="Order side")
  size: StrictFloat = Field(gt=0, description="Order size (base currency amount)")
  type: Literal["limit", "market"] = Field(description="Order type (must choose market or limit)")
  price: StrictFloat | None = Field(
    default=None,
    gt=0,
    description="Required for limit orders; ignored for market orders",
  )
  stop: StrictFloat | None = Field(default=None, gt=0, description="Optional stop price")
  meta: OrderMeta | None = Field(default=None, description="Optional meta configuration")


class OrderIdInput(BaseModel):
  orderId: StrictStr = Field(description="HollaEx Network order ID")


class CancelAllOrdersInput(BaseModel):
  symbol: StrictStr = Field(description="Trading pair symbol to cancel orders for, e.g. xht-usdt")


class GetOrdersInput(BaseModel):
  symbol: StrictStr | None = Field(default=None, description="Optional trading pair symbol, e.g. xht-usdt")
  side: Literal["buy", "sell"] | None = Field(default=None, description="Order side filter")
  status: StrictStr | None = Field(default=None, description="Order status filter")
  open: StrictBool | None = Field(default=None, description="Filter by open orders")
  limit: StrictInt | None = Field(default=None, gt=0, le=50, description="Orders per page (max 50)")
  page: StrictInt | None = Field(default=None, gt=0, description="Page number (default 1)")
  orderBy: StrictStr | None = Field(default=None, description="Field to order by")
  order: Literal["asc", "desc"] | None = Field(default=None, description="Sort direction")
  startDate: StrictStr | None = Field(default=None, description="ISO8601 start date filter")
  endDate: StrictStr | None = Field(default=None, description="ISO8601 end date filter")


class QuickTradeQuoteInput(BaseModel):
  spending_currency: StrictStr = Field(description="Currency symbol of the spending currency")
  receiving_currency: StrictStr = Field(description="Currency symbol of the receiving currency")
  spending_amount: StrictStr | StrictFloat | None = Field(
    default=None,
    description="Optional spending amount; provide this or receiving_amount",
  )
  receiving_amount: StrictStr | StrictFloat | None = Field(
    default=None,
    description="Optional receiving amount; provide this or spending_amount",
  )


class ExecuteOrderInput(BaseModel):
  token: StrictStr = Field(description="Order execution token")


# ---------------------------------------------------------------------------
# Output schemas
# ---------------------------------------------------------------------------


class FeeStructure(BaseModel):
  model_config = ConfigDict(extra="allow")

  maker: StrictFloat
  taker: StrictFloat


class OrderOutput(BaseModel):
  model_config = ConfigDict(extra="allow")

  id: StrictStr
  symbol: StrictStr
  side: StrictStr
  size: StrictFloat
  type: StrictStr
  price: StrictFloat | None = None
  status: StrictStr
  filled: StrictFloat
  average: StrictFloat | None = None
  fee: StrictFloat | None = None
  fee_coin: StrictStr | None = None
  created_at: StrictStr
  updated_at: StrictStr
  fee_structure: FeeStructure | None = None
  stop: StrictFloat | None = None
  meta: dict[str, Any] | None = None


class CancelOutput(BaseModel):
  model_config = ConfigDict(extra="allow")

  id: StrictStr | None = None
  order_id: StrictStr | None = None
  message: StrictStr | None = None
  status: StrictStr | None = None


# ---------------------------------------------------------------------------
# Tool catalog
# ---------------------------------------------------------------------------

trading_tools: list[ToolDefinition] = [
  ToolDefinition(
    name="placeOrder",
    title="Place Order",
    description="Place a user order on HollaEx. Set type to market (no price) or limit (requires price).",
    category=ErrorCategory.TRADING,
    input_model=PlaceOrderInput,
    output_model=OrderOutput,
  ),
  ToolDefinition(
    name="cancelOrder",
    title="Cancel Order",
    description="Cancel an existing order by order ID.",
    category=ErrorCategory.TRADING,
    input_model=OrderIdInput,
    output_model=CancelOutput,
  ),
  ToolDefinition(
    name="cancelAllOrders",
    title="Cancel All Orders",
    description="Cancel all active orders for a specific trading pair symbol.",
    category=ErrorCategory.TRADING,
    input_model=CancelAllOrdersInput,
  ),
  ToolDefinition(
    name="getOrder",
    title="Get Order",
    description="Retrieve a specific order by ID.",
    category=ErrorCategory.TRADING,
    input_model=OrderIdInput,
    output_model=OrderOutput,
  ),
  ToolDefinition(
    name="getOrders",
    title="Get Orders",
    description="Retrieve the list of user orders with optional filters (symbol, side, status).",
    category=ErrorCategory.TRADING,
    input_model=GetOrdersInput,
  ),
  ToolDefinition(
    name="getQuickTradeQuote",
    title="Get Quick Trade Quote",
    description="Get a quick trade quote between two currencies.",
    category=ErrorCategory.TRADING,
    input_model=QuickTradeQuoteInput,
  ),
  ToolDefinition(
    name="executeOrder",
    title="Execute Order",
    description="Execute a pre-created order using its token.",
    category=ErrorCategory.TRADING,
    input_model=ExecuteOrderInput,
  ),
]
