"""
HollaEx tool definitions organized by domain.
"""

from __future__ import annotations

from ..tool_types import ToolDefinition
from .account import account_tools
from .market import market_tools
from .trading import trading_tools

ALL_TOOLS: list[ToolDefinition] = [
  *account_tools,
  *trading_tools,
  *market_tools,
]
