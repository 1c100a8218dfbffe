"""
Tool registry.

Binds the declared tool catalog to its handlers and is the single entry point
for running a tool: validate input, run the handler, validate output. Every
failure comes back as a ``ToolResult`` carrying a ``ToolError`` and is logged
once here, so individual handlers do not log their own errors.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from mcp.types import Tool

from .client import HollaexClient, make_client
from .config import Settings
from .handlers import HANDLERS
from .helpers import InternalError, ToolError, ToolNotFound, ToolResult, log_and_format_error
from .tool_types import Handler, HandlerContext, ToolDefinition
from .tools import ALL_TOOLS
from .validation import validate_input, validate_output

log = logging.getLogger("hollaex_mcp.registry")


class ToolRegistry:
  """The fixed tool catalog and its ``invoke`` entry point."""

  def __init__(
    self,
    settings: Settings,
    tools: Iterable[ToolDefinition] = ALL_TOOLS,
    handlers: Mapping[str, Handler] = HANDLERS,
    client_factory: Callable[[Settings], HollaexClient] = make_client,
  ) -> None:
    self._context = HandlerContext(settings=settings, client_factory=client_factory)
    self._tools: dict[str, ToolDefinition] = {}
    for tool in tools:
      if tool.name in self._tools:
        raise ValueError(f"Duplicate tool name: {tool.name}")
      handler = tool.handler or handlers.get(tool.name)
      if handler is None:
        raise ValueError(f"Tool has no handler: {tool.name}")
      self._tools[tool.name] = tool.model_copy(update={"handler": handler})
    log.debug("Registered %d tools", len(self._tools))

  @property
  def settings(self) -> Settings:
    return self._context.settings

  def __len__(self) -> int:
    return len(self._tools)

  def get(self, name: str) -> ToolDefinition | None:
    return self._tools.get(name)

  def list_tools(self) -> list[ToolDefinition]:
    return list(self._tools.values())

  def list_tool_names(self) -> list[str]:
    return list(self._tools)

  def mcp_tools(self) -> list[Tool]:
    """The catalog as MCP ``Tool`` objects. Needs no credentials."""
    return [tool.to_mcp_tool() for tool in self._tools.values()]

  async def invoke(self, name: str, params: Any = None) -> ToolResult:
    """Run tool ``name`` with ``params``; never raises for tool-level failures."""
    args = {} if params is None else params
    log_params = args if isinstance(args, Mapping) else None

    tool = self._tools.get(name)
    if tool is None:
      return log_and_format_error(name, ToolNotFound(f"Tool not found: {name}"), log_params)

    try:
      validated = validate_input(tool.input_model, args)
      result = await tool.handler(self._context, validated)
      validate_output(tool.output_model, result.structured)
      return result
    except ToolError as e:
      return log_and_format_error(name, e, log_params, tool.category)
    except Exception as e:
      error = InternalError(f"Error executing {name}: {e!s}")
      error.__cause__ = e
      return log_and_format_error(name, error, log_params, tool.category)
