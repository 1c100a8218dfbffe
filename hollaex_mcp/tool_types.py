"""
Tool definition types shared by the tool catalog and the registry.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mcp.types import Tool
from pydantic import BaseModel, ConfigDict, Field

from .helpers import ErrorCategory, ToolResult

if TYPE_CHECKING:
  from .client import HollaexClient
  from .config import Settings


@dataclass(frozen=True)
class HandlerContext:
  """What a handler gets besides its arguments: settings and a way to build its delegate."""

  settings: Settings
  client_factory: Callable[[Settings], HollaexClient]

  def client(self) -> HollaexClient:
    """Build the per-call delegate. Raises MissingCredentials when unconfigured."""
    return self.client_factory(self.settings)


Handler = Callable[[HandlerContext, Any], Awaitable[ToolResult]]


class ToolDefinition(BaseModel):
  """A named tool: schemas, metadata and (once bound) its handler."""

  model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

  name: str = Field(description="Tool name, unique within the catalog")
  title: str
  description: str
  category: ErrorCategory
  input_model: type[BaseModel]
  output_model: type[BaseModel] | None = Field(
    default=None,
    description="Schema for the structured payload; None accepts any shape",
  )
  handler: Handler | None = None

  def to_mcp_tool(self) -> Tool:
    return Tool(
      name=self.name,
      title=self.title,
      description=self.description,
      inputSchema=self.input_model.model_json_schema(),
      outputSchema=self.output_model.model_json_schema() if self.output_model else None,
    )


class NoArguments(BaseModel):
  """Input schema for tools that take no arguments."""
