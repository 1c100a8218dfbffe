"""
HollaEx MCP entry point. Starts the stdio or HTTP transport.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from collections.abc import Sequence

from .config import Settings
from .registry import ToolRegistry

log = logging.getLogger("hollaex_mcp")


def _configure_logging() -> None:
  # stdout carries the stdio protocol; logs go to stderr
  logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
  )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
  parser = argparse.ArgumentParser(prog="hollaex-mcp", description="HollaEx trading MCP server")
  parser.add_argument("--http", action="store_true", help="serve over HTTP instead of stdio")
  parser.add_argument("--port", type=int, default=None, help="HTTP listen port")
  return parser.parse_args(argv)


async def main(settings: Settings) -> None:
  """Start the configured transport."""
  registry = ToolRegistry(settings)
  if not registry.settings.has_credentials:
    log.warning("HOLLAEX_API_KEY or HOLLAEX_API_SECRET not set; tool calls will fail until both are configured")
  if settings.transport == "http":
    from .http_app import run_http

    await run_http(registry, settings.http_port)
  else:
    from .server import run_stdio

    await run_stdio(registry)


def run(argv: Sequence[str] | None = None) -> int:
  _configure_logging()
  args = _parse_args(sys.argv[1:] if argv is None else argv)
  try:
    settings = Settings.from_env(http_flag=args.http)
    if args.port is not None:
      settings = settings.model_copy(update={"http_port": args.port})
    asyncio.run(main(settings))
  except KeyboardInterrupt:
    return 0
  except Exception:
    log.exception("Failed to start MCP server")
    return 1
  return 0


if __name__ == "__main__":
  sys.exit(run())
