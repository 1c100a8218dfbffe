"""
HollaEx client package.
"""

from .hollaex_client import HollaexClient, make_client

__all__ = [
  "HollaexClient",
  "make_client",
]
