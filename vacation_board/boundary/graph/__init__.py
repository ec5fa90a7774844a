"""
Remote API boundary: Microsoft identity platform and Microsoft Graph.

Exports:
  - GraphClient, PhotoPayload: Directory/calendar pass-through
  - IdentityClient: Authorization-code + PKCE token exchange
  - RemoteAPIError: Non-success upstream response
"""

from vacation_board.boundary.graph.client import GraphClient, PhotoPayload
from vacation_board.boundary.graph.errors import RemoteAPIError
from vacation_board.boundary.graph.identity import IdentityClient

__all__ = ["GraphClient", "PhotoPayload", "IdentityClient", "RemoteAPIError"]
