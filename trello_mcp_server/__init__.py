"""
Trello Reports MCP Server

Exposes Trello board listing and quarterly/yearly board reports as MCP tools.

Usage:
    from trello_mcp_server import TrelloMCPServer, TrelloServerConfig

    server = TrelloMCPServer(TrelloServerConfig.from_env())
    await server.run()
"""

from .config import TrelloServerConfig
from .server import TrelloMCPServer

__all__ = ["TrelloMCPServer", "TrelloServerConfig"]

__version__ = "1.0.0"
