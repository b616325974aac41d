"""Entry point for running the MCP server.

Usage:
    python -m simpsonrule.mcp
"""

import asyncio

from simpsonrule.logging_config import configure_from_env
from simpsonrule.mcp.server import run_server

if __name__ == "__main__":
    configure_from_env()
    asyncio.run(run_server())
