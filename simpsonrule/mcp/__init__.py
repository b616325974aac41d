"""MCP tool surface for simpsonrule. The server needs the ``mcp`` extra."""
