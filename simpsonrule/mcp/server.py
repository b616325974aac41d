"""MCP server exposing Simpson's rule integration as callable tools.

Requires the ``mcp`` package: ``pip install mcp``

Usage:
    python -m simpsonrule.mcp
"""

from __future__ import annotations

import json
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from simpsonrule.config import CalculatorConfig
from simpsonrule.mcp.tools import (
    CONSTANTS_INFO,
    FUNCTIONS_INFO,
    format_functions,
    format_response,
    run_expression_check,
    run_integration,
)

mcp_server = Server("simpsonrule")


@mcp_server.list_tools()
async def list_tools() -> list[Tool]:
    config = CalculatorConfig.from_env()
    return [
        Tool(
            name="integrate_simpson",
            description=(
                "Approximate a definite integral of f(x) over [a, b] with "
                "composite Simpson's rule. Returns the value and the "
                "per-node trace (x, f(x), coefficient, term)."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "a": {"type": "number", "description": "Lower bound"},
                    "b": {"type": "number", "description": "Upper bound (must exceed a)"},
                    "n": {
                        "type": "integer",
                        "description": "Number of subintervals (even, at least 2)",
                        "default": config.default_n,
                        "minimum": config.min_n,
                        "maximum": config.max_n,
                        "multipleOf": 2,
                    },
                    "expression": {
                        "type": "string",
                        "description": "Integrand in x, e.g. 'x^2 + 3*x - 5' or 'sin(x)*cos(x)'",
                    },
                },
                "required": ["a", "b", "expression"],
            },
        ),
        Tool(
            name="check_expression",
            description=(
                "Validate an integrand expression without integrating it. "
                "Reports why an expression is rejected."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "expression": {"type": "string", "description": "Integrand in x"},
                },
                "required": ["expression"],
            },
        ),
        Tool(
            name="list_functions",
            description="List the functions, constants and operators allowed in expressions.",
            inputSchema={
                "type": "object",
                "properties": {},
            },
        ),
    ]


@mcp_server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    config = CalculatorConfig.from_env()

    if name == "integrate_simpson":
        outcome = run_integration(
            a=arguments["a"],
            b=arguments["b"],
            n=arguments.get("n", config.default_n),
            expression=arguments["expression"],
            config=config,
        )
        return [TextContent(type="text", text=format_response(outcome))]

    if name == "check_expression":
        check = run_expression_check(arguments["expression"], config=config)
        return [TextContent(type="text", text=json.dumps(check, indent=2))]

    if name == "list_functions":
        return [
            TextContent(
                type="text",
                text=json.dumps(
                    {
                        "prompt_context": format_functions(),
                        "data": {"functions": FUNCTIONS_INFO, "constants": CONSTANTS_INFO},
                    },
                    indent=2,
                ),
            )
        ]

    raise ValueError(f"Unknown tool: {name}")


async def run_server() -> None:
    """Run the MCP server with stdio transport."""
    async with stdio_server() as (read_stream, write_stream):
        await mcp_server.run(
            read_stream,
            write_stream,
            mcp_server.create_initialization_options(),
        )
