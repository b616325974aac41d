"""Tests for the MCP tool handlers. Skipped when the mcp SDK is not installed."""

import asyncio
import json

import pytest

pytest.importorskip("mcp")

from simpsonrule.mcp.server import call_tool, list_tools  # noqa: E402


class TestListTools:
    def test_tool_names(self):
        tools = asyncio.run(list_tools())
        assert [t.name for t in tools] == ["integrate_simpson", "check_expression", "list_functions"]

    def test_interval_count_bounds_come_from_config(self, clean_env):
        tools = asyncio.run(list_tools())
        n_schema = tools[0].inputSchema["properties"]["n"]

        assert n_schema["minimum"] == 2
        assert n_schema["maximum"] == 100
        assert n_schema["default"] == 4
        assert n_schema["multipleOf"] == 2


class TestCallTool:
    def test_integrate_uses_default_n(self, clean_env):
        [content] = asyncio.run(call_tool("integrate_simpson", {"a": 0, "b": 1, "expression": "x^2"}))
        payload = json.loads(content.text)

        assert payload["data"]["result"] == 0.333333
        assert len(payload["data"]["steps"]) == 5
        assert payload["data"]["error"] is None

    def test_integrate_reports_validation_error(self, clean_env):
        [content] = asyncio.run(
            call_tool("integrate_simpson", {"a": 0, "b": 1, "n": 3, "expression": "x"})
        )
        payload = json.loads(content.text)

        assert payload["data"]["result"] is None
        assert payload["data"]["error"]["kind"] == "invalid_interval_count"

    def test_check_expression(self, clean_env):
        [content] = asyncio.run(call_tool("check_expression", {"expression": "sqrt(-1)"}))
        payload = json.loads(content.text)
        assert payload["is_valid"] is False

    def test_list_functions(self):
        [content] = asyncio.run(call_tool("list_functions", {}))
        payload = json.loads(content.text)
        assert "sin" in {f["name"] for f in payload["data"]["functions"]}

    def test_unknown_tool(self):
        with pytest.raises(ValueError, match="Unknown tool"):
            asyncio.run(call_tool("nope", {}))
