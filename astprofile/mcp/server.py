"""MCP server implementation for astprofile."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from astprofile.config import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT, AnalysisConfig
from astprofile.core.analyzer import analyze_file
from astprofile.core.exceptions import AstProfileError
from astprofile.core.report import summarize

server = Server("astprofile")


@server.list_tools()  # type: ignore[no-untyped-call, untyped-decorator]
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="astprofile_analyze",
            description=(
                "Analyze one C, C++ or Python source file. Returns a decision-point "
                "cyclomatic complexity, the maximum loop nesting depth, the number of "
                "variable declarations and advisory time/space complexity labels."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "Path of the source file, relative to the server cwd",
                    },
                    "include_graph": {
                        "type": "boolean",
                        "description": "Also return the syntax tree as Graphviz DOT",
                        "default": False,
                    },
                    "max_depth": {
                        "type": "integer",
                        "description": f"Maximum tree depth (default: {DEFAULT_MAX_DEPTH})",
                        "default": DEFAULT_MAX_DEPTH,
                        "minimum": 1,
                        "maximum": MAX_DEPTH_LIMIT,
                    },
                },
                "required": ["path"],
            },
        ),
    ]


@server.call_tool()  # type: ignore[untyped-decorator]
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "astprofile_analyze":
            result = handle_analyze(
                arguments["path"],
                arguments.get("include_graph", False),
                arguments.get("max_depth", DEFAULT_MAX_DEPTH),
            )
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except KeyError as e:
        return [TextContent(type="text", text=json.dumps({"error": f"Missing argument: {e}"}))]


def handle_analyze(path: str, include_graph: bool, max_depth: int) -> dict[str, Any]:
    """Handle astprofile_analyze tool."""
    valid = isinstance(max_depth, int) and not isinstance(max_depth, bool)
    if not valid or not 1 <= max_depth <= MAX_DEPTH_LIMIT:
        return {"error": f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}"}

    file = Path(path)
    if not file.is_absolute():
        file = Path.cwd() / file

    try:
        result = analyze_file(file, AnalysisConfig(max_depth=max_depth))
    except AstProfileError as e:
        return {"error": str(e)}

    return summarize(result, include_graph=include_graph)


async def serve() -> None:
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
