"""
MCP server for astprofile.

Exposes single-file complexity analysis to LLMs via the Model Context Protocol.

Tools:
    - astprofile_analyze: Complexity metrics (and optionally the DOT graph)
      for one source file

Usage:
    Run: astprofile-mcp
"""

import asyncio

from astprofile.mcp.server import serve as _serve


def serve() -> None:
    """Entry point for the MCP server."""
    asyncio.run(_serve())


__all__ = ["serve"]
