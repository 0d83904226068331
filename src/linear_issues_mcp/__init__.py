"""
Copyright (c) 2025 linear-issues-mcp contributors
SPDX-License-Identifier: MIT

Linear Issues MCP Server package.
This package provides a FastMCP-based server for read-only access to Linear issues.
"""

from .server import create_server, main

__version__ = "0.0.1"
__all__ = ["create_server", "main"]


# Export the main function for the CLI entry point
def main_cli():
    """CLI entry point for the Linear Issues MCP server."""
    main()
