"""
Copyright (c) 2025 linear-issues-mcp contributors
SPDX-License-Identifier: MIT

This module implements the FastMCP server for Linear integration.
"""

import sys
from typing import Annotated, Optional

from fastmcp import FastMCP, Context
from mcp.types import ToolAnnotations
from pydantic import Field

from .client import LinearClient
from .dispatcher import IssueQueryDispatcher
from .tools.get_issue import get_issue as get_issue_tool
from .tools.get_issue_with_comments import get_issue_with_comments as get_issue_with_comments_tool

SERVER_NAME = "linear-issues-mcp"
SERVER_VERSION = "0.0.1"

SERVER_INSTRUCTIONS = (
    "This server provides read-only access to Linear issues. You can fetch details of a single "
    "Linear issue by providing its URL or identifier, or get comprehensive information including "
    "comments for a Linear issue. The Linear API token should be configured as an environment "
    "variable (LINEAR_API_TOKEN) in your MCP server configuration."
)

ISSUE_PARAM_DESCRIPTION = (
    "Linear issue URL or identifier "
    "(e.g., 'ENG-123' or 'https://linear.app/team/issue/ENG-123/issue-title')"
)

# Both tools only read from the external Linear API
READ_ONLY_ANNOTATIONS = ToolAnnotations(
    readOnlyHint=True,
    destructiveHint=False,
    idempotentHint=True,
    openWorldHint=True
)

ISSUE_TOOL_TAGS = {"linear", "issues", "read-only"}


def create_server(dispatcher: Optional[IssueQueryDispatcher] = None) -> FastMCP:
    """
    Build the FastMCP server and register the Linear issue tools.

    Args:
        dispatcher: Query dispatcher to serve; defaults to one reading LINEAR_API_TOKEN

    Returns:
        Configured FastMCP server, not yet bound to a transport
    """
    dispatcher = dispatcher or IssueQueryDispatcher(LinearClient())

    mcp = FastMCP(
        name=SERVER_NAME,
        instructions=SERVER_INSTRUCTIONS,
        version=SERVER_VERSION
    )

    @mcp.tool(
        name="linear_get_issue",
        description="Fetch details of a single Linear issue by providing its URL or identifier.",
        tags=ISSUE_TOOL_TAGS,
        annotations=READ_ONLY_ANNOTATIONS
    )
    async def linear_get_issue(
        issue: Annotated[str, Field(description=ISSUE_PARAM_DESCRIPTION)],
        ctx: Context
    ) -> str:
        """
        Fetch a single Linear issue.

        Args:
            issue: Linear issue URL or identifier

        Returns:
            JSON string containing the issue details
        """
        return await get_issue_tool(issue, ctx, dispatcher)

    @mcp.tool(
        name="linear_get_issue_with_comments",
        description="Fetch a Linear issue with all its comments and complete information.",
        tags=ISSUE_TOOL_TAGS | {"comments"},
        annotations=READ_ONLY_ANNOTATIONS
    )
    async def linear_get_issue_with_comments(
        issue: Annotated[str, Field(description=ISSUE_PARAM_DESCRIPTION)],
        ctx: Context
    ) -> str:
        """
        Fetch a Linear issue together with its comments.

        Args:
            issue: Linear issue URL or identifier

        Returns:
            JSON string containing the issue details and comments
        """
        return await get_issue_with_comments_tool(issue, ctx, dispatcher)

    return mcp


def main():
    """Main entry point for the Linear MCP server."""
    try:
        mcp = create_server()
        print("Linear Issues MCP Server running on stdio", file=sys.stderr)
        mcp.run()
    except Exception as e:
        print(f"Fatal error in main(): {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
