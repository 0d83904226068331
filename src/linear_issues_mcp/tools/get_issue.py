"""
Linear Get Issue Tool

Tool for retrieving a single Linear issue by URL or identifier.
"""

from fastmcp import Context

from ..dispatcher import IssueQueryDispatcher
from ..error_handler import unwrap_envelope


async def get_issue(issue: str, ctx: Context, dispatcher: IssueQueryDispatcher) -> str:
    """
    Get a Linear issue by URL or identifier.

    Args:
        issue: Linear issue URL or identifier - accepts ENG-123 or https://linear.app/team/issue/ENG-123/title
        ctx: FastMCP context
        dispatcher: Query dispatcher built by the server

    Returns:
        JSON string containing the normalized issue
    """
    envelope = await dispatcher.get_issue(issue, ctx)
    return unwrap_envelope(envelope)
