"""
Linear Get Issue With Comments Tool
"""

from fastmcp import Context

from ..dispatcher import IssueQueryDispatcher
from ..error_handler import unwrap_envelope


async def get_issue_with_comments(issue: str, ctx: Context, dispatcher: IssueQueryDispatcher) -> str:
    """
    Get a Linear issue and all of its comments, in the order Linear returns them.

    Returns:
        JSON string containing the normalized issue with a "comments" list
    """
    envelope = await dispatcher.get_issue_with_comments(issue, ctx)
    return unwrap_envelope(envelope)
