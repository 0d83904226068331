"""
Debug utilities for the Linear MCP server.
"""

import traceback
from typing import Optional

from fastmcp import Context

from .config import is_debug_enabled


def format_debug_details(error: BaseException) -> str:
    """Render an exception with its traceback for the host log."""
    return "".join(traceback.format_exception(type(error), error, error.__traceback__))


async def report_unexpected_error(ctx: Optional[Context], operation: str, error: BaseException) -> None:
    """
    Log an unexpected failure to the MCP host.

    The traceback is only sent, at debug level, when LINEAR_MCP_DEBUG=1. It is
    never part of the tool result.
    """
    if not ctx:
        return
    await ctx.error(f"Unexpected error fetching {operation}: {type(error).__name__}: {error}")
    if is_debug_enabled():
        await ctx.debug(f"Full traceback:\n{format_debug_details(error)}")
