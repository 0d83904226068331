"""
Linear Issue Query Dispatcher

Runs one issue query end to end:
credential check -> resolve identifier -> call API -> check issue exists -> normalize -> serialize.

Every failure is caught here and turned into an error envelope, so nothing
propagates to the MCP host as an unhandled fault.
"""

import asyncio
import sys
from typing import Callable, Optional

from fastmcp import Context

from .client import LinearClient
from .debug import report_unexpected_error
from .error_handler import (
    IssueNotFoundError,
    LinearMCPError,
    create_error_response,
    describe_operation,
)
from .normalizer import normalize_issue, serialize_issue
from .resolver import resolve_issue_identifier
from .types import IssueQuery, ResultEnvelope


async def _log_failure(ctx: Optional[Context], operation: str, error: Exception) -> None:
    """Report a failed query to the host log; a failing log call never replaces the envelope."""
    try:
        if isinstance(error, LinearMCPError):
            if ctx:
                await ctx.warning(f"{operation} query failed ({error.error_code}): {error.message}")
        else:
            await report_unexpected_error(ctx, operation, error)
    except Exception as log_error:
        print(f"Could not log {operation} failure to the MCP host: {log_error}", file=sys.stderr)


class IssueQueryDispatcher:
    """Stateless composition of resolver, client and normalizer."""

    def __init__(
        self,
        client: Optional[LinearClient] = None,
        resolver: Callable[[str], str] = resolve_issue_identifier
    ):
        self.client = client or LinearClient()
        self.resolver = resolver

    async def run(self, query: IssueQuery, ctx: Optional[Context] = None) -> ResultEnvelope:
        """
        Execute an issue query.

        Args:
            query: The issue reference and whether to include comments
            ctx: FastMCP context for logging (optional)

        Returns:
            ResultEnvelope holding the issue JSON, or an error message
        """
        operation = describe_operation(query.include_comments)
        try:
            credential = self.client.require_credential()
            identifier = self.resolver(query.raw_input)

            if ctx:
                await ctx.info(f"Fetching {operation} {identifier}")

            data = await asyncio.to_thread(
                self.client.fetch_issue,
                identifier,
                query.include_comments,
                credential
            )

            issue_data = data.get("issue")
            if not issue_data:
                raise IssueNotFoundError(query.raw_input)

            record = normalize_issue(issue_data, query.include_comments)
            text = serialize_issue(record)

            if ctx:
                comment_count = len(record.comments) if record.comments is not None else 0
                if query.include_comments:
                    await ctx.info(f"Retrieved {identifier} with {comment_count} comments")
                else:
                    await ctx.info(f"Retrieved {identifier}")
            return ResultEnvelope.success(text)

        except Exception as e:
            await _log_failure(ctx, operation, e)
            return create_error_response(e, query.include_comments)

    async def get_issue(self, issue: str, ctx: Optional[Context] = None) -> ResultEnvelope:
        """Fetch a single issue without comments."""
        return await self.run(IssueQuery(issue, include_comments=False), ctx)

    async def get_issue_with_comments(self, issue: str, ctx: Optional[Context] = None) -> ResultEnvelope:
        """Fetch an issue together with its comments."""
        return await self.run(IssueQuery(issue, include_comments=True), ctx)
