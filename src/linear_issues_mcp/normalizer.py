"""
Linear Issue Normalizer

Reshapes the nested GraphQL issue payload into the flat record returned to the host.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .types import UNASSIGNED, UNKNOWN_AUTHOR, CommentRecord, IssueRecord


def format_timestamp(value: Any) -> str:
    """
    Convert a Linear timestamp to ISO-8601 UTC with millisecond precision.

    Timestamps without an offset are taken to be UTC, not local time.

    Raises:
        ValueError: If the value is missing or not an ISO-8601 timestamp
    """
    if not isinstance(value, str) or not value:
        raise ValueError(f"Invalid timestamp: {value!r}")

    text = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise ValueError(f"Invalid timestamp: {value!r}") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    parsed = parsed.astimezone(timezone.utc)

    return parsed.strftime("%Y-%m-%dT%H:%M:%S") + f".{parsed.microsecond // 1000:03d}Z"


def _display_name(user: Optional[Dict[str, Any]], fallback: str) -> str:
    """Prefer displayName over name; the fallback only applies when the user is absent."""
    if user is None:
        return fallback
    return user.get("displayName") or user.get("name") or ""


def _parse_comment(comment: Dict[str, Any]) -> CommentRecord:
    return CommentRecord(
        body=comment.get("body"),
        author=_display_name(comment.get("user"), UNKNOWN_AUTHOR),
        created_at=format_timestamp(comment.get("createdAt"))
    )


def normalize_issue(issue: Dict[str, Any], include_comments: bool = False) -> IssueRecord:
    """
    Map a Linear issue node to an IssueRecord.

    Args:
        issue: The "issue" object from the GraphQL response
        include_comments: Whether the caller asked for comments

    Returns:
        IssueRecord; its comments are set only when requested and returned by Linear
    """
    state = issue.get("state") or {}

    record = IssueRecord(
        identifier=issue.get("identifier"),
        title=issue.get("title"),
        url=issue.get("url"),
        description=issue.get("description") or "",
        state=state.get("name") or "",
        priority=issue.get("priorityLabel") or "",
        assignee=_display_name(issue.get("assignee"), UNASSIGNED),
        created_at=format_timestamp(issue.get("createdAt")),
        updated_at=format_timestamp(issue.get("updatedAt"))
    )

    comments = issue.get("comments")
    if include_comments and comments is not None:
        nodes = comments.get("nodes") or []
        record.comments = [_parse_comment(comment) for comment in nodes]

    return record


def serialize_issue(record: IssueRecord) -> str:
    """Serialize a normalized issue to the JSON text payload."""
    return record.to_json()
