"""
Linear MCP Server Type Definitions

Contains the request and result records that flow through an issue query.
All of them are request scoped; nothing outlives a single tool call.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


UNASSIGNED = "Unassigned"
UNKNOWN_AUTHOR = "Unknown"


@dataclass(frozen=True)
class IssueQuery:
    """A single issue lookup as requested by the MCP host."""
    raw_input: str
    include_comments: bool = False


@dataclass
class CommentRecord:
    """
    A normalized issue comment.
    """
    body: Optional[str]
    author: str
    created_at: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "body": self.body,
            "author": self.author,
            "createdAt": self.created_at
        }


@dataclass
class IssueRecord:
    """
    A normalized Linear issue.

    ``comments`` is None when comments were not requested (or not returned),
    and a possibly empty list otherwise. The distinction is kept in the
    serialized form: a None value omits the key entirely.
    """
    identifier: Optional[str]
    title: Optional[str]
    url: Optional[str]
    description: str
    state: str
    priority: str
    assignee: str
    created_at: str
    updated_at: str
    comments: Optional[List[CommentRecord]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = {
            "identifier": self.identifier,
            "title": self.title,
            "url": self.url,
            "description": self.description,
            "state": self.state,
            "priority": self.priority,
            "assignee": self.assignee,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at
        }
        if self.comments is not None:
            data["comments"] = [comment.to_dict() for comment in self.comments]
        return data

    def to_json(self) -> str:
        """Serialize to the text payload returned to the host."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)


@dataclass(frozen=True)
class ResultEnvelope:
    """Uniform success/error wrapper returned by the query dispatcher."""
    text: str
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> 'ResultEnvelope':
        return cls(text=text, is_error=False)

    @classmethod
    def failure(cls, message: str) -> 'ResultEnvelope':
        return cls(text=message, is_error=True)
