"""
Tools package for the Linear MCP server.
"""

from .get_issue import get_issue
from .get_issue_with_comments import get_issue_with_comments

__all__ = ['get_issue', 'get_issue_with_comments']
