"""
Linear Issue Identifier Resolver

Turns the user supplied issue reference (a Linear web URL or an identifier
such as ENG-123) into the identifier the GraphQL API expects.
"""

import re
from typing import Optional
from urllib.parse import urlsplit

from .endpoints import LINEAR_APP_DOMAIN
from .error_handler import InvalidURLError

ISSUE_PATH_PATTERN = re.compile(r"/issue/([a-zA-Z0-9_-]+)")


def parse_issue_id_from_url(url: str) -> Optional[str]:
    """
    Extract an issue identifier from a Linear URL.

    Args:
        url: The Linear issue URL, e.g. https://linear.app/acme/issue/ENG-42/fix-bug

    Returns:
        The identifier, or None if this is not a valid Linear issue URL
    """
    try:
        parts = urlsplit(url)
        hostname = parts.hostname
        parts.port  # raises ValueError for a non-numeric or out-of-range port
    except ValueError:
        return None

    if not parts.scheme or not hostname or not hostname.endswith(LINEAR_APP_DOMAIN):
        return None

    match = ISSUE_PATH_PATTERN.search(parts.path)
    return match.group(1) if match else None


def resolve_issue_identifier(issue: str) -> str:
    """
    Resolve an issue reference to a Linear identifier.

    Anything that does not start with "http" is trusted to be an identifier
    already and is returned unchanged.

    Raises:
        InvalidURLError: If the URL is malformed, not on linear.app, or has no /issue/ segment
    """
    if not issue.startswith("http"):
        return issue

    issue_id = parse_issue_id_from_url(issue)
    if not issue_id:
        raise InvalidURLError(issue)
    return issue_id
