"""Test configuration and fixtures."""

import copy
from unittest.mock import MagicMock

import pytest


ISSUE_NODE = {
    "id": "9cfb482a-81e3-4154-b5b9-2c805e70a02d",
    "identifier": "ENG-42",
    "title": "Fix login bug",
    "url": "https://linear.app/acme/issue/ENG-42/fix-login-bug",
    "description": "Users cannot log in with SSO.",
    "state": {"name": "In Progress"},
    "priority": 2,
    "priorityLabel": "High",
    "assignee": {"name": "Jane Doe", "displayName": "jane"},
    "createdAt": "2024-01-15T10:30:00.000Z",
    "updatedAt": "2024-01-16T08:05:12.345Z",
}

COMMENTS = {
    "nodes": [
        {
            "body": "Reproduced on staging.",
            "user": {"name": "John Smith", "displayName": "john"},
            "createdAt": "2024-01-15T11:00:00.000Z",
        },
        {
            "body": "Fix is up for review.",
            "user": None,
            "createdAt": "2024-01-15T09:00:00.000Z",
        },
    ]
}


def make_response(json_data=None, status_code=200, reason="OK"):
    """Build a mock requests.Response-like object."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = status_code < 400
    resp.reason = reason
    resp.json.return_value = json_data
    return resp


@pytest.fixture
def issue_node():
    """A Linear issue node as returned by the GraphQL API, without comments."""
    return copy.deepcopy(ISSUE_NODE)


@pytest.fixture
def issue_node_with_comments():
    """A Linear issue node including its comments connection."""
    node = copy.deepcopy(ISSUE_NODE)
    node["comments"] = copy.deepcopy(COMMENTS)
    return node
