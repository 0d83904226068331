"""Tests for IssueQueryDispatcher.

Every failure of the pipeline must come back as an error envelope, never as a
raised exception.
"""

import json
from unittest.mock import AsyncMock, patch

import pytest
import requests

from linear_issues_mcp.client import LinearClient
from linear_issues_mcp.config import static_credential_provider
from linear_issues_mcp.dispatcher import IssueQueryDispatcher
from linear_issues_mcp.types import IssueQuery

from .conftest import make_response


pytestmark = pytest.mark.asyncio


def _dispatcher(token="lin_api_key"):
    return IssueQueryDispatcher(LinearClient(static_credential_provider(token)))


class TestSuccess:

    @patch("linear_issues_mcp.client.requests.post")
    async def test_get_issue(self, mock_post, issue_node):
        mock_post.return_value = make_response({"data": {"issue": issue_node}})

        envelope = await _dispatcher().get_issue("https://linear.app/acme/issue/ENG-42/fix-bug")

        assert envelope.is_error is False
        payload = json.loads(envelope.text)
        assert payload["identifier"] == "ENG-42"
        assert "comments" not in payload
        assert mock_post.call_args.kwargs["json"]["variables"] == {
            "id": "ENG-42",
            "includeComments": False,
        }

    @patch("linear_issues_mcp.client.requests.post")
    async def test_get_issue_with_comments(self, mock_post, issue_node_with_comments):
        mock_post.return_value = make_response({"data": {"issue": issue_node_with_comments}})

        envelope = await _dispatcher().get_issue_with_comments("ENG-42")

        assert envelope.is_error is False
        payload = json.loads(envelope.text)
        assert [c["author"] for c in payload["comments"]] == ["john", "Unknown"]
        assert mock_post.call_args.kwargs["json"]["variables"]["includeComments"] is True

    @patch("linear_issues_mcp.client.requests.post")
    async def test_requested_comments_empty(self, mock_post, issue_node):
        issue_node["comments"] = {"nodes": []}
        mock_post.return_value = make_response({"data": {"issue": issue_node}})

        envelope = await _dispatcher().get_issue_with_comments("ENG-42")

        assert json.loads(envelope.text)["comments"] == []

    @patch("linear_issues_mcp.client.requests.post")
    async def test_idempotent_output(self, mock_post, issue_node_with_comments):
        mock_post.return_value = make_response({"data": {"issue": issue_node_with_comments}})
        dispatcher = _dispatcher()

        first = await dispatcher.get_issue_with_comments("ENG-42")
        second = await dispatcher.get_issue_with_comments("ENG-42")

        assert first == second

    @patch("linear_issues_mcp.client.requests.post")
    async def test_logs_to_context(self, mock_post, issue_node):
        mock_post.return_value = make_response({"data": {"issue": issue_node}})
        ctx = AsyncMock()

        await _dispatcher().run(IssueQuery("ENG-42"), ctx)

        ctx.info.assert_any_await("Fetching Linear issue ENG-42")
        ctx.error.assert_not_awaited()


class TestErrors:

    @patch("linear_issues_mcp.client.requests.post")
    async def test_missing_credential_makes_no_request(self, mock_post):
        envelope = await _dispatcher(token=None).get_issue("ENG-42")

        assert envelope.is_error is True
        assert envelope.text == (
            "Error: No Linear API token found in environment. "
            "Set the LINEAR_API_TOKEN environment variable."
        )
        assert mock_post.call_count == 0

    @patch("linear_issues_mcp.client.requests.post")
    async def test_invalid_url_makes_no_request(self, mock_post):
        envelope = await _dispatcher().get_issue("https://example.com/issue/ENG-42")

        assert envelope.is_error is True
        assert envelope.text == "Error: Invalid Linear issue URL: https://example.com/issue/ENG-42"
        assert mock_post.call_count == 0

    @patch("linear_issues_mcp.client.requests.post")
    async def test_not_found(self, mock_post):
        mock_post.return_value = make_response({"data": {"issue": None}})

        envelope = await _dispatcher().get_issue("ENG-404")

        assert envelope.is_error is True
        assert envelope.text == "Error: Linear issue not found: ENG-404"

    @patch("linear_issues_mcp.client.requests.post")
    async def test_empty_data_object_is_not_found(self, mock_post):
        mock_post.return_value = make_response({"data": {}})

        envelope = await _dispatcher().get_issue("ENG-1")

        assert envelope.is_error is True
        assert envelope.text == "Error: Linear issue not found: ENG-1"

    @patch("linear_issues_mcp.client.requests.post")
    async def test_no_data_distinct_from_not_found(self, mock_post):
        mock_post.return_value = make_response({"errors": [{"message": "boom"}]})

        envelope = await _dispatcher().get_issue("ENG-404")

        assert envelope.is_error is True
        assert envelope.text == "Error fetching Linear issue: Linear API request failed: no data"

    @patch("linear_issues_mcp.client.requests.post")
    async def test_request_failed_names_operation(self, mock_post):
        mock_post.return_value = make_response(None, status_code=500, reason="Internal Server Error")

        envelope = await _dispatcher().get_issue_with_comments("ENG-1")

        assert envelope.is_error is True
        assert envelope.text == (
            "Error fetching Linear issue with comments: "
            "Linear API request failed: Internal Server Error"
        )

    @patch("linear_issues_mcp.client.requests.post")
    async def test_network_failure(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("connection reset")
        ctx = AsyncMock()

        envelope = await _dispatcher().run(IssueQuery("ENG-1"), ctx)

        assert envelope.is_error is True
        assert envelope.text.startswith("Error fetching Linear issue: ")
        assert "connection reset" in envelope.text
        ctx.error.assert_awaited()

    @patch("linear_issues_mcp.client.requests.post")
    async def test_malformed_timestamp(self, mock_post, issue_node):
        issue_node["createdAt"] = "garbage"
        mock_post.return_value = make_response({"data": {"issue": issue_node}})

        envelope = await _dispatcher().get_issue("ENG-42")

        assert envelope.is_error is True
        assert "Invalid timestamp" in envelope.text
        assert "Traceback" not in envelope.text

    @patch("linear_issues_mcp.client.requests.post")
    async def test_invalid_json_body(self, mock_post):
        response = make_response()
        response.json.side_effect = ValueError("Expecting value")
        mock_post.return_value = response

        envelope = await _dispatcher().get_issue("ENG-1")

        assert envelope.text == "Error fetching Linear issue: Expecting value"


class TestDebugMode:

    @patch("linear_issues_mcp.client.requests.post")
    async def test_traceback_sent_to_log_only(self, mock_post, monkeypatch):
        monkeypatch.setenv("LINEAR_MCP_DEBUG", "1")
        mock_post.side_effect = requests.Timeout("read timed out")
        ctx = AsyncMock()

        envelope = await _dispatcher().run(IssueQuery("ENG-1", include_comments=True), ctx)

        assert "Traceback" not in envelope.text
        ctx.debug.assert_awaited_once()
        assert "Traceback" in ctx.debug.await_args.args[0]

    @patch("linear_issues_mcp.client.requests.post")
    async def test_no_traceback_without_debug(self, mock_post, monkeypatch):
        monkeypatch.delenv("LINEAR_MCP_DEBUG", raising=False)
        mock_post.side_effect = requests.Timeout("read timed out")
        ctx = AsyncMock()

        await _dispatcher().run(IssueQuery("ENG-1"), ctx)

        ctx.debug.assert_not_awaited()


class TestLoggingFailures:

    @patch("linear_issues_mcp.client.requests.post")
    async def test_failing_warning_still_returns_envelope(self, mock_post):
        ctx = AsyncMock()
        ctx.warning.side_effect = RuntimeError("host went away")

        envelope = await _dispatcher(token=None).run(IssueQuery("ENG-1"), ctx)

        assert envelope.is_error is True
        assert "LINEAR_API_TOKEN" in envelope.text

    @patch("linear_issues_mcp.client.requests.post")
    async def test_failing_error_log_still_returns_envelope(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("connection reset")
        ctx = AsyncMock()
        ctx.error.side_effect = RuntimeError("host went away")

        envelope = await _dispatcher().run(IssueQuery("ENG-1"), ctx)

        assert envelope.is_error is True
        assert "connection reset" in envelope.text
