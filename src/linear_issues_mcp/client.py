"""
Copyright (c) 2025 linear-issues-mcp contributors
SPDX-License-Identifier: MIT

This module provides the client for making authenticated requests to the Linear GraphQL API.
"""

from typing import Any, Dict, Optional

import requests

from .config import CredentialProvider, LINEAR_API_TOKEN_ENV, env_credential_provider
from .endpoints import LINEAR_API_KEY_PREFIX, LINEAR_GRAPHQL_URL
from .error_handler import ConfigurationError, NoDataError, RequestFailedError
from .queries import ISSUE_QUERY, issue_variables


def authorization_header(credential: str) -> str:
    """
    Format the Authorization header value for a Linear credential.

    Personal API keys are sent as-is; anything else is treated as an OAuth
    access token and sent as a bearer token.
    """
    if credential.startswith(LINEAR_API_KEY_PREFIX):
        return credential
    return f"Bearer {credential}"


class LinearClient:
    """Single-shot client for the Linear GraphQL API."""

    def __init__(
        self,
        credential_provider: Optional[CredentialProvider] = None,
        endpoint: str = LINEAR_GRAPHQL_URL
    ):
        self.credential_provider = credential_provider or env_credential_provider()
        self.endpoint = endpoint

    @property
    def credential_variable(self) -> str:
        return getattr(self.credential_provider, "variable", LINEAR_API_TOKEN_ENV)

    def require_credential(self) -> str:
        """
        Return the configured credential.

        Raises:
            ConfigurationError: If no credential is configured
        """
        credential = self.credential_provider()
        if not credential:
            raise ConfigurationError(self.credential_variable)
        return credential

    def make_linear_request(
        self,
        query: str,
        variables: Dict[str, Any],
        credential: str
    ) -> Dict[str, Any]:
        """
        Make an authenticated GraphQL request to the Linear API.

        Args:
            query: GraphQL document
            variables: Variables for the document
            credential: Linear API key or OAuth access token

        Returns:
            The "data" object of the GraphQL response

        Raises:
            RequestFailedError: If Linear returns a non-success HTTP status
            NoDataError: If the response has no data
            requests.RequestException: If the HTTP request could not be completed
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": authorization_header(credential),
        }

        try:
            response = requests.post(
                self.endpoint,
                headers=headers,
                json={"query": query, "variables": variables}
            )
        except requests.RequestException as e:
            raise requests.RequestException(f"Linear API request failed: {e}") from e

        if not response.ok:
            raise RequestFailedError(response.status_code, response.reason)

        body = response.json()
        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            errors = body.get("errors") if isinstance(body, dict) else None
            raise NoDataError(errors)

        return data

    def fetch_issue(
        self,
        identifier: str,
        include_comments: bool = False,
        credential: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Fetch an issue, optionally with its comments.

        Returns:
            The GraphQL data object; its "issue" field is None when the issue does not exist
        """
        if credential is None:
            credential = self.require_credential()
        return self.make_linear_request(
            ISSUE_QUERY,
            issue_variables(identifier, include_comments),
            credential
        )
