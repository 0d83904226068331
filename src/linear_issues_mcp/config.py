"""
Configuration for the Linear MCP server.

Values come from the process environment. The API token is read lazily,
once per tool call, through a credential provider so that a missing token is
reported to the caller instead of preventing startup.
"""

import os
from typing import Callable, Optional

# Environment variable names
LINEAR_API_TOKEN_ENV = "LINEAR_API_TOKEN"
DEBUG_ENV = "LINEAR_MCP_DEBUG"

# A credential provider returns the token, or None/"" when none is configured
CredentialProvider = Callable[[], Optional[str]]


def env_credential_provider(variable: str = LINEAR_API_TOKEN_ENV) -> CredentialProvider:
    """Return a provider that looks the token up in the environment on every call."""
    def provider() -> Optional[str]:
        return os.environ.get(variable)

    provider.variable = variable
    return provider


def static_credential_provider(token: Optional[str]) -> CredentialProvider:
    """Return a provider that always yields the given token."""
    def provider() -> Optional[str]:
        return token

    provider.variable = LINEAR_API_TOKEN_ENV
    return provider


def is_debug_enabled() -> bool:
    """Check whether debug diagnostics were requested."""
    return os.environ.get(DEBUG_ENV) == "1"
