"""
Linear API Endpoint Constants

This module defines the Linear hosts and credential conventions used throughout the application.
Centralizing these constants prevents typos and makes API changes easier to manage.
"""


class LinearEndpoints:
    """Linear API endpoint constants for consistent usage across the application."""

    # GraphQL API
    GRAPHQL_URL = "https://api.linear.app/graphql"

    # Web app host suffix accepted in issue URLs
    APP_DOMAIN = "linear.app"

    # Personal API keys carry this prefix and are sent without "Bearer"
    API_KEY_PREFIX = "lin_api_"


# Convenience exports for simpler imports
LINEAR_GRAPHQL_URL = LinearEndpoints.GRAPHQL_URL
LINEAR_APP_DOMAIN = LinearEndpoints.APP_DOMAIN
LINEAR_API_KEY_PREFIX = LinearEndpoints.API_KEY_PREFIX
