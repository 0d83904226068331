"""
GraphQL documents sent to the Linear API.
"""

ISSUE_FRAGMENT = """
  fragment IssueFragment on Issue {
      id
      identifier
      title
      url
      description
      state {
          name
      }
      priority
      priorityLabel
      assignee {
          name
          displayName
      }
      createdAt
      updatedAt
  }
"""

# Comments are only selected when $includeComments is true
ISSUE_QUERY = f"""
  query IssueDetails($id: String!, $includeComments: Boolean!) {{
    issue(id: $id) {{
      ...IssueFragment
      comments @include(if: $includeComments) {{
        nodes {{
          body
          user {{
            name
            displayName
          }}
          createdAt
        }}
      }}
    }}
  }}
  {ISSUE_FRAGMENT}
"""


def issue_variables(identifier: str, include_comments: bool) -> dict:
    """Build the variables object for ISSUE_QUERY."""
    return {"id": identifier, "includeComments": include_comments}
