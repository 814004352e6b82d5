"""GraphQL operations issued against the GitHub API."""

USERNAMES_BATCH_SIZE = 100
"""Maximum number of node ids sent in one ``nodes`` query."""

USERNAMES = """
query($ids: [ID!]!) {
  nodes(ids: $ids) {
    ... on User {
      databaseId
      login
    }
  }
}
"""
