"""GitHub REST and GraphQL client."""

from ghresolve.github.batching import chunked
from ghresolve.github.client import GitHubApi
from ghresolve.github.node_ids import USER_NODE_PREFIX, user_node_id
from ghresolve.github.queries import USERNAMES, USERNAMES_BATCH_SIZE

__all__ = ["USERNAMES", "USERNAMES_BATCH_SIZE", "USER_NODE_PREFIX", "GitHubApi", "chunked", "user_node_id"]
