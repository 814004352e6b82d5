"""GitHub global node identifier encoding."""

from __future__ import annotations

import base64

# Legacy global ID format understood by the GraphQL ``nodes`` field.
# A wrong prefix does not fail: every lookup silently resolves to null.
USER_NODE_PREFIX = "04:User"


def user_node_id(database_id: int) -> str:
    """Encode a numeric user id as the node id accepted by ``nodes(ids:)``.

    Args:
        database_id: The user's numeric ``databaseId``.

    Returns:
        Base64 of ``"04:User<id>"``.

    Raises:
        ValueError: If the id is negative.
    """
    if database_id < 0:
        raise ValueError(f"user id must be non-negative, got {database_id}")
    return base64.b64encode(f"{USER_NODE_PREFIX}{database_id}".encode("ascii")).decode("ascii")
