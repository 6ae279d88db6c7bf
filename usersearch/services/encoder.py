"""
Response encoding for the search endpoint.
"""

import logging
from typing import List

from fastapi.responses import Response
from pydantic import TypeAdapter

from usersearch.core.config import settings
from usersearch.exceptions import EncodeException
from usersearch.schemas import User

logger = logging.getLogger(__name__)

_users_adapter = TypeAdapter(List[User])


def encode_users(users: List[User]) -> bytes:
    """Serialize records to a JSON array keyed by wire field names."""
    try:
        return _users_adapter.dump_json(users, by_alias=True)
    except (ValueError, TypeError) as e:
        logger.error(f"Failed to encode {len(users)} users: {e}")
        raise EncodeException()


def build_search_response(users: List[User], has_more: bool) -> Response:
    """Build the success response: record array body plus the has-more header."""
    return Response(
        content=encode_users(users),
        media_type="application/json",
        headers={settings.HAS_MORE_HEADER: "true" if has_more else "false"},
    )
