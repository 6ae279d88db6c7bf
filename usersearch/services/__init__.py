"""
Search service business logic.
"""

import logging
from operator import attrgetter
from typing import Callable, Dict, List, Optional, Tuple

from usersearch.core.config import settings
from usersearch.exceptions import AccessDeniedException
from usersearch.schemas import OrderBy, OrderField, SearchParams, User
from usersearch.services.dataset import decode_users, read_dataset
from usersearch.services.validation import parse_search_params

logger = logging.getLogger(__name__)


# ============================================================
# Filter
# ============================================================

def filter_users(users: List[User], query: str) -> List[User]:
    """Keep records whose name or about contains ``query`` (case-sensitive)."""
    if not query:
        return list(users)
    return [u for u in users if query in u.name or query in u.about]


# ============================================================
# Sort
# ============================================================

SORT_KEYS: Dict[OrderField, Callable[[User], object]] = {
    OrderField.DEFAULT: attrgetter("name"),
    OrderField.NAME: attrgetter("name"),
    OrderField.ID: attrgetter("id"),
    OrderField.AGE: attrgetter("age"),
}


def sort_users(users: List[User], order_field: OrderField, order_by: OrderBy) -> List[User]:
    """
    Stable sort by the selected field.

    ``sorted`` keeps equal keys in their input order for both directions,
    so ties always stay in filter order.
    """
    if order_by is OrderBy.AS_IS:
        return list(users)
    return sorted(
        users,
        key=SORT_KEYS[order_field],
        reverse=order_by is OrderBy.DESC,
    )


# ============================================================
# Pagination
# ============================================================

def paginate(users: List[User], offset: int, limit: int) -> Tuple[List[User], bool]:
    """
    Select the ``[offset, offset + limit)`` window.

    When fewer than ``offset + limit`` records exist, the whole sequence is
    returned from index 0 and the offset is not applied. Clients depend on
    this, keep it.

    Returns:
        The window and whether records exist past its upper bound.
    """
    end = offset + limit
    if len(users) < end:
        return list(users), False

    start = max(offset, 0)
    return users[start:max(end, start)], len(users) > end


# ============================================================
# Search Service
# ============================================================

class SearchService:
    """Runs the search pipeline against one dataset file."""

    def __init__(self, dataset_path: str, bad_access_token: str = settings.BAD_ACCESS_TOKEN):
        self.dataset_path = dataset_path
        self.bad_access_token = bad_access_token

    def check_access(self, access_token: Optional[str]):
        if access_token == self.bad_access_token:
            logger.warning("Rejected request with bad access token")
            raise AccessDeniedException()

    def search(
        self,
        limit: Optional[str],
        offset: Optional[str],
        order_by: Optional[str],
        query: Optional[str] = None,
        order_field: Optional[str] = None,
        access_token: Optional[str] = None,
    ) -> Tuple[List[User], bool]:
        """
        Validate raw parameters and return the result window.

        The dataset is read before anything else so a missing file is
        reported regardless of the request. Every failure raises an
        ``APIException`` before later stages run.
        """
        blob = read_dataset(self.dataset_path)
        self.check_access(access_token)
        params = parse_search_params(limit, offset, order_by, query, order_field)
        return self.run(params, decode_users(blob))

    def run(self, params: SearchParams, users: List[User]) -> Tuple[List[User], bool]:
        """Filter, sort and paginate already decoded records."""
        logger.info(
            f"Searching: query='{params.query}', order_field='{params.order_field.value}', "
            f"order_by={params.order_by.value}, offset={params.offset}, limit={params.limit}"
        )

        matched = filter_users(users, params.query)
        ordered = sort_users(matched, params.order_field, params.order_by)
        window, has_more = paginate(ordered, params.offset, params.limit)

        logger.info(
            f"Returning {len(window)} of {len(matched)} matches (total={len(users)}, has_more={has_more})"
        )
        return window, has_more
