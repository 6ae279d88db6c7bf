"""
Query parameter validation for the search endpoint.
"""

import re
from typing import Optional

from usersearch.exceptions import ErrorCode, SearchException
from usersearch.schemas import OrderBy, OrderField, SearchParams

_INT_RE = re.compile(r"[+-]?[0-9]+")
INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


def parse_int(value: Optional[str]) -> Optional[int]:
    """Strict base-10 64-bit integer parsing. Returns None for anything else."""
    if value is None or not _INT_RE.fullmatch(value):
        return None
    digits = value.lstrip("+-").lstrip("0") or "0"
    if len(digits) > 19:
        return None
    parsed = -int(digits) if value.startswith("-") else int(digits)
    if not INT64_MIN <= parsed <= INT64_MAX:
        return None
    return parsed


def parse_order_field(value: str) -> Optional[OrderField]:
    try:
        return OrderField(value)
    except ValueError:
        return None


def parse_search_params(
    limit: Optional[str],
    offset: Optional[str],
    order_by: Optional[str],
    query: Optional[str] = None,
    order_field: Optional[str] = None,
) -> SearchParams:
    """
    Validate raw query parameters.

    Checks run in a fixed order and the first failure wins: limit, offset,
    order_by, sort direction, then sort field. The field is only checked
    when the direction actually sorts. Limit and offset values are not
    range-checked here.

    Raises:
        SearchException: With the code naming the rejected parameter.
    """
    parsed_limit = parse_int(limit)
    if parsed_limit is None:
        raise SearchException(ErrorCode.NO_LIMIT)

    parsed_offset = parse_int(offset)
    if parsed_offset is None:
        raise SearchException(ErrorCode.NO_OFFSET)

    parsed_order_by = parse_int(order_by)
    if parsed_order_by is None:
        raise SearchException(ErrorCode.NO_ORDER_BY)

    try:
        direction = OrderBy(parsed_order_by)
    except ValueError:
        raise SearchException(ErrorCode.BAD_ORDER_BY)

    field = OrderField.DEFAULT
    if direction is not OrderBy.AS_IS:
        field = parse_order_field(order_field or "")
        if field is None:
            raise SearchException(ErrorCode.BAD_ORDER_FIELD)

    return SearchParams(
        limit=parsed_limit,
        offset=parsed_offset,
        query=query or "",
        order_field=field,
        order_by=direction,
    )
