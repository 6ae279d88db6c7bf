"""
HTTP client for the search endpoint.

``SearchClient.find_users`` never returns a partial result: every failure
is raised as exactly one ``SearchClientError`` subclass, chosen by
``classify_response`` from the transport outcome, status and body.
"""

import logging
from typing import List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from usersearch.core.config import settings
from usersearch.exceptions import (
    BadAccessTokenError,
    BadEnvelopeError,
    BadOrderFieldError,
    BadRequestError,
    BadResultBodyError,
    ErrorCode,
    LimitInvalidError,
    OffsetInvalidError,
    SearchClientError,
    SearchTimeoutError,
    ServerFaultError,
    UnknownStatusError,
)
from usersearch.schemas import SearchErrorResponse, SearchRequest, SearchResponse, User

logger = logging.getLogger(__name__)

_users_adapter = TypeAdapter(Optional[List[User]])


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    return errors[0]["msg"] if errors else str(exc)


def normalize_request(request: SearchRequest, max_limit: int = settings.MAX_LIMIT) -> SearchRequest:
    """
    Check a request before it leaves the process.

    Limits above ``max_limit`` are capped, not rejected.

    Raises:
        LimitInvalidError: limit is not positive.
        OffsetInvalidError: offset is negative.
    """
    if request.limit <= 0:
        raise LimitInvalidError("limit must be > 0")
    if request.offset < 0:
        raise OffsetInvalidError("offset must be > 0")
    if request.limit > max_limit:
        return request.model_copy(update={"limit": max_limit})
    return request


def classify_response(status_code: int, body: bytes, order_field: str = "") -> List[User]:
    """
    Map a completed HTTP exchange to its records or a classified error.

    Raises:
        SearchClientError: The subclass matching the first applicable rule.
    """
    if status_code == 500:
        raise ServerFaultError("SearchServer fatal error")

    if status_code == 401:
        raise BadAccessTokenError("Bad AccessToken")

    if status_code == 400:
        try:
            envelope = SearchErrorResponse.model_validate_json(body)
        except ValidationError as e:
            raise BadEnvelopeError(f"cant unpack error json: {_first_error(e)}")
        if envelope.error == ErrorCode.BAD_ORDER_FIELD.value:
            raise BadOrderFieldError(f"OrderFeld {order_field} invalid")
        raise BadRequestError(f"unknown bad request error: {envelope.error}")

    if status_code == 200:
        try:
            users = _users_adapter.validate_json(body)
        except ValidationError as e:
            raise BadResultBodyError(f"cant unpack result json: {_first_error(e)}")
        # a JSON null body is an empty match
        return users or []

    raise UnknownStatusError(f"unknown error: unexpected status {status_code}")


def decode_result(users: List[User], headers: httpx.Headers) -> SearchResponse:
    """Assemble the typed result from decoded records and response headers."""
    has_more = headers.get(settings.HAS_MORE_HEADER, "false").lower() == "true"
    return SearchResponse(users=users, has_more=has_more)


class SearchClient:
    """
    Blocking client for one search endpoint.

    Args:
        access_token: Value sent in the access token header
        url: Full URL of the search endpoint
        timeout: Per-call timeout in seconds
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``
        http_client: Optional preconfigured ``httpx.Client``; the caller
            keeps ownership of it
    """

    def __init__(
        self,
        access_token: str,
        url: str = settings.SEARCH_URL,
        timeout: float = settings.CLIENT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self.access_token = access_token
        self.url = url
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout, transport=transport)

    def close(self):
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def find_users(self, request: SearchRequest) -> SearchResponse:
        """
        Run one search.

        Raises:
            SearchClientError: On any local, transport, or server failure.
        """
        request = normalize_request(request)

        params = {
            "limit": str(request.limit),
            "offset": str(request.offset),
            "query": request.query,
            "order_field": request.order_field,
            "order_by": str(request.order_by),
        }
        logger.info(f"FindUsers: url={self.url!r}, params={params}")

        try:
            response = self._client.get(
                self.url,
                params=params,
                headers={settings.ACCESS_TOKEN_HEADER: self.access_token},
            )
        except httpx.TimeoutException:
            logger.warning(f"FindUsers timed out: {params}")
            raise SearchTimeoutError(f"timeout for {httpx.QueryParams(params)}")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"FindUsers transport failure: {e}")
            raise UnknownStatusError(f"unknown error {e}")

        try:
            users = classify_response(response.status_code, response.content, request.order_field)
        except SearchClientError as e:
            logger.warning(f"FindUsers failed ({e.kind.value}): {e.message}")
            raise

        return decode_result(users, response.headers)


__all__ = [
    "SearchClient",
    "classify_response",
    "decode_result",
    "normalize_request",
]
