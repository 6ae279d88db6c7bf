"""
API routes for the search functionality.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, Query, Request
from fastapi.responses import Response

from usersearch.core.config import settings
from usersearch.schemas import HealthCheckResponse, SearchErrorResponse
from usersearch.services import SearchService
from usersearch.services.encoder import build_search_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.API_V1_STR, tags=["search"])

ERROR_RESPONSES = {
    400: {"model": SearchErrorResponse, "description": "Rejected parameters or unreadable dataset"},
    401: {"model": SearchErrorResponse, "description": "Bad access token"},
    500: {"model": SearchErrorResponse, "description": "Internal fault"},
}


def get_search_service(request: Request) -> SearchService:
    """Search service bound to the application's dataset."""
    return request.app.state.search_service


@router.get("/health", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """
    Health check endpoint.

    Returns:
        Health check response with status and version
    """
    logger.info("Health check requested")
    return HealthCheckResponse(
        status="healthy",
        version=settings.APP_VERSION
    )


@router.get("/search", responses=ERROR_RESPONSES)
def search(
    limit: Optional[str] = Query(None, description="Maximum number of records"),
    offset: Optional[str] = Query(None, description="Number of records to skip"),
    query: str = Query("", description="Substring matched against name and about"),
    order_field: str = Query("", description="Id, Name, Age or empty for Name"),
    order_by: Optional[str] = Query(None, description="-1 descending, 0 as is, 1 ascending"),
    access_token: Optional[str] = Header(None, alias=settings.ACCESS_TOKEN_HEADER),
    service: SearchService = Depends(get_search_service),
) -> Response:
    """
    Search endpoint.

    Args:
        limit: Window size, integer
        offset: Window start, integer
        query: Case-sensitive substring filter (default: no filtering)
        order_field: Field to sort by (default: Name)
        order_by: Sort direction

    Returns:
        JSON array of records; the has-more flag travels in a response header

    Raises:
        APIException: Rendered as an error envelope by the registered handlers
    """
    logger.info(
        f"Search request: limit={limit!r}, offset={offset!r}, query={query!r}, "
        f"order_field={order_field!r}, order_by={order_by!r}"
    )

    users, has_more = service.search(
        limit=limit,
        offset=offset,
        order_by=order_by,
        query=query,
        order_field=order_field,
        access_token=access_token,
    )
    return build_search_response(users, has_more)
