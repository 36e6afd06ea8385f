"""
API routes for the search functionality.
"""

from typing import List
from fastapi import APIRouter, Header, Query, Request
from usersearch.core.logging import logger
from usersearch.schemas import HealthCheckResponse, OrderBy, User
from usersearch.services import SearchService
from usersearch.exceptions import APIException, AuthenticationError, DatasetError
from usersearch.core.config import settings

router = APIRouter(tags=["search"])


def parse_int(raw: str, default: int = 0) -> int:
    """Lenient integer parsing: anything unparsable becomes ``default``."""
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default


def parse_order_by(raw: str) -> OrderBy:
    """Unparsable or out-of-range codes mean no sort."""
    try:
        return OrderBy(parse_int(raw))
    except ValueError:
        return OrderBy.AS_IS


def get_search_service(request: Request) -> SearchService:
    service = getattr(request.app.state, "search_service", None)
    if service is None:
        raise DatasetError("Dataset is not loaded")
    return service


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(request: Request) -> HealthCheckResponse:
    """
    Health check endpoint.

    Returns:
        Health check response with status, version and record count
    """
    logger.info("Health check requested")
    service = getattr(request.app.state, "search_service", None)
    return HealthCheckResponse(
        status="healthy" if service is not None else "degraded",
        version=settings.APP_VERSION,
        records=len(service.records) if service is not None else 0,
    )


@router.get("/", response_model=List[User])
def search(
    request: Request,
    access_token: str = Header("", alias="AccessToken"),
    query: str = Query("", description="Substring to look for"),
    order_field: str = Query("", description="Id, Name or Age"),
    order_by: str = Query("0", description="-1 descending, 0 as is, 1 ascending"),
    limit: str = Query("0", description="Maximum number of results"),
    offset: str = Query("0", description="Number of results to skip"),
) -> List[User]:
    """
    Search endpoint.

    Query parameters are parsed leniently; the only request errors are a
    wrong access token (401) and an unknown order field (400).

    Raises:
        APIException: rendered as ``{"Error": message}`` by the error handlers
    """
    if access_token != settings.ACCESS_TOKEN:
        logger.warning("Search rejected: bad access token")
        raise AuthenticationError()

    try:
        service = get_search_service(request)
        return service.search(
            query=query,
            order_field=order_field,
            order_by=parse_order_by(order_by),
            limit=parse_int(limit),
            offset=parse_int(offset),
        )

    except APIException as e:
        logger.error(f"Search error: {e.message}")
        raise

    except Exception as e:
        logger.error(f"Unexpected error: {str(e)}")
        raise APIException("SearchServer fatal error", 500)
