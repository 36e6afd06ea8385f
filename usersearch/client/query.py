"""
Query building and local validation. No network I/O happens here.
"""

import httpx
from usersearch.core.config import settings
from usersearch.exceptions import InvalidLimit, InvalidOffset
from usersearch.schemas import SearchRequest


def validate_request(request: SearchRequest) -> SearchRequest:
    """Reject negative limit/offset and cap the limit at the client maximum.

    Returns a new request; the caller's request is left untouched.
    """
    if request.limit < 0:
        raise InvalidLimit(request.limit)
    if request.offset < 0:
        raise InvalidOffset(request.offset)

    if request.limit > settings.MAX_CLIENT_LIMIT:
        return request.model_copy(update={"limit": settings.MAX_CLIENT_LIMIT})
    return request


def build_query(request: SearchRequest) -> str:
    """Validate a request and encode it as a query string.

    One extra record is asked for so the decoder can tell whether another
    page exists; an unset limit therefore goes out as ``limit=1``. Parameter
    order is fixed: limit, offset, order_by, order_field, query.

    Raises:
        InvalidLimit, InvalidOffset: for negative values
    """
    request = validate_request(request)
    params = [
        ("limit", request.limit + 1),
        ("offset", request.offset),
        ("order_by", int(request.order_by)),
        ("order_field", request.order_field),
        ("query", request.query),
    ]
    return str(httpx.QueryParams(params))
