"""
Response decoding: turns (status code, body) into users or a typed error.
"""

from typing import List

from pydantic import TypeAdapter, ValidationError

from usersearch.exceptions import (
    BadAccessToken,
    BadOrderField,
    BadOrderFieldError,
    BadRequestUnparsable,
    ResultUnparsable,
    ServerFatal,
    UnknownBadRequest,
    UnknownError,
)
from usersearch.schemas import SearchErrorResponse, SearchRequest, SearchResponse, User

USER_LIST = TypeAdapter(List[User])


def _parser_message(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    return "; ".join(error["msg"] for error in errors)


def decode_error(body: bytes, request: SearchRequest):
    """Build the error for a 400 answer. Always returns an exception instance."""
    try:
        payload = SearchErrorResponse.model_validate_json(body)
    except ValidationError as e:
        return BadRequestUnparsable(_parser_message(e))

    if payload.error == BadOrderFieldError.REASON:
        return BadOrderField(request.order_field)
    return UnknownBadRequest(payload.error)


def decode_users(body: bytes, request: SearchRequest) -> SearchResponse:
    try:
        users = USER_LIST.validate_json(body)
    except ValidationError as e:
        raise ResultUnparsable(_parser_message(e))

    # The query asked for one record more than the caller wants; an unset
    # limit keeps whatever the server sent
    if request.limit and len(users) > request.limit:
        return SearchResponse(users=users[:request.limit], next_page=True)
    return SearchResponse(users=users, next_page=False)


def decode_response(status_code: int, body: bytes, request: SearchRequest) -> SearchResponse:
    """Return the users for a 200 answer, raise a SearchClientError for anything else.

    ``request`` is the validated request that produced the query.
    """
    if status_code == 401:
        raise BadAccessToken()
    if status_code == 500:
        raise ServerFatal()
    if status_code == 400:
        raise decode_error(body, request)
    if status_code == 200:
        return decode_users(body, request)
    raise UnknownError(status_code)
