"""
Typed client for the User Search API.

Every failure is raised as a ``SearchClientError`` subclass; raw transport
and parsing errors never reach the caller.
"""

import logging
from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field

from usersearch.client.decoder import decode_response
from usersearch.client.query import build_query, validate_request
from usersearch.client.transport import send
from usersearch.core.config import settings
from usersearch.schemas import SearchRequest, SearchResponse

logger = logging.getLogger(__name__)


class ClientConfig(BaseModel):
    """Connection settings, fixed for the lifetime of a client."""

    model_config = ConfigDict(frozen=True)

    access_token: str
    url: str = Field(default_factory=lambda: settings.SEARCH_API_URL)
    timeout: float = Field(default_factory=lambda: settings.SEARCH_CLIENT_TIMEOUT, gt=0)


class SearchClient:
    """Synchronous client; one HTTP request per ``find_users`` call, no retries."""

    def __init__(
        self,
        access_token: str,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        options = {"access_token": access_token}
        if url is not None:
            options["url"] = url
        if timeout is not None:
            options["timeout"] = timeout
        self.config = ClientConfig(**options)
        self.http_client = http_client

    def find_users(self, request: SearchRequest) -> SearchResponse:
        """
        Search users.

        Raises:
            InvalidLimit, InvalidOffset: before any request is sent
            Timeout, NetworkFailure: transport failures
            BadAccessToken, BadOrderField, UnknownBadRequest,
            BadRequestUnparsable, ResultUnparsable, ServerFatal,
            UnknownError: from the server answer
        """
        # build_query validates again; the decoder needs the capped limit
        request = validate_request(request)
        query_string = build_query(request)
        logger.info(f"Search request: {query_string}")

        raw = send(
            self.config.url,
            self.config.access_token,
            query_string,
            self.config.timeout,
            http_client=self.http_client,
        )
        return decode_response(raw.status_code, raw.body, request)


__all__ = ["ClientConfig", "SearchClient", "build_query", "decode_response", "send"]
