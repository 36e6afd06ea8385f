"""
HTTP transport for the search client: one GET, one outcome.
"""

import logging
from typing import NamedTuple, Optional

import httpx

from usersearch.exceptions import NetworkFailure, Timeout

logger = logging.getLogger(__name__)

ACCESS_TOKEN_HEADER = "AccessToken"


class RawResponse(NamedTuple):
    status_code: int
    body: bytes


def send(
    url: str,
    token: str,
    query_string: str,
    timeout: float,
    http_client: Optional[httpx.Client] = None,
) -> RawResponse:
    """Issue ``GET url?query_string`` once, with the access token header.

    Raises:
        Timeout: no response within ``timeout`` seconds
        NetworkFailure: any other transport-level failure
    """
    full_url = f"{url}?{query_string}"
    headers = {ACCESS_TOKEN_HEADER: token}

    try:
        if http_client is not None:
            response = http_client.get(full_url, headers=headers, timeout=timeout)
        else:
            with httpx.Client(timeout=timeout) as client:
                response = client.get(full_url, headers=headers)

    except httpx.TimeoutException:
        logger.warning(f"Search request timed out after {timeout}s: {query_string}")
        raise Timeout(query_string)

    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error(f"Search request failed: {str(e)}")
        raise NetworkFailure(str(e), cause=e)

    logger.debug(f"Search request answered with {response.status_code}")
    return RawResponse(response.status_code, response.content)
