"""
Custom exception classes for the User Search API and its client.
"""

from typing import Optional


# ============================================================
# Server side
# ============================================================

class APIException(Exception):
    """Base exception for API errors."""

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class AuthenticationError(APIException):
    """Exception raised when the AccessToken header does not match."""

    def __init__(self, message: str = "Bad AccessToken"):
        super().__init__(message, 401)


class BadOrderFieldError(APIException):
    """Exception raised for an order_field outside the sortable set."""

    # Sentinel reason string the client recognises
    REASON = "ErrorBadOrderField"

    def __init__(self, order_field: str = ""):
        self.order_field = order_field
        super().__init__(self.REASON, 400)


class DatasetError(APIException):
    """Exception raised when the record dataset cannot be loaded."""

    def __init__(self, message: str = "Dataset unavailable"):
        super().__init__(message, 500)


# ============================================================
# Client side
# ============================================================

class SearchClientError(Exception):
    """Base exception for every failure surfaced by SearchClient."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidLimit(SearchClientError):
    """Raised locally for a negative limit; no request is sent."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__("limit must be > 0")


class InvalidOffset(SearchClientError):
    """Raised locally for a negative offset; no request is sent."""

    def __init__(self, offset: int):
        self.offset = offset
        super().__init__("offset must be > 0")


class BadAccessToken(SearchClientError):
    def __init__(self):
        super().__init__("Bad AccessToken")


class ServerFatal(SearchClientError):
    def __init__(self):
        super().__init__("SearchServer fatal error")


class BadOrderField(SearchClientError):
    """The server rejected the requested order field."""

    def __init__(self, order_field: str):
        self.order_field = order_field
        super().__init__(f"OrderField {order_field} invalid")


class UnknownBadRequest(SearchClientError):
    """The server answered 400 with a reason the client does not know."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"unknown bad request error: {reason}")


class BadRequestUnparsable(SearchClientError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"cant unpack error json: {detail}")


class ResultUnparsable(SearchClientError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"cant unpack result json: {detail}")


class Timeout(SearchClientError):
    """No response arrived within the client timeout."""

    def __init__(self, query_string: str):
        self.query_string = query_string
        super().__init__(f"timeout for {query_string}")


class NetworkFailure(SearchClientError):
    """Connection, DNS or URL failure reported by the transport."""

    def __init__(self, detail: str, cause: Optional[Exception] = None):
        self.detail = detail
        self.cause = cause
        super().__init__(f"unknown error {detail}")


class UnknownError(SearchClientError):
    """The server answered with a status code outside the contract."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"unexpected status code {status_code}")
