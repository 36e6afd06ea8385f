"""
Custom exceptions for the application.
"""

from .exceptions import (
    APIException,
    AuthenticationError,
    BadOrderFieldError,
    DatasetError,
    SearchClientError,
    InvalidLimit,
    InvalidOffset,
    BadAccessToken,
    ServerFatal,
    BadOrderField,
    UnknownBadRequest,
    BadRequestUnparsable,
    ResultUnparsable,
    Timeout,
    NetworkFailure,
    UnknownError,
)

__all__ = [
    "APIException",
    "AuthenticationError",
    "BadOrderFieldError",
    "DatasetError",
    "SearchClientError",
    "InvalidLimit",
    "InvalidOffset",
    "BadAccessToken",
    "ServerFatal",
    "BadOrderField",
    "UnknownBadRequest",
    "BadRequestUnparsable",
    "ResultUnparsable",
    "Timeout",
    "NetworkFailure",
    "UnknownError",
]
