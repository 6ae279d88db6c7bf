"""
Custom exceptions for the application.
"""

from .exceptions import (
    APIException,
    AccessDeniedException,
    BadAccessTokenError,
    BadEnvelopeError,
    BadOrderFieldError,
    BadRequestError,
    BadResultBodyError,
    DatasetException,
    EncodeException,
    ErrorCode,
    ErrorKind,
    LimitInvalidError,
    OffsetInvalidError,
    SearchClientError,
    SearchException,
    SearchTimeoutError,
    ServerFaultError,
    UnknownStatusError,
)

__all__ = [
    "APIException",
    "AccessDeniedException",
    "BadAccessTokenError",
    "BadEnvelopeError",
    "BadOrderFieldError",
    "BadRequestError",
    "BadResultBodyError",
    "DatasetException",
    "EncodeException",
    "ErrorCode",
    "ErrorKind",
    "LimitInvalidError",
    "OffsetInvalidError",
    "SearchClientError",
    "SearchException",
    "SearchTimeoutError",
    "ServerFaultError",
    "UnknownStatusError",
]
