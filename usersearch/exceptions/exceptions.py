"""
Custom exception classes for the User Search API.

Every non-success response body is an envelope ``{"error": <message>}``
whose message is one of the ``ErrorCode`` values below. The client
matches on these exact values, so they are part of the wire contract.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Closed set of error messages emitted by the search server."""

    NO_LIMIT = "no limit in request"
    NO_OFFSET = "no offset in request"
    NO_ORDER_BY = "no order_by in request"
    BAD_ORDER_FIELD = "ErrorBadOrderField"
    BAD_ORDER_BY = "have no such sort parameter"
    BAD_ACCESS_TOKEN = "Bad AccessToken"
    DATASET_MISSING = "no such file or directory"
    DATASET_CORRUPT = "can't unpack result json"
    ENCODE_FAILED = "can't Marshal users to usersToJSON"
    INTERNAL = "internal server error"


class APIException(Exception):
    """Base exception for API errors."""

    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    def to_response(self) -> dict:
        """Convert to the wire error envelope."""
        return {"error": self.message}


class SearchException(APIException):
    """Exception raised for rejected search parameters."""

    def __init__(self, code: ErrorCode):
        self.code = code
        super().__init__(code.value, 400)


class DatasetException(APIException):
    """Exception raised when the dataset cannot be read or decoded."""

    def __init__(self, code: ErrorCode = ErrorCode.DATASET_MISSING):
        self.code = code
        super().__init__(code.value, 400)


class AccessDeniedException(APIException):
    """Exception raised for a rejected access token."""

    def __init__(self):
        self.code = ErrorCode.BAD_ACCESS_TOKEN
        super().__init__(self.code.value, 401)


class EncodeException(APIException):
    """Exception raised when the result window cannot be serialized."""

    def __init__(self):
        self.code = ErrorCode.ENCODE_FAILED
        super().__init__(self.code.value, 500)


class ErrorKind(str, Enum):
    """Client-side classification of a failed search call."""

    TIMEOUT = "timeout"
    SERVER_FAULT = "server_fault"
    BAD_ENVELOPE = "bad_envelope"
    BAD_RESULT_BODY = "bad_result_body"
    BAD_ACCESS_TOKEN = "bad_access_token"
    BAD_ORDER_FIELD = "bad_order_field"
    BAD_REQUEST = "bad_request"
    LIMIT_INVALID = "limit_invalid"
    OFFSET_INVALID = "offset_invalid"
    UNKNOWN_STATUS = "unknown_status"


class SearchClientError(Exception):
    """Base exception for every failure surfaced by ``SearchClient``."""

    kind: ErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class SearchTimeoutError(SearchClientError):
    kind = ErrorKind.TIMEOUT


class ServerFaultError(SearchClientError):
    kind = ErrorKind.SERVER_FAULT


class BadEnvelopeError(SearchClientError):
    kind = ErrorKind.BAD_ENVELOPE


class BadResultBodyError(SearchClientError):
    kind = ErrorKind.BAD_RESULT_BODY


class BadAccessTokenError(SearchClientError):
    kind = ErrorKind.BAD_ACCESS_TOKEN


class BadOrderFieldError(SearchClientError):
    kind = ErrorKind.BAD_ORDER_FIELD


class BadRequestError(SearchClientError):
    kind = ErrorKind.BAD_REQUEST


class LimitInvalidError(SearchClientError):
    kind = ErrorKind.LIMIT_INVALID


class OffsetInvalidError(SearchClientError):
    kind = ErrorKind.OFFSET_INVALID


class UnknownStatusError(SearchClientError):
    kind = ErrorKind.UNKNOWN_STATUS
