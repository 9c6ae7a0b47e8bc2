"""Exceptions raised by the Todoist client.

Every failure is a single terminal outcome for the call that raised it.
Callers that need a plain value (for example a tool host rendering an error
to the assistant) can use :meth:`TodoistError.to_failure`.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ErrorKind(str, Enum):
    """Machine-readable failure categories."""

    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    REMOTE_API_ERROR = "remote_api_error"
    MALFORMED_RESPONSE = "malformed_response"
    TRANSPORT_ERROR = "transport_error"
    INVALID_REQUEST = "invalid_request"


class Failure(BaseModel):
    """Structured failure value handed to the presentation layer."""

    kind: ErrorKind
    message: str
    status_code: int | None = None
    body: str | None = None


class TodoistError(Exception):
    """Base exception for all Todoist client errors."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_failure(self) -> Failure:
        return Failure(
            kind=self.kind,
            message=self.message,
            status_code=getattr(self, "status_code", None),
            body=getattr(self, "body", None),
        )


class RateLimitExceeded(TodoistError):
    """Raised when the token bucket denies admission. No request is sent."""

    kind = ErrorKind.RATE_LIMIT_EXCEEDED

    def __init__(self, message: str = "Rate limit exceeded. Please try again later."):
        super().__init__(message)


class RemoteAPIError(TodoistError):
    """Raised for any non-2xx response.

    ``body`` is the raw response text; error bodies are not guaranteed to be
    JSON and are never parsed.
    """

    kind = ErrorKind.REMOTE_API_ERROR

    def __init__(self, status_code: int, body: str):
        super().__init__(f"API Error {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class MalformedResponse(TodoistError):
    """Raised when a 2xx body is not valid JSON, or is JSON of the wrong shape.

    ``status_code`` is None when the body was rejected after decoding, since
    the resource layer only sees the decoded value.
    """

    kind = ErrorKind.MALFORMED_RESPONSE

    def __init__(self, status_code: int | None, body: str, message: str | None = None):
        super().__init__(message or f"Malformed JSON in {status_code} response")
        self.status_code = status_code
        self.body = body


class TransportError(TodoistError):
    """Raised for network-level failures (DNS, connection, timeout)."""

    kind = ErrorKind.TRANSPORT_ERROR


class InvalidRequestError(TodoistError, ValueError):
    """Raised before any network call when the caller broke the contract."""

    kind = ErrorKind.INVALID_REQUEST
