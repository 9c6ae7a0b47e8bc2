"""Todoist REST API client: rate limiting, request execution and resources."""

from .client import APIClient
from .errors import (
    ErrorKind,
    Failure,
    InvalidRequestError,
    MalformedResponse,
    RateLimitExceeded,
    RemoteAPIError,
    TodoistError,
    TransportError,
)
from .rate_limiter import RateLimitConfig, TokenBucket
from .todoist import TodoistAPI

__all__ = [
    "APIClient",
    "ErrorKind",
    "Failure",
    "InvalidRequestError",
    "MalformedResponse",
    "RateLimitConfig",
    "RateLimitExceeded",
    "RemoteAPIError",
    "TodoistAPI",
    "TodoistError",
    "TokenBucket",
    "TransportError",
]
