"""Shared plumbing for resource-scoped API classes."""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from todoist_bridge.api.client import APIClient
from todoist_bridge.api.errors import InvalidRequestError, MalformedResponse

M = TypeVar("M", bound=BaseModel)

logger = logging.getLogger(__name__)


class ResourceAPI:
    """Base class holding the shared :class:`APIClient`."""

    def __init__(self, client: APIClient):
        self.client = client

    @staticmethod
    def _require_id(value: str, name: str = "id") -> str:
        """Reject empty identifiers before any request is made."""
        if not isinstance(value, str) or not value.strip():
            raise InvalidRequestError(f"{name} must be a non-empty string")
        return value

    @staticmethod
    def _parse(model: type[M], data: Any) -> M:
        """Decode one resource, turning a shape mismatch into MalformedResponse."""
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error("unexpected %s payload: %s", model.__name__, e)
            raise MalformedResponse(
                None,
                json.dumps(data),
                f"Unexpected {model.__name__} payload "
                f"({e.error_count()} validation error(s))",
            ) from e

    @classmethod
    def _parse_list(cls, model: type[M], data: Any) -> list[M]:
        """Decode a list of resources; anything but a JSON array is malformed."""
        if not isinstance(data, list):
            logger.error("expected a list of %s, got %s", model.__name__, type(data).__name__)
            raise MalformedResponse(
                None,
                json.dumps(data),
                f"Expected a list of {model.__name__} objects",
            )
        return [cls._parse(model, item) for item in data]
